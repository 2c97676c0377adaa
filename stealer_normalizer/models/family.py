"""Known infostealer families."""
from enum import Enum


class StealerFamily(str, Enum):
    """Tag of the malware family which produced a system information file."""

    GENERIC = "Generic"
    LUMMA = "Lumma"
    EXELA_STEALER = "ExelaStealer"
    ASTRIS = "Astris"
    BLANK_GRABBER = "Blank Grabber"
    ATOMIC_MAC = "Atomic Mac"
    CRYPTBOT = "CryptBot"
    DARKCRYSTAL_RAT = "DarkCrystal RAT"
    MEDUZA = "Meduza"
    NOXTY = "Noxty"
    PHEMEDRONE = "Phemedrone"
    PREDATOR_THE_THIEF = "PredatorTheThief"
    RACCOON = "Raccoon"
    REDLINE_META = "RedLine/META"
    RHADAMANTHYS = "Rhadamanthys"
    RISEPRO = "RisePro"
    RL_STEALER = "RL Stealer"
    STEALC = "StealC"
    STEALERIUM = "Stealerium"
    SKALKA = "Skalka"
    VIDAR = "Vidar"
    XFILES = "XFiles"
    AILUROPHILE = "Ailurophile"
    ARECH_CLIENT_V2 = "ArechClientV2"
    BANSHEE = "Banshee"

    def __str__(self) -> str:
        return self.value
