"""Data model to define the system information of a compromised host."""
from dataclasses import dataclass, fields

from .family import StealerFamily

TEXT_FIELDS: tuple[str, ...] = (
    "os",
    "ip_address",
    "username",
    "cpu",
    "ram",
    "computer_name",
    "gpu",
    "country",
    "hwid",
    "file_path",
    "antivirus",
)


@dataclass
class SystemInfo:
    """Class defining a normalized system information record.

    Attributes
    ----------
    stealer_type : stealer_normalizer.models.StealerFamily
        The family detected for the source file.
    os : str, optional
        The operating system name and version.
    ip_address : str, optional
        The public IP address of the host.
    username : str, optional
        The session's user name, without its domain prefix.
    cpu : str, optional
        The processor model.
    ram : str, optional
        The amount of memory.
    computer_name : str, optional
        The host name.
    gpu : str, optional
        The first (or only) graphic card.
    country : str, optional
        The 2-letter country code, or the raw country text if it can't be mapped.
    hwid : str, optional
        The hardware or machine identifier.
    file_path : str, optional
        The path of the malware executable.
    antivirus : str, optional
        The installed antivirus products, comma-separated.
    log_date : str, optional
        The infection date as ``YYYY-MM-DD``.
    log_time : str
        The infection time as ``HH:mm:ss``.

    """

    stealer_type: StealerFamily = StealerFamily.GENERIC
    os: str | None = None
    ip_address: str | None = None
    username: str | None = None
    cpu: str | None = None
    ram: str | None = None
    computer_name: str | None = None
    gpu: str | None = None
    country: str | None = None
    hwid: str | None = None
    file_path: str | None = None
    antivirus: str | None = None
    log_date: str | None = None
    log_time: str = "00:00:00"

    def set_once(self, name: str, value: str | None) -> bool:
        """Assign a field unless it already holds a value.

        Parameters
        ----------
        name : str
            The field name.
        value : str, optional
            The value to assign. None is never assigned.

        Returns
        -------
        bool
            True if the field was assigned.

        Raises
        ------
        AttributeError
            If the record has no such field.

        """
        if name not in _FIELD_NAMES:
            raise AttributeError(f"SystemInfo has no field '{name}'.")

        if value is None or getattr(self, name) is not None:
            return False

        setattr(self, name, value)
        return True

    def is_set(self, name: str) -> bool:
        """Tell whether a field already holds a value."""
        return getattr(self, name) is not None


_FIELD_NAMES = frozenset(field.name for field in fields(SystemInfo))
