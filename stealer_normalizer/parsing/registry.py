"""Adapter plugin system: one layout module per stealer family."""
import pkgutil
from importlib import import_module
from typing import Dict, Optional

from verboselogs import VerboseLogger

from stealer_normalizer.models import StealerFamily

from . import adapters
from .country import CountryNormalizer
from .engine import LayoutAdapter
from .layout import AdapterLayout


class AdapterRegistry:
    """Registry mapping every stealer family to its system information adapter.

    Parameters
    ----------
    logger : verboselogs.VerboseLogger
        The program's logger.
    country_normalizer : CountryNormalizer, optional
        The country lookup handed over to the adapters.

    Raises
    ------
    LookupError
        If there is no adapter for the Generic family.

    """

    def __init__(
        self,
        logger: VerboseLogger,
        country_normalizer: Optional[CountryNormalizer] = None,
    ) -> None:
        self.logger = logger
        self.country_normalizer = country_normalizer or CountryNormalizer()
        self._adapters = self._discover_adapters()

        if StealerFamily.GENERIC not in self._adapters:
            raise LookupError("No adapter registered for the Generic family.")

        missing = [family for family in StealerFamily if family not in self._adapters]
        if missing:
            self.logger.warning(
                f"No adapter for: {', '.join(str(family) for family in missing)}. "
                "Falling back to Generic."
            )

    def _discover_adapters(self) -> Dict[StealerFamily, LayoutAdapter]:
        """Discover all layouts in the 'adapters' package."""
        discovered: Dict[StealerFamily, LayoutAdapter] = {}

        for _, name, _ in pkgutil.iter_modules(adapters.__path__):
            if name.startswith("_"):
                continue

            module = import_module(f"{adapters.__name__}.{name}")
            layout = getattr(module, "LAYOUT", None)

            if not isinstance(layout, AdapterLayout):
                continue

            if layout.family in discovered:
                self.logger.warning(f"Duplicate layout for {layout.family} in '{name}'.")
                continue

            discovered[layout.family] = LayoutAdapter(layout, self.country_normalizer)

        return discovered

    @property
    def families(self) -> list[StealerFamily]:
        return list(self._adapters)

    def adapter_for(self, family: StealerFamily) -> LayoutAdapter:
        """Return the family's adapter, the Generic one if it has none."""
        return self._adapters.get(family, self._adapters[StealerFamily.GENERIC])
