"""Catalog of named presets loaded from a presets file."""

from dataclasses import dataclass, field
from pathlib import Path

from kkp_presets.core.config import PresetsConfig
from kkp_presets.core.exceptions import ConfigurationError, DecodeError, UnknownProviderError
from kkp_presets.core.models import ProviderKind
from kkp_presets.models.base import ProviderPreset
from kkp_presets.registry.preset_registry import PresetRegistry, default_registry
from kkp_presets.utils.logging import get_logger, log_operation

logger = get_logger(__name__)


@dataclass
class Preset:
    """A named bundle of provider presets."""

    name: str
    providers: dict[str, ProviderPreset] = field(default_factory=dict)

    def provider(self, kind: ProviderKind | str) -> ProviderPreset | None:
        """Get the preset for a provider kind, if configured."""
        key = kind.value if isinstance(kind, ProviderKind) else kind.lower()
        return self.providers.get(key)


class PresetCatalog:
    """Named presets with their provider sections decoded.

    Provider sections are decoded through a :class:`PresetRegistry` when the
    catalog is built, so an invalid file fails up front.
    """

    def __init__(self, presets: list[Preset] | None = None):
        """Initialize catalog.

        Args:
            presets: Presets in file order
        """
        self._presets: dict[str, Preset] = {}
        for preset in presets or []:
            if preset.name in self._presets:
                raise ConfigurationError(f"Duplicate preset name: {preset.name}")
            self._presets[preset.name] = preset

    @classmethod
    def from_config(
        cls, config: PresetsConfig, registry: PresetRegistry | None = None
    ) -> "PresetCatalog":
        """Build a catalog from a loaded presets file.

        Args:
            config: Presets configuration
            registry: Preset model registry (default: all providers)

        Returns:
            PresetCatalog instance

        Raises:
            ConfigurationError: If a provider section is unknown or invalid
        """
        registry = registry or default_registry()
        presets = []

        for entry in config.presets:
            providers: dict[str, ProviderPreset] = {}
            for kind, raw in entry.providers.items():
                try:
                    providers[kind.lower()] = registry.from_dict(kind, raw)
                except (UnknownProviderError, DecodeError) as e:
                    raise ConfigurationError(
                        f"Invalid provider '{kind}' in preset '{entry.name}': {e}"
                    ) from e
            presets.append(Preset(name=entry.name, providers=providers))

        return cls(presets)

    @classmethod
    def from_file(
        cls, path: str | Path, registry: PresetRegistry | None = None
    ) -> "PresetCatalog":
        """Load a catalog from a YAML presets file.

        Raises:
            ConfigurationError: If the file cannot be loaded or is invalid
        """
        catalog = cls.from_config(PresetsConfig.from_file(path), registry)
        log_operation(logger, "load_presets", path=str(path), preset_count=len(catalog))
        return catalog

    def names(self) -> list[str]:
        """Get preset names in file order."""
        return list(self._presets)

    def get(self, name: str) -> Preset | None:
        """Get a preset by name.

        Args:
            name: Preset name

        Returns:
            Preset if found, None otherwise
        """
        return self._presets.get(name)

    def all(self) -> list[Preset]:
        """Get all presets in file order."""
        return list(self._presets.values())

    def applicable(
        self, kind: ProviderKind | str, datacenter: str | None = None
    ) -> list[tuple[str, ProviderPreset]]:
        """Get enabled provider presets usable in a datacenter.

        A preset without a datacenter applies everywhere. Without a
        datacenter argument only unrestricted presets match.

        Args:
            kind: Provider kind
            datacenter: Datacenter name

        Returns:
            (preset name, provider preset) pairs in file order
        """
        matches = []
        for preset in self._presets.values():
            provider = preset.provider(kind)
            if provider is None or not provider.enabled:
                continue
            if provider.datacenter and provider.datacenter != datacenter:
                continue
            matches.append((preset.name, provider))
        return matches

    def __len__(self) -> int:
        """Get number of presets."""
        return len(self._presets)
