"""Registry mapping provider kinds to preset models."""

from typing import Any

from kkp_presets.core.exceptions import UnknownProviderError
from kkp_presets.core.models import ProviderKind
from kkp_presets.models import AKS, AWS, EKS, GCP, GKE, Azure, Digitalocean, Hetzner, Openstack
from kkp_presets.models.base import ProviderPreset
from kkp_presets.utils.logging import get_logger

logger = get_logger(__name__)


def _kind_key(kind: ProviderKind | str) -> str:
    if isinstance(kind, ProviderKind):
        return kind.value
    return kind.lower()


class PresetRegistry:
    """Registry of preset models keyed by provider kind.

    Together with the models this forms the tagged union over the preset
    family: the kind is the tag, the model class decodes the payload.
    """

    def __init__(self) -> None:
        """Initialize preset registry."""
        self._models: dict[str, type[ProviderPreset]] = {}
        logger.debug("preset_registry_initialized")

    def register(self, kind: ProviderKind | str, model_cls: type[ProviderPreset]) -> None:
        """Register a preset model for a provider kind.

        Args:
            kind: Provider kind
            model_cls: Preset model class
        """
        key = _kind_key(kind)
        if key in self._models:
            logger.warning("preset_model_already_registered", provider=key)
            return

        self._models[key] = model_cls
        logger.debug("preset_model_registered", provider=key, model=model_cls.__name__)

    def unregister(self, kind: ProviderKind | str) -> bool:
        """Unregister the preset model of a provider kind.

        Args:
            kind: Provider kind

        Returns:
            True if a model was found and removed
        """
        key = _kind_key(kind)
        if key not in self._models:
            logger.warning("preset_model_not_found_for_unregister", provider=key)
            return False

        del self._models[key]
        logger.debug("preset_model_unregistered", provider=key)
        return True

    def get(self, kind: ProviderKind | str) -> type[ProviderPreset] | None:
        """Get the preset model of a provider kind.

        Args:
            kind: Provider kind

        Returns:
            Model class if registered, None otherwise
        """
        return self._models.get(_kind_key(kind))

    def resolve(self, kind: ProviderKind | str) -> type[ProviderPreset]:
        """Get the preset model of a provider kind.

        Raises:
            UnknownProviderError: If no model is registered for kind
        """
        model_cls = self.get(kind)
        if model_cls is None:
            raise UnknownProviderError(f"No preset model registered for provider: {_kind_key(kind)}")
        return model_cls

    def kinds(self) -> list[str]:
        """Get all registered provider kinds, in registration order."""
        return list(self._models)

    def decode(self, kind: ProviderKind | str, data: bytes | str) -> ProviderPreset:
        """Decode a JSON payload as the preset of a provider kind.

        Raises:
            UnknownProviderError: If no model is registered for kind
            DecodeError: If the payload cannot be decoded
        """
        return self.resolve(kind).from_bytes(data)

    def from_dict(self, kind: ProviderKind | str, raw: dict[str, Any] | None) -> ProviderPreset:
        """Create the preset of a provider kind from a wire-keyed mapping.

        Raises:
            UnknownProviderError: If no model is registered for kind
            DecodeError: If a value has the wrong type
        """
        return self.resolve(kind).from_dict(raw)

    def __contains__(self, kind: object) -> bool:
        if not isinstance(kind, str):
            return False
        return _kind_key(kind) in self._models

    def __len__(self) -> int:
        """Get number of registered preset models."""
        return len(self._models)


def default_registry() -> PresetRegistry:
    """Create a registry with a model for every provider kind."""
    registry = PresetRegistry()
    registry.register(ProviderKind.AWS, AWS)
    registry.register(ProviderKind.EKS, EKS)
    registry.register(ProviderKind.AKS, AKS)
    registry.register(ProviderKind.GKE, GKE)
    registry.register(ProviderKind.AZURE, Azure)
    registry.register(ProviderKind.GCP, GCP)
    registry.register(ProviderKind.OPENSTACK, Openstack)
    registry.register(ProviderKind.HETZNER, Hetzner)
    registry.register(ProviderKind.DIGITALOCEAN, Digitalocean)
    return registry
