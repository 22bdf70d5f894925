"""Base model for provider credential presets."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from kkp_presets.codec import json_codec
from kkp_presets.codec.json_codec import WireKeys
from kkp_presets.core.formats import FormatRegistry
from kkp_presets.interfaces.marshaler import BinaryMarshaler
from kkp_presets.interfaces.validatable import Validatable, ValidationContext

# "isCutomizable" is the key existing API consumers read and write.
PROVIDER_WIRE_KEYS = WireKeys(
    {
        "datacenter": "datacenter",
        "enabled": "enabled",
        "is_customizable": "isCutomizable",
    }
)


def wire_config(wire_keys: WireKeys) -> ConfigDict:
    """Build the pydantic config shared by all preset models.

    Args:
        wire_keys: Field name to wire key table, covering every field

    Returns:
        Model config using wire_keys as alias generator
    """
    return ConfigDict(
        alias_generator=wire_keys,
        validate_by_name=True,
        validate_by_alias=True,
        strict=True,
        validate_assignment=True,
        extra="ignore",
    )


class ProviderPreset(BaseModel, Validatable, BinaryMarshaler):
    """Fields and behavior common to every provider preset.

    A zero-valued instance is valid. Instances are plain values: safe to
    read concurrently, but ``unmarshal_binary`` mutates in place and must not
    race with other access to the same instance.
    """

    model_config = wire_config(PROVIDER_WIRE_KEYS)

    datacenter: str = ""
    """If set, the preset only applies to this datacenter."""

    enabled: bool = False
    """Only enabled presets are offered in the dashboard."""

    is_customizable: bool = False
    """Non-secret fields stay editable during cluster creation."""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_zero_value(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @classmethod
    def wire_keys(cls) -> WireKeys:
        """Get the field name to wire key table of this model."""
        return cls.model_config["alias_generator"]

    @classmethod
    def from_bytes(cls, data: bytes | str) -> Self:
        """Decode a JSON payload into a new instance.

        Raises:
            DecodeError: If the payload cannot be decoded
        """
        return json_codec.decode(cls, data)

    @classmethod
    def from_dict(cls, raw: dict[str, Any] | None) -> Self:
        """Create an instance from a wire-keyed mapping.

        Raises:
            DecodeError: If a value has the wrong type
        """
        return json_codec.decode_mapping(cls, raw)

    def to_dict(self) -> dict[str, Any]:
        """Get the wire-keyed mapping with zero values omitted."""
        return json_codec.to_wire_dict(self)

    def validate(self, formats: FormatRegistry | None = None) -> None:
        """Validate this preset. No structural rules apply."""
        return None

    def context_validate(
        self,
        ctx: ValidationContext | None = None,
        formats: FormatRegistry | None = None,
    ) -> None:
        """Validate this preset based on the context it is used in.

        No context-dependent rules apply, so the context state (including
        cancellation) is not consulted.
        """
        return None

    def marshal_binary(self) -> bytes | None:
        return json_codec.marshal_binary(self)

    def unmarshal_binary(self, data: bytes | str) -> None:
        json_codec.unmarshal_binary(self, data)
