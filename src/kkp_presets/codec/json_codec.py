"""JSON wire codec for preset models.

Models declare their wire keys in an explicit :class:`WireKeys` table rather
than per-field annotations. The table doubles as the pydantic alias
generator, so encoding and decoding both go through the same key strings.
Zero-valued fields are omitted on encode, matching ``omitempty`` semantics
of the API schema.
"""

from collections.abc import Iterator, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from kkp_presets.core.exceptions import DecodeError, EncodeError

ModelT = TypeVar("ModelT", bound=BaseModel)


class WireKeys(Mapping[str, str]):
    """Mapping of Python field name to JSON wire key.

    Instances are callable so they can be passed as ``alias_generator``.
    Looking up a field with no entry raises KeyError, which surfaces as an
    error when the model class is defined.
    """

    def __init__(self, table: Mapping[str, str]):
        self._table = dict(table)

    def __call__(self, field_name: str) -> str:
        try:
            return self._table[field_name]
        except KeyError:
            raise KeyError(f"No wire key declared for field: {field_name}") from None

    def __getitem__(self, field_name: str) -> str:
        return self._table[field_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"WireKeys({self._table!r})"

    def extend(self, table: Mapping[str, str]) -> "WireKeys":
        """Return a new table with additional entries."""
        return WireKeys({**self._table, **table})

    def field_for(self, wire_key: str) -> str | None:
        """Reverse lookup of a wire key."""
        return next((name for name, key in self._table.items() if key == wire_key), None)


def _is_json_null(data: bytes | str) -> bool:
    if isinstance(data, str):
        return data.strip() == "null"
    return bytes(data).strip() == b"null"


def encode(model: BaseModel) -> bytes:
    """Encode a model to JSON bytes using its wire keys.

    Raises:
        EncodeError: If the serializer fails
    """
    try:
        return to_json(to_wire_dict(model))
    except PydanticSerializationError as e:
        raise EncodeError(f"Failed to encode {type(model).__name__}: {e}") from e


def to_wire_dict(model: BaseModel) -> dict[str, Any]:
    """Get the wire-keyed mapping of a model with zero values omitted.

    Keys follow the order of the model's WireKeys table.

    Raises:
        PydanticSerializationError: If a field value cannot be serialized
    """
    raw = model.model_dump(by_alias=True, exclude_defaults=True, mode="json")
    wire_keys = model.model_config.get("alias_generator")
    if not isinstance(wire_keys, WireKeys):
        return raw
    return {key: raw[key] for key in wire_keys.values() if key in raw}


def decode(model_cls: type[ModelT], data: bytes | str) -> ModelT:
    """Decode JSON into a new model instance.

    A bare ``null`` document yields the zero-valued model. Unknown keys are
    ignored.

    Raises:
        DecodeError: If data is not valid JSON, not a JSON object, or holds a
            value of the wrong type for a known field, or bytes are not
            valid UTF-8
    """
    if not isinstance(data, (bytes, bytearray, str)):
        raise DecodeError(
            f"Failed to decode {model_cls.__name__}: expected bytes or str, "
            f"got {type(data).__name__}"
        )

    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Failed to decode {model_cls.__name__}: {e}") from e

    if _is_json_null(data):
        return model_cls()

    try:
        return model_cls.model_validate_json(data, by_alias=True, by_name=False)
    except ValidationError as e:
        raise DecodeError(f"Failed to decode {model_cls.__name__}: {e}") from e


def decode_mapping(model_cls: type[ModelT], raw: Mapping[str, Any] | None) -> ModelT:
    """Validate a wire-keyed mapping (e.g. a parsed YAML section).

    Raises:
        DecodeError: If raw is not a mapping or holds a value of the wrong type
    """
    if raw is None:
        return model_cls()

    try:
        return model_cls.model_validate(raw, by_alias=True, by_name=False)
    except ValidationError as e:
        raise DecodeError(f"Failed to decode {model_cls.__name__}: {e}") from e


def marshal_binary(model: BaseModel | None) -> bytes | None:
    """Encode a model, treating an absent model as nothing to encode.

    Returns:
        Encoded bytes, or None when model is None

    Raises:
        EncodeError: If the serializer fails
    """
    if model is None:
        return None
    return encode(model)


def unmarshal_binary(model: BaseModel, data: bytes | str) -> None:
    """Replace a model's state with the decoded payload.

    The payload is decoded into a fresh instance first; the receiver's field
    storage is then swapped in a single attribute write, so it is never seen
    half-updated. On failure the receiver is untouched. Callers must
    synchronize concurrent access to the same instance.

    Raises:
        DecodeError: If the payload cannot be decoded
    """
    decoded = decode(type(model), data)
    object.__setattr__(model, "__dict__", decoded.__dict__)
    object.__setattr__(model, "__pydantic_fields_set__", decoded.__pydantic_fields_set__)
