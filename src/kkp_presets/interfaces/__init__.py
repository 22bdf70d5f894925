"""Interface definitions shared by preset models."""

from kkp_presets.interfaces.marshaler import BinaryMarshaler
from kkp_presets.interfaces.validatable import Validatable, ValidationContext

__all__ = [
    "BinaryMarshaler",
    "Validatable",
    "ValidationContext",
]
