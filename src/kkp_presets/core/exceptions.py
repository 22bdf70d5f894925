"""Custom exceptions for kkp-presets."""


class PresetError(Exception):
    """Base exception for all preset errors."""


class EncodingError(PresetError):
    """Preset could not be encoded to or decoded from its wire format."""


class EncodeError(EncodingError):
    """Serializer failed while encoding a preset."""


class DecodeError(EncodingError):
    """Payload is not valid JSON or does not match the preset's field types."""


class ConfigurationError(PresetError):
    """Configuration-related errors."""


class UnknownProviderError(PresetError):
    """No preset model registered for a provider kind."""


class FormatNotFoundError(PresetError):
    """Format name not present in the format registry."""
