"""Registry of named string formats used by schema validation."""

import ipaddress
import re
import uuid
from collections.abc import Callable
from datetime import date, datetime
from urllib.parse import urlparse

from kkp_presets.core.exceptions import FormatNotFoundError
from kkp_presets.utils.logging import get_logger

logger = get_logger(__name__)

FormatChecker = Callable[[str], bool]

_HOSTNAME_LABEL = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _is_date_time(value: str) -> bool:
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return False
    return "T" in value or "t" in value


def _is_date(value: str) -> bool:
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def _is_ipv4(value: str) -> bool:
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def _is_ipv6(value: str) -> bool:
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def _is_hostname(value: str) -> bool:
    if not value or len(value) > 253:
        return False
    return all(_HOSTNAME_LABEL.match(label) for label in value.rstrip(".").split("."))


def _is_uri(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme) and bool(parsed.netloc or parsed.path)


def _is_email(value: str) -> bool:
    return bool(_EMAIL.match(value))


class FormatRegistry:
    """Registry of string format checkers.

    Maps a format name (as used by ``format:`` in an API schema) to a
    predicate telling whether a string conforms to it. Preset models accept
    a registry in their validation hooks so that formatted fields can be
    checked without changing the hook signatures.
    """

    def __init__(self):
        """Initialize an empty format registry."""
        self._checkers: dict[str, FormatChecker] = {}

    def add(self, name: str, checker: FormatChecker) -> None:
        """Register a format checker, replacing any existing one.

        Args:
            name: Format name (e.g. "uuid")
            checker: Predicate returning True for conforming strings
        """
        if name in self._checkers:
            logger.debug("format_replaced", format_name=name)
        self._checkers[name] = checker
        logger.debug("format_registered", format_name=name)

    def contains(self, name: str) -> bool:
        """Check whether a format is registered."""
        return name in self._checkers

    def validates(self, name: str, value: str) -> bool:
        """Check a value against a registered format.

        Args:
            name: Format name
            value: String to check

        Returns:
            True if value conforms to the format

        Raises:
            FormatNotFoundError: If no checker is registered under name
        """
        checker = self._checkers.get(name)
        if checker is None:
            raise FormatNotFoundError(f"Unknown format: {name}")
        return checker(value)

    def names(self) -> list[str]:
        """Get all registered format names, sorted."""
        return sorted(self._checkers)

    def __contains__(self, name: object) -> bool:
        return name in self._checkers

    def __len__(self) -> int:
        """Get number of registered formats."""
        return len(self._checkers)


def default_formats() -> FormatRegistry:
    """Create a registry with the common OpenAPI string formats."""
    registry = FormatRegistry()
    registry.add("date-time", _is_date_time)
    registry.add("date", _is_date)
    registry.add("uuid", _is_uuid)
    registry.add("ipv4", _is_ipv4)
    registry.add("ipv6", _is_ipv6)
    registry.add("hostname", _is_hostname)
    registry.add("uri", _is_uri)
    registry.add("email", _is_email)
    return registry
