"""Validation capability shared by all preset models."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from kkp_presets.core.formats import FormatRegistry


@dataclass
class ValidationContext:
    """Context passed to context-aware validation.

    Carries an optional deadline, a cancellation flag and arbitrary values
    for validators that need external state (e.g. cross-referenced objects).
    """

    deadline: datetime | None = None
    cancelled: bool = False
    values: dict[str, Any] = field(default_factory=dict)

    def cancel(self) -> None:
        """Mark the context as cancelled."""
        self.cancelled = True

    @property
    def expired(self) -> bool:
        """Whether the deadline has passed."""
        if self.deadline is None:
            return False
        # naive deadlines are local time
        if self.deadline.tzinfo is None:
            return datetime.now() >= self.deadline
        return datetime.now(timezone.utc) >= self.deadline

    @property
    def done(self) -> bool:
        """Whether the context is cancelled or expired."""
        return self.cancelled or self.expired

    def value(self, key: str, default: Any = None) -> Any:
        """Get a context value."""
        return self.values.get(key, default)


class Validatable(ABC):
    """Abstract interface for models that can be validated.

    Structural validation looks only at the model's own fields and static
    format rules. Context validation may consult the context for
    cross-referential or externally dependent checks. Both return None on
    success and raise on failure.
    """

    @abstractmethod
    def validate(self, formats: FormatRegistry | None = None) -> None:
        """Validate the model's own fields.

        Args:
            formats: Registry of named string formats

        Raises:
            PresetError: If the model is invalid
        """

    @abstractmethod
    def context_validate(
        self,
        ctx: ValidationContext | None = None,
        formats: FormatRegistry | None = None,
    ) -> None:
        """Validate the model using external context.

        Args:
            ctx: Validation context
            formats: Registry of named string formats

        Raises:
            PresetError: If the model is invalid
        """
