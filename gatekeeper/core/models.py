"""Domain models for the Gatekeeper admission and credential system.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from datetime import date
from enum import IntEnum


@dataclass(frozen=True)
class Visitor:
    """A single person arriving at the venue.

    Carries no identity beyond its fields: two visitors with the same
    values compare equal.
    """

    is_male: bool
    sequence_number: int = 0

    def __post_init__(self) -> None:
        """Validate visitor invariants on creation."""
        if not isinstance(self.is_male, bool):
            raise TypeError(
                f"is_male must be a bool, got {type(self.is_male).__name__}"
            )


class Weekday(IntEnum):
    """Day of the week.

    Values match ``datetime.date.weekday()`` so a calendar date can be
    converted once at the application boundary and passed in explicitly.
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_date(cls, day: date) -> "Weekday":
        """Return the weekday of a calendar date."""
        return cls(day.weekday())

    @classmethod
    def parse(cls, name: str) -> "Weekday":
        """Parse a case-insensitive day name such as ``"friday"``.

        Raises:
            ValueError: If the name is not a day of the week.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown weekday: {name!r}") from None
