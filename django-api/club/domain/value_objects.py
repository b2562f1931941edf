"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import ClassVar, Self


@dataclass(frozen=True)
class _SerialId:
    """Store-issued integer identity."""

    value: int

    # Largest value an AutoField column can hold.
    max_value: ClassVar[int] = 2**31 - 1

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Identifier must be an integer")
        if self.value <= 0:
            raise ValueError("Identifier must be positive")
        if self.value > self.max_value:
            raise ValueError("Identifier is out of range")

    @classmethod
    def from_string(cls, value: str | int) -> Self:
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise ValueError("Identifier must be an integer")
        if isinstance(value, str):
            value = value.strip()
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class EventTypeId(_SerialId):
    """Unique identifier for an EventType."""


@dataclass(frozen=True)
class EventId(_SerialId):
    """Unique identifier for an Event."""


@dataclass(frozen=True)
class MemberId(_SerialId):
    """Unique identifier for a Member."""


@dataclass(frozen=True)
class Name:
    """Trimmed, non-empty display name."""

    value: str

    max_length: ClassVar[int] = 200

    def __post_init__(self) -> None:
        if not self.value.strip():
            raise ValueError("Name is required")
        if self.value != self.value.strip():
            raise ValueError("Name must not start or end with whitespace")
        if len(self.value) > self.max_length:
            raise ValueError(f"Name must be at most {self.max_length} characters")

    @classmethod
    def from_input(cls, raw: object) -> Self:
        if raw is None:
            raise ValueError("Name is required")
        if not isinstance(raw, str):
            raise ValueError("Name must be a string")
        return cls(value=raw.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EventTypeName(Name):
    """Event type names are shorter and unique across the club."""

    max_length: ClassVar[int] = 100


@dataclass(frozen=True)
class EventDate:
    """Calendar date of an event."""

    value: date

    @classmethod
    def from_input(cls, raw: object) -> Self:
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            raise ValueError("Date is required")
        if isinstance(raw, datetime):
            return cls(value=raw.date())
        if isinstance(raw, date):
            return cls(value=raw)
        if not isinstance(raw, str):
            raise ValueError("Invalid date format")
        text = raw.strip()
        try:
            return cls(value=date.fromisoformat(text))
        except ValueError:
            pass
        try:
            return cls(value=datetime.fromisoformat(text).date())
        except ValueError:
            raise ValueError("Invalid date format") from None

    def __str__(self) -> str:
        return self.value.isoformat()
