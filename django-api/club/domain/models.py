"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in club/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime

from club.domain.value_objects import EventId, EventTypeId, MemberId


@dataclass(frozen=True)
class EventType:
    """Domain representation of an EventType."""

    id: EventTypeId
    name: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    type_id: EventTypeId
    type_name: str
    name: str
    date: date
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Member:
    """Domain representation of a Member and its associations."""

    id: MemberId
    name: str
    created_at: datetime
    updated_at: datetime
    preferred_event_types: tuple[EventTypeId, ...] = ()
    registered_events: tuple[EventId, ...] = ()


@dataclass(frozen=True)
class Preference:
    """A member's preference for an event type."""

    member_id: MemberId
    event_type_id: EventTypeId
    created_at: datetime


@dataclass(frozen=True)
class Registration:
    """A member's registration for an event."""

    member_id: MemberId
    event_id: EventId
    created_at: datetime
