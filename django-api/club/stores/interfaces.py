"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Driver failures are
raised as StoreFailureError; constraint outcomes the services care about
are signalled with the store-level errors below.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import date

from club.domain import (
    Event,
    EventDate,
    EventId,
    EventType,
    EventTypeId,
    EventTypeName,
    Member,
    MemberId,
    Name,
    Preference,
    Registration,
)


class DuplicateRowError(Exception):
    """An insert or update hit a uniqueness constraint."""


class RowInUseError(Exception):
    """A delete was refused because other rows still reference the row."""


class ClubStore(ABC):
    """Interface for club persistence operations."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return a context manager wrapping its block in one transaction."""
        ...

    # Event types

    @abstractmethod
    def list_event_types(self) -> list[EventType]:
        """Return all event types ordered by id."""
        ...

    @abstractmethod
    def get_event_type(self, type_id: EventTypeId) -> EventType | None:
        """Return an event type by ID, or None if not found."""
        ...

    @abstractmethod
    def event_type_exists(self, type_id: EventTypeId) -> bool:
        ...

    @abstractmethod
    def create_event_type(self, name: EventTypeName) -> EventType:
        """Insert an event type. Raises DuplicateRowError on a taken name."""
        ...

    @abstractmethod
    def update_event_type(
        self, type_id: EventTypeId, name: EventTypeName
    ) -> EventType | None:
        """Rename an event type. Raises DuplicateRowError on a taken name."""
        ...

    @abstractmethod
    def delete_event_type(self, type_id: EventTypeId) -> int:
        """Delete an event type, returning the number of rows removed."""
        ...

    @abstractmethod
    def count_events_of_type(self, type_id: EventTypeId) -> int:
        ...

    @abstractmethod
    def count_preferences_for_type(self, type_id: EventTypeId) -> int:
        ...

    # Events

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by date ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def create_event(
        self, type_id: EventTypeId, name: Name, event_date: EventDate
    ) -> Event:
        ...

    @abstractmethod
    def update_event(
        self, event_id: EventId, type_id: EventTypeId, name: Name, event_date: EventDate
    ) -> Event | None:
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> int:
        ...

    @abstractmethod
    def count_registrations_for_event(self, event_id: EventId) -> int:
        ...

    @abstractmethod
    def count_unpreferred_registrations(
        self, event_id: EventId, type_id: EventTypeId
    ) -> int:
        """Count registrations for an event whose member does not prefer type_id."""
        ...

    @abstractmethod
    def list_available_events(self, member_id: MemberId, today: date) -> list[Event]:
        """Return upcoming events of preferred types the member has not joined."""
        ...

    # Members

    @abstractmethod
    def list_members(self) -> list[Member]:
        ...

    @abstractmethod
    def get_member(self, member_id: MemberId) -> Member | None:
        ...

    @abstractmethod
    def member_exists(self, member_id: MemberId) -> bool:
        ...

    @abstractmethod
    def create_member(self, name: Name) -> Member:
        ...

    @abstractmethod
    def update_member(self, member_id: MemberId, name: Name) -> Member | None:
        ...

    @abstractmethod
    def delete_member(self, member_id: MemberId) -> int:
        ...

    # Preferences

    @abstractmethod
    def list_preferences(self, member_id: MemberId) -> list[EventTypeId]:
        ...

    @abstractmethod
    def has_preference(self, member_id: MemberId, type_id: EventTypeId) -> bool:
        ...

    @abstractmethod
    def add_preference(self, member_id: MemberId, type_id: EventTypeId) -> Preference:
        """Insert a preference row. Raises DuplicateRowError if it exists."""
        ...

    @abstractmethod
    def remove_preference(self, member_id: MemberId, type_id: EventTypeId) -> int:
        ...

    @abstractmethod
    def delete_preferences(self, member_id: MemberId) -> int:
        """Delete every preference row of a member."""
        ...

    # Registrations

    @abstractmethod
    def count_member_registrations_of_type(
        self, member_id: MemberId, type_id: EventTypeId
    ) -> int:
        ...

    @abstractmethod
    def add_registration(self, member_id: MemberId, event_id: EventId) -> Registration:
        """Insert a registration row. Raises DuplicateRowError if it exists."""
        ...

    @abstractmethod
    def remove_registration(self, member_id: MemberId, event_id: EventId) -> int:
        ...

    @abstractmethod
    def delete_registrations(self, member_id: MemberId) -> int:
        """Delete every registration row of a member."""
        ...
