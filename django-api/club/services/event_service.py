"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors
"""

import logging

from club.domain import Event, EventId
from club.domain.errors import (
    EventHasRegistrationsError,
    EventNotFoundError,
    InvalidInputError,
)
from club.services.association_service import AssociationService
from club.services.parsing import (
    parse_event_date,
    parse_event_type_ref,
    parse_id,
    parse_name,
)
from club.stores.interfaces import ClubStore, RowInUseError

logger = logging.getLogger(__name__)


class EventService:
    """Service for cycling event CRUD."""

    def __init__(self, store: ClubStore) -> None:
        self._store = store
        self._associations = AssociationService(store)

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_id(EventId, event_id, "event"))
        if event is None:
            raise EventNotFoundError()
        return event

    def create_event(self, type_id: object, name: object, date: object) -> Event:
        """Create an event of an existing type.

        Raises:
            InvalidInputError: If a field is missing, malformed or the type is unknown.
        """
        parsed_type = parse_event_type_ref(type_id)
        parsed_name = parse_name(name)
        parsed_date = parse_event_date(date)
        with self._store.atomic():
            if not self._store.event_type_exists(parsed_type):
                raise InvalidInputError("Event type does not exist")
            event = self._store.create_event(parsed_type, parsed_name, parsed_date)
        logger.info("Created event %s (%s on %s)", event.id, event.name, event.date)
        return event

    def update_event(
        self, event_id: str, type_id: object, name: object, date: object
    ) -> Event:
        """Replace an event's fields.

        Raises:
            InvalidIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
            InvalidInputError: If a field is missing, malformed or the type is unknown.
            EventTypeChangeBlockedError: If a registered member does not prefer the new type.
        """
        parsed_id = parse_id(EventId, event_id, "event")
        with self._store.atomic():
            current = self._store.get_event(parsed_id)
            if current is None:
                raise EventNotFoundError()
            parsed_type = parse_event_type_ref(type_id)
            parsed_name = parse_name(name)
            parsed_date = parse_event_date(date)
            if not self._store.event_type_exists(parsed_type):
                raise InvalidInputError("Event type does not exist")
            if parsed_type != current.type_id:
                self._associations.ensure_event_retype_allowed(parsed_id, parsed_type)
            event = self._store.update_event(
                parsed_id, parsed_type, parsed_name, parsed_date
            )
            if event is None:
                raise EventNotFoundError()
        logger.info("Updated event %s", parsed_id)
        return event

    def delete_event(self, event_id: str) -> int:
        """Delete an event nobody is registered for.

        Raises:
            InvalidIdError: If the event_id is not a positive integer.
            EventHasRegistrationsError: If members are registered for it.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_id(EventId, event_id, "event")
        with self._store.atomic():
            self._associations.ensure_event_deletable(parsed)
            try:
                deleted = self._store.delete_event(parsed)
            except RowInUseError as exc:
                raise EventHasRegistrationsError() from exc
            if not deleted:
                raise EventNotFoundError()
        logger.info("Deleted event %s", parsed)
        return deleted
