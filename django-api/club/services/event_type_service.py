"""Event type service."""

import logging

from club.domain import EventType, EventTypeId, EventTypeName
from club.domain.errors import (
    EventTypeInUseError,
    EventTypeNameTakenError,
    EventTypeNotFoundError,
)
from club.services.association_service import AssociationService
from club.services.parsing import parse_id, parse_name
from club.stores.interfaces import ClubStore, DuplicateRowError, RowInUseError

logger = logging.getLogger(__name__)


class EventTypeService:
    """Service for event type CRUD."""

    def __init__(self, store: ClubStore) -> None:
        self._store = store
        self._associations = AssociationService(store)

    def list_event_types(self) -> list[EventType]:
        return self._store.list_event_types()

    def get_event_type(self, type_id: str) -> EventType:
        """Return an event type by ID.

        Raises:
            InvalidIdError: If type_id is not a positive integer.
            EventTypeNotFoundError: If the event type does not exist.
        """
        event_type = self._store.get_event_type(
            parse_id(EventTypeId, type_id, "event type")
        )
        if event_type is None:
            raise EventTypeNotFoundError()
        return event_type

    def create_event_type(self, name: object) -> EventType:
        """Create an event type.

        Raises:
            InvalidInputError: If the name is missing or blank.
            EventTypeNameTakenError: If another event type has the name.
        """
        parsed = parse_name(name, EventTypeName)
        try:
            event_type = self._store.create_event_type(parsed)
        except DuplicateRowError as exc:
            raise EventTypeNameTakenError() from exc
        logger.info("Created event type %s (%s)", event_type.id, event_type.name)
        return event_type

    def update_event_type(self, type_id: str, name: object) -> EventType:
        """Rename an event type; existence is checked before the name."""
        parsed_id = parse_id(EventTypeId, type_id, "event type")
        with self._store.atomic():
            if not self._store.event_type_exists(parsed_id):
                raise EventTypeNotFoundError()
            parsed_name = parse_name(name, EventTypeName)
            try:
                event_type = self._store.update_event_type(parsed_id, parsed_name)
            except DuplicateRowError as exc:
                raise EventTypeNameTakenError() from exc
            if event_type is None:
                raise EventTypeNotFoundError()
        logger.info("Updated event type %s", parsed_id)
        return event_type

    def delete_event_type(self, type_id: str) -> int:
        """Delete an event type that no event or preference references.

        Raises:
            InvalidIdError: If type_id is not a positive integer.
            EventTypeInUseError: If events or preferences reference the type.
            EventTypeNotFoundError: If the event type does not exist.
        """
        parsed = parse_id(EventTypeId, type_id, "event type")
        with self._store.atomic():
            self._associations.ensure_event_type_deletable(parsed)
            try:
                deleted = self._store.delete_event_type(parsed)
            except RowInUseError as exc:
                raise EventTypeInUseError(
                    "Cannot delete event type that is still referenced"
                ) from exc
            if not deleted:
                raise EventTypeNotFoundError()
        logger.info("Deleted event type %s", parsed)
        return deleted
