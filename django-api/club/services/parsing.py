"""Turn raw request values into domain primitives or validation errors."""

from typing import TypeVar

from club.domain import EventDate, EventTypeId, Name
from club.domain.errors import InvalidIdError, InvalidInputError

IdT = TypeVar("IdT")


def parse_id(id_type: type[IdT], raw: object, resource: str) -> IdT:
    """Parse a path identifier.

    Raises:
        InvalidIdError: If raw is not a positive integer.
    """
    try:
        return id_type.from_string(raw)
    except ValueError:
        raise InvalidIdError(resource) from None


def parse_name(raw: object, name_type: type[Name] = Name) -> Name:
    try:
        return name_type.from_input(raw)
    except ValueError as exc:
        raise InvalidInputError(str(exc)) from None


def parse_event_date(raw: object) -> EventDate:
    try:
        return EventDate.from_input(raw)
    except ValueError as exc:
        raise InvalidInputError(str(exc)) from None


def parse_event_type_ref(raw: object) -> EventTypeId:
    """Parse the type_id field of an event body."""
    if raw is None or raw == "":
        raise InvalidInputError("Event type is required")
    try:
        return EventTypeId.from_string(raw)
    except ValueError:
        raise InvalidInputError("Invalid event type ID") from None


def parse_type_ids(raw: object) -> list[EventTypeId]:
    """Parse a preferredEventTypes list, dropping repeated ids."""
    if not isinstance(raw, (list, tuple)):
        raise InvalidInputError("Preferred event types must be a list")
    type_ids: list[EventTypeId] = []
    for item in raw:
        try:
            type_id = EventTypeId.from_string(item)
        except ValueError:
            raise InvalidInputError(
                "Invalid event type ID in preferred event types"
            ) from None
        if type_id not in type_ids:
            type_ids.append(type_id)
    return type_ids
