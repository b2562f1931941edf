from club.domain.models import Event, EventType, Member, Preference, Registration
from club.domain.value_objects import (
    EventDate,
    EventId,
    EventTypeId,
    EventTypeName,
    MemberId,
    Name,
)

__all__ = [
    "Event",
    "EventType",
    "Member",
    "Preference",
    "Registration",
    "EventId",
    "EventTypeId",
    "MemberId",
    "Name",
    "EventTypeName",
    "EventDate",
]
