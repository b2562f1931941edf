from club.handlers.views import (
    EventDetailView,
    EventListView,
    EventTypeDetailView,
    EventTypeListView,
    MemberAvailableEventsView,
    MemberDetailView,
    MemberEventTypeView,
    MemberEventView,
    MemberListView,
)

__all__ = [
    "EventTypeListView",
    "EventTypeDetailView",
    "EventListView",
    "EventDetailView",
    "MemberListView",
    "MemberDetailView",
    "MemberEventView",
    "MemberEventTypeView",
    "MemberAvailableEventsView",
]
