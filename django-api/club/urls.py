from django.urls import path

from club.handlers import (
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

urlpatterns = [
    path("event-types", EventTypeListView.as_view(), name="event-type-list"),
    path(
        "event-types/<str:type_id>",
        EventTypeDetailView.as_view(),
        name="event-type-detail",
    ),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("members", MemberListView.as_view(), name="member-list"),
    path("members/<str:member_id>", MemberDetailView.as_view(), name="member-detail"),
    path(
        "members/<str:member_id>/events/<str:event_id>",
        MemberEventView.as_view(),
        name="member-event",
    ),
    path(
        "members/<str:member_id>/event-types/<str:type_id>",
        MemberEventTypeView.as_view(),
        name="member-event-type",
    ),
    path(
        "members/<str:member_id>/available-events",
        MemberAvailableEventsView.as_view(),
        name="member-available-events",
    ),
]
