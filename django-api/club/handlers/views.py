"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let domain errors propagate to the exception handler
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from club.domain.errors import InvalidInputError
from club.handlers.serializers import (
    EventSerializer,
    EventTypeSerializer,
    MemberSerializer,
    PreferenceSerializer,
    RegistrationSerializer,
)
from club.services.association_service import AssociationService
from club.services.event_service import EventService
from club.services.event_type_service import EventTypeService
from club.services.member_service import MemberService
from club.stores.django_store import DjangoClubStore
from club.stores.interfaces import ClubStore


def _body(request: Request) -> dict:
    if not isinstance(request.data, dict):
        raise InvalidInputError("Request body must be a JSON object")
    return request.data


def _deleted(count: int) -> Response:
    return Response({"count": count}, status=status.HTTP_200_OK)


class ClubAPIView(APIView):
    """Base view that builds services on a fresh store per request."""

    store_class: type[ClubStore] = DjangoClubStore

    def get_store(self) -> ClubStore:
        return self.store_class()


class EventTypeListView(ClubAPIView):
    """Handler for GET/POST /event-types"""

    def get(self, request: Request) -> Response:
        event_types = EventTypeService(self.get_store()).list_event_types()
        return Response(EventTypeSerializer(event_types, many=True).data)

    def post(self, request: Request) -> Response:
        event_type = EventTypeService(self.get_store()).create_event_type(
            _body(request).get("name")
        )
        return Response(
            EventTypeSerializer(event_type).data, status=status.HTTP_201_CREATED
        )


class EventTypeDetailView(ClubAPIView):
    """Handler for GET/PUT/DELETE /event-types/{type_id}"""

    def get(self, request: Request, type_id: str) -> Response:
        event_type = EventTypeService(self.get_store()).get_event_type(type_id)
        return Response(EventTypeSerializer(event_type).data)

    def put(self, request: Request, type_id: str) -> Response:
        event_type = EventTypeService(self.get_store()).update_event_type(
            type_id, _body(request).get("name")
        )
        return Response(EventTypeSerializer(event_type).data)

    def delete(self, request: Request, type_id: str) -> Response:
        return _deleted(EventTypeService(self.get_store()).delete_event_type(type_id))


class EventListView(ClubAPIView):
    """Handler for GET/POST /events"""

    def get(self, request: Request) -> Response:
        events = EventService(self.get_store()).list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        body = _body(request)
        event = EventService(self.get_store()).create_event(
            body.get("type_id"), body.get("name"), body.get("date")
        )
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(ClubAPIView):
    """Handler for GET/PUT/DELETE /events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = EventService(self.get_store()).get_event(event_id)
        return Response(EventSerializer(event).data)

    def put(self, request: Request, event_id: str) -> Response:
        body = _body(request)
        event = EventService(self.get_store()).update_event(
            event_id, body.get("type_id"), body.get("name"), body.get("date")
        )
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        return _deleted(EventService(self.get_store()).delete_event(event_id))


class MemberListView(ClubAPIView):
    """Handler for GET/POST /members"""

    def get(self, request: Request) -> Response:
        members = MemberService(self.get_store()).list_members()
        return Response(MemberSerializer(members, many=True).data)

    def post(self, request: Request) -> Response:
        body = _body(request)
        member = MemberService(self.get_store()).create_member(
            body.get("name"), body.get("preferredEventTypes")
        )
        return Response(MemberSerializer(member).data, status=status.HTTP_201_CREATED)


class MemberDetailView(ClubAPIView):
    """Handler for GET/PUT/DELETE /members/{member_id}"""

    def get(self, request: Request, member_id: str) -> Response:
        member = MemberService(self.get_store()).get_member(member_id)
        return Response(MemberSerializer(member).data)

    def put(self, request: Request, member_id: str) -> Response:
        body = _body(request)
        member = MemberService(self.get_store()).update_member(
            member_id, body.get("name"), body.get("preferredEventTypes")
        )
        return Response(MemberSerializer(member).data)

    def delete(self, request: Request, member_id: str) -> Response:
        MemberService(self.get_store()).delete_member(member_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class MemberEventView(ClubAPIView):
    """Handler for POST/DELETE /members/{member_id}/events/{event_id}"""

    def post(self, request: Request, member_id: str, event_id: str) -> Response:
        registration = AssociationService(
            self.get_store()
        ).register_member_for_event(member_id, event_id)
        return Response(
            RegistrationSerializer(registration).data, status=status.HTTP_201_CREATED
        )

    def delete(self, request: Request, member_id: str, event_id: str) -> Response:
        return _deleted(
            AssociationService(self.get_store()).unregister_member_from_event(
                member_id, event_id
            )
        )


class MemberEventTypeView(ClubAPIView):
    """Handler for POST/DELETE /members/{member_id}/event-types/{type_id}"""

    def post(self, request: Request, member_id: str, type_id: str) -> Response:
        preference = AssociationService(self.get_store()).add_preference(
            member_id, type_id
        )
        return Response(
            PreferenceSerializer(preference).data, status=status.HTTP_201_CREATED
        )

    def delete(self, request: Request, member_id: str, type_id: str) -> Response:
        return _deleted(
            AssociationService(self.get_store()).remove_preference(member_id, type_id)
        )


class MemberAvailableEventsView(ClubAPIView):
    """Handler for GET /members/{member_id}/available-events"""

    def get(self, request: Request, member_id: str) -> Response:
        events = AssociationService(self.get_store()).list_available_events(member_id)
        return Response(EventSerializer(events, many=True).data)
