"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def store(db):
    from club.stores.django_store import DjangoClubStore

    return DjangoClubStore()


@pytest.fixture
def event_types(store):
    from club.services.event_type_service import EventTypeService

    return EventTypeService(store)


@pytest.fixture
def events(store):
    from club.services.event_service import EventService

    return EventService(store)


@pytest.fixture
def members(store):
    from club.services.member_service import MemberService

    return MemberService(store)


@pytest.fixture
def associations(store):
    from club.services.association_service import AssociationService

    return AssociationService(store)


@pytest.fixture
def passeio(event_types):
    return event_types.create_event_type("Passeio")


@pytest.fixture
def treino(event_types):
    return event_types.create_event_type("Treino")


@pytest.fixture
def ride(events, passeio):
    return events.create_event(passeio.id.value, "Ride", "2025-06-01")


@pytest.fixture
def ana(members):
    return members.create_member("Ana")
