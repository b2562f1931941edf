"""Unit tests for the services against a mocked store.

These test error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from contextlib import nullcontext
from datetime import date, datetime, timezone
from unittest.mock import create_autospec

import pytest

from club.domain import Event, EventId, EventTypeId, MemberId
from club.domain.errors import (
    AlreadyRegisteredError,
    EventHasRegistrationsError,
    EventNotFoundError,
    EventTypeChangeBlockedError,
    EventTypeInUseError,
    EventTypeNameTakenError,
    EventTypeNotFoundError,
    InvalidIdError,
    InvalidInputError,
    MemberNotFoundError,
    PreferenceInUseError,
    PreferenceMismatchError,
    RegistrationNotFoundError,
)
from club.services.association_service import AssociationService
from club.services.event_service import EventService
from club.services.event_type_service import EventTypeService
from club.services.member_service import MemberService
from club.stores.interfaces import ClubStore, DuplicateRowError

NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def store():
    store = create_autospec(ClubStore, instance=True)
    store.atomic.return_value = nullcontext()
    return store


def make_event(event_id: int = 5, type_id: int = 2) -> Event:
    return Event(
        id=EventId(event_id),
        type_id=EventTypeId(type_id),
        type_name="Passeio",
        name="Ride",
        date=date(2025, 6, 1),
        created_at=NOW,
        updated_at=NOW,
    )


def call_names(store) -> list[str]:
    return [name for name, _args, _kwargs in store.mock_calls]


class TestEventTypeService:
    """Tests for EventTypeService."""

    def test_get_event_type_invalid_id_raises_error(self, store):
        with pytest.raises(InvalidIdError):
            EventTypeService(store).get_event_type("abc")
        store.get_event_type.assert_not_called()

    def test_get_event_type_not_found_raises_error(self, store):
        store.get_event_type.return_value = None
        with pytest.raises(EventTypeNotFoundError):
            EventTypeService(store).get_event_type("3")
        store.get_event_type.assert_called_once_with(EventTypeId(3))

    def test_create_rejects_blank_name_without_touching_store(self, store):
        with pytest.raises(InvalidInputError, match="Name is required"):
            EventTypeService(store).create_event_type("   ")
        store.create_event_type.assert_not_called()

    def test_create_duplicate_name_is_a_conflict(self, store):
        store.create_event_type.side_effect = DuplicateRowError("taken")
        with pytest.raises(EventTypeNameTakenError):
            EventTypeService(store).create_event_type("Passeio")

    def test_update_checks_existence_before_name(self, store):
        store.event_type_exists.return_value = False
        with pytest.raises(EventTypeNotFoundError):
            EventTypeService(store).update_event_type("3", "")

    def test_delete_refused_while_events_use_the_type(self, store):
        store.count_events_of_type.return_value = 2
        with pytest.raises(EventTypeInUseError, match="used by events"):
            EventTypeService(store).delete_event_type("3")
        store.delete_event_type.assert_not_called()

    def test_delete_refused_while_members_prefer_the_type(self, store):
        store.count_events_of_type.return_value = 0
        store.count_preferences_for_type.return_value = 1
        with pytest.raises(EventTypeInUseError, match="preferred by members"):
            EventTypeService(store).delete_event_type("3")
        store.delete_event_type.assert_not_called()

    def test_delete_missing_type_raises_not_found(self, store):
        store.count_events_of_type.return_value = 0
        store.count_preferences_for_type.return_value = 0
        store.delete_event_type.return_value = 0
        with pytest.raises(EventTypeNotFoundError):
            EventTypeService(store).delete_event_type("3")


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, store):
        with pytest.raises(InvalidIdError):
            EventService(store).get_event("not-a-number")

    def test_get_event_not_found_raises_error(self, store):
        store.get_event.return_value = None
        with pytest.raises(EventNotFoundError):
            EventService(store).get_event("9")

    @pytest.mark.parametrize(
        ("type_id", "name", "day", "message"),
        [
            (None, "Ride", "2025-06-01", "Event type is required"),
            ("x", "Ride", "2025-06-01", "Invalid event type ID"),
            (1, "", "2025-06-01", "Name is required"),
            (1, "Ride", None, "Date is required"),
            (1, "Ride", "01/06/2025", "Invalid date format"),
        ],
    )
    def test_create_validates_fields(self, store, type_id, name, day, message):
        with pytest.raises(InvalidInputError, match=message):
            EventService(store).create_event(type_id, name, day)
        store.create_event.assert_not_called()

    def test_create_requires_existing_type(self, store):
        store.event_type_exists.return_value = False
        with pytest.raises(InvalidInputError, match="Event type does not exist"):
            EventService(store).create_event(4, "Ride", "2025-06-01")
        store.create_event.assert_not_called()

    def test_update_missing_event_is_not_found_before_validation(self, store):
        store.get_event.return_value = None
        with pytest.raises(EventNotFoundError):
            EventService(store).update_event("5", None, "", "garbage")

    def test_update_retype_blocked_by_unpreferred_registrations(self, store):
        store.get_event.return_value = make_event(type_id=2)
        store.event_type_exists.return_value = True
        store.count_unpreferred_registrations.return_value = 1
        with pytest.raises(EventTypeChangeBlockedError):
            EventService(store).update_event("5", 3, "Ride", "2025-06-01")
        store.update_event.assert_not_called()

    def test_update_same_type_skips_retype_check(self, store):
        store.get_event.return_value = make_event(type_id=2)
        store.event_type_exists.return_value = True
        store.update_event.return_value = make_event(type_id=2)
        EventService(store).update_event("5", 2, "Ride", "2025-06-01")
        store.count_unpreferred_registrations.assert_not_called()

    def test_delete_refused_with_registrations(self, store):
        store.count_registrations_for_event.return_value = 1
        with pytest.raises(EventHasRegistrationsError):
            EventService(store).delete_event("5")
        store.delete_event.assert_not_called()


class TestAssociationService:
    """Tests for the registration rule and junction operations."""

    def test_register_requires_member(self, store):
        store.member_exists.return_value = False
        with pytest.raises(MemberNotFoundError):
            AssociationService(store).register_member_for_event("1", "5")
        store.get_event.assert_not_called()

    def test_register_requires_event(self, store):
        store.member_exists.return_value = True
        store.get_event.return_value = None
        with pytest.raises(EventNotFoundError):
            AssociationService(store).register_member_for_event("1", "5")

    def test_register_requires_matching_preference(self, store):
        store.member_exists.return_value = True
        store.get_event.return_value = make_event(type_id=2)
        store.has_preference.return_value = False
        with pytest.raises(PreferenceMismatchError):
            AssociationService(store).register_member_for_event("1", "5")
        store.has_preference.assert_called_once_with(MemberId(1), EventTypeId(2))
        store.add_registration.assert_not_called()

    def test_register_twice_is_a_conflict(self, store):
        store.member_exists.return_value = True
        store.get_event.return_value = make_event()
        store.has_preference.return_value = True
        store.add_registration.side_effect = DuplicateRowError("exists")
        with pytest.raises(AlreadyRegisteredError):
            AssociationService(store).register_member_for_event("1", "5")

    def test_register_runs_in_one_transaction(self, store):
        store.member_exists.return_value = True
        store.get_event.return_value = make_event()
        store.has_preference.return_value = True
        AssociationService(store).register_member_for_event("1", "5")
        names = call_names(store)
        assert names[0] == "atomic"
        assert names.index("has_preference") < names.index("add_registration")

    def test_register_invalid_ids(self, store):
        with pytest.raises(InvalidIdError, match="Invalid event ID"):
            AssociationService(store).register_member_for_event("1", "zero")

    def test_unregister_missing_row_raises_not_found(self, store):
        store.remove_registration.return_value = 0
        with pytest.raises(RegistrationNotFoundError):
            AssociationService(store).unregister_member_from_event("1", "5")

    def test_remove_preference_blocked_by_registrations(self, store):
        store.count_member_registrations_of_type.return_value = 1
        with pytest.raises(PreferenceInUseError):
            AssociationService(store).remove_preference("1", "2")
        store.remove_preference.assert_not_called()

    def test_available_events_default_to_the_local_date(self, store, monkeypatch):
        monkeypatch.setattr(
            "club.services.association_service.timezone.localdate",
            lambda: date(2025, 6, 1),
        )
        store.member_exists.return_value = True
        store.list_available_events.return_value = []
        AssociationService(store).list_available_events("1")
        store.list_available_events.assert_called_once_with(
            MemberId(1), date(2025, 6, 1)
        )


class TestMemberService:
    """Tests for MemberService."""

    def test_delete_releases_associations_before_member(self, store):
        store.member_exists.return_value = True
        store.delete_member.return_value = 1
        assert MemberService(store).delete_member("1") == 1
        names = call_names(store)
        assert (
            names.index("delete_registrations")
            < names.index("delete_preferences")
            < names.index("delete_member")
        )

    def test_delete_missing_member(self, store):
        store.member_exists.return_value = False
        with pytest.raises(MemberNotFoundError):
            MemberService(store).delete_member("1")
        store.delete_registrations.assert_not_called()

    def test_create_rejects_unknown_preferred_type(self, store):
        store.event_type_exists.return_value = False
        with pytest.raises(InvalidInputError, match="does not exist"):
            MemberService(store).create_member("Ana", [1])
        store.create_member.assert_not_called()

    @pytest.mark.parametrize("preferred", ["1,2", [1, "x"], {"id": 1}])
    def test_create_rejects_malformed_preferences(self, store, preferred):
        with pytest.raises(InvalidInputError):
            MemberService(store).create_member("Ana", preferred)

    def test_update_without_preferences_leaves_them_alone(self, store):
        store.member_exists.return_value = True
        MemberService(store).update_member("1", "Ana Maria")
        store.list_preferences.assert_not_called()
        store.add_preference.assert_not_called()
        store.remove_preference.assert_not_called()

    def test_update_replaces_preferences(self, store):
        store.member_exists.return_value = True
        store.event_type_exists.return_value = True
        store.list_preferences.return_value = [EventTypeId(1), EventTypeId(2)]
        store.count_member_registrations_of_type.return_value = 0
        MemberService(store).update_member("1", "Ana", [2, 3])
        store.remove_preference.assert_called_once_with(MemberId(1), EventTypeId(1))
        store.add_preference.assert_called_once_with(MemberId(1), EventTypeId(3))

    def test_update_missing_member_before_name_validation(self, store):
        store.member_exists.return_value = False
        with pytest.raises(MemberNotFoundError):
            MemberService(store).update_member("1", "")
