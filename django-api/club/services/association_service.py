"""Association service - the junction relations and the rules around them.

Owns:
- member preferences (member <-> event type)
- event registrations (member <-> event), gated on a matching preference
- the deletion guards entity services call before dropping a referenced row
- the member cascade (registrations, then preferences)

Public operations take raw identifiers and open their own transaction.
Guards and helpers take parsed ids and expect to run inside the caller's
transaction.
"""

import logging
from datetime import date

from django.utils import timezone

from club.domain import Event, EventId, EventTypeId, MemberId, Preference, Registration
from club.domain.errors import (
    AlreadyPreferredError,
    AlreadyRegisteredError,
    EventHasRegistrationsError,
    EventNotFoundError,
    EventTypeChangeBlockedError,
    EventTypeInUseError,
    EventTypeNotFoundError,
    MemberNotFoundError,
    PreferenceInUseError,
    PreferenceMismatchError,
    PreferenceNotFoundError,
    RegistrationNotFoundError,
)
from club.services.parsing import parse_id
from club.stores.interfaces import ClubStore, DuplicateRowError

logger = logging.getLogger(__name__)


class AssociationService:
    """Service for member preferences and event registrations."""

    def __init__(self, store: ClubStore) -> None:
        self._store = store

    def add_preference(self, member_id: str, type_id: str) -> Preference:
        """Record that a member prefers an event type.

        Raises:
            InvalidIdError: If either id is malformed.
            MemberNotFoundError: If the member does not exist.
            EventTypeNotFoundError: If the event type does not exist.
            AlreadyPreferredError: If the preference already exists.
        """
        member = parse_id(MemberId, member_id, "member")
        event_type = parse_id(EventTypeId, type_id, "event type")
        with self._store.atomic():
            self._require_member(member)
            if not self._store.event_type_exists(event_type):
                raise EventTypeNotFoundError()
            try:
                preference = self._store.add_preference(member, event_type)
            except DuplicateRowError as exc:
                raise AlreadyPreferredError() from exc
        logger.info("Member %s now prefers event type %s", member, event_type)
        return preference

    def remove_preference(self, member_id: str, type_id: str) -> int:
        """Drop a preference unless registrations still depend on it.

        Raises:
            InvalidIdError: If either id is malformed.
            PreferenceInUseError: If the member is registered for events of the type.
            PreferenceNotFoundError: If no such preference exists.
        """
        member = parse_id(MemberId, member_id, "member")
        event_type = parse_id(EventTypeId, type_id, "event type")
        with self._store.atomic():
            if self._store.count_member_registrations_of_type(member, event_type):
                raise PreferenceInUseError()
            removed = self._store.remove_preference(member, event_type)
            if not removed:
                raise PreferenceNotFoundError()
        logger.info("Member %s no longer prefers event type %s", member, event_type)
        return removed

    def register_member_for_event(self, member_id: str, event_id: str) -> Registration:
        """Register a member for an event of a type they prefer.

        Raises:
            InvalidIdError: If either id is malformed.
            MemberNotFoundError: If the member does not exist.
            EventNotFoundError: If the event does not exist.
            PreferenceMismatchError: If the member does not prefer the event's type.
            AlreadyRegisteredError: If the member is already registered.
        """
        member = parse_id(MemberId, member_id, "member")
        event_ref = parse_id(EventId, event_id, "event")
        with self._store.atomic():
            self._require_member(member)
            event = self._store.get_event(event_ref)
            if event is None:
                raise EventNotFoundError()
            if not self._store.has_preference(member, event.type_id):
                raise PreferenceMismatchError()
            try:
                registration = self._store.add_registration(member, event.id)
            except DuplicateRowError as exc:
                raise AlreadyRegisteredError() from exc
        logger.info("Registered member %s for event %s", member, event.id)
        return registration

    def unregister_member_from_event(self, member_id: str, event_id: str) -> int:
        """Remove a registration.

        Raises:
            InvalidIdError: If either id is malformed.
            RegistrationNotFoundError: If no registration was removed.
        """
        member = parse_id(MemberId, member_id, "member")
        event = parse_id(EventId, event_id, "event")
        removed = self._store.remove_registration(member, event)
        if not removed:
            raise RegistrationNotFoundError()
        logger.info("Unregistered member %s from event %s", member, event)
        return removed

    def list_available_events(
        self, member_id: str, today: date | None = None
    ) -> list[Event]:
        """Return upcoming events the member could still register for.

        today defaults to the current date in the configured time zone.
        """
        member = parse_id(MemberId, member_id, "member")
        self._require_member(member)
        return self._store.list_available_events(
            member, today or timezone.localdate()
        )

    # Helpers below run inside the caller's transaction.

    def replace_preferences(
        self, member: MemberId, type_ids: list[EventTypeId]
    ) -> None:
        """Make the member's preference set equal to type_ids."""
        current = self._store.list_preferences(member)
        for dropped in sorted(set(current) - set(type_ids), key=lambda t: t.value):
            if self._store.count_member_registrations_of_type(member, dropped):
                raise PreferenceInUseError()
            self._store.remove_preference(member, dropped)
        for type_id in type_ids:
            if type_id not in current:
                self._store.add_preference(member, type_id)

    def ensure_event_type_deletable(self, type_id: EventTypeId) -> None:
        if self._store.count_events_of_type(type_id):
            raise EventTypeInUseError(
                "Cannot delete event type that is being used by events"
            )
        if self._store.count_preferences_for_type(type_id):
            raise EventTypeInUseError(
                "Cannot delete event type that is preferred by members"
            )

    def ensure_event_deletable(self, event_id: EventId) -> None:
        if self._store.count_registrations_for_event(event_id):
            raise EventHasRegistrationsError()

    def ensure_event_retype_allowed(
        self, event_id: EventId, type_id: EventTypeId
    ) -> None:
        if self._store.count_unpreferred_registrations(event_id, type_id):
            raise EventTypeChangeBlockedError()

    def release_member(self, member: MemberId) -> None:
        """Delete a member's registrations, then their preferences."""
        registrations = self._store.delete_registrations(member)
        preferences = self._store.delete_preferences(member)
        logger.debug(
            "Released member %s: %d registrations, %d preferences",
            member,
            registrations,
            preferences,
        )

    def _require_member(self, member: MemberId) -> None:
        if not self._store.member_exists(member):
            raise MemberNotFoundError()
