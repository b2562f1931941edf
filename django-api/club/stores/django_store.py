"""Django ORM implementation of the ClubStore.

Every public method goes through ``_gateway`` so driver failures are logged
once here and surface to callers as StoreFailureError.
"""

import logging
from contextlib import AbstractContextManager
from datetime import date
from functools import wraps

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import ProtectedError

from club import models
from club.domain import (
    Event,
    EventDate,
    EventId,
    EventType,
    EventTypeId,
    EventTypeName,
    Member,
    MemberId,
    Name,
    Preference,
    Registration,
)
from club.domain.errors import StoreFailureError
from club.stores.interfaces import ClubStore, DuplicateRowError, RowInUseError

logger = logging.getLogger(__name__)


def _gateway(method):
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (DuplicateRowError, RowInUseError):
            raise
        except DatabaseError as exc:
            logger.exception("Store operation %s failed", method.__name__)
            raise StoreFailureError() from exc

    return wrapper


def _to_event_type(row: models.EventType) -> EventType:
    return EventType(
        id=EventTypeId(row.pk),
        name=row.name,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.pk),
        type_id=EventTypeId(row.event_type_id),
        type_name=row.event_type.name,
        name=row.name,
        date=row.date,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_member(row: models.Member) -> Member:
    return Member(
        id=MemberId(row.pk),
        name=row.name,
        created_at=row.created_at,
        updated_at=row.updated_at,
        preferred_event_types=tuple(
            EventTypeId(pref.event_type_id) for pref in row.preferences.all()
        ),
        registered_events=tuple(
            EventId(reg.event_id) for reg in row.registrations.all()
        ),
    )


def _deleted(result: tuple[int, dict[str, int]], model) -> int:
    _, per_model = result
    return per_model.get(model._meta.label, 0)


class DjangoClubStore(ClubStore):
    """Relational club store using the Django ORM."""

    def atomic(self) -> AbstractContextManager:
        return transaction.atomic()

    # Event types

    @_gateway
    def list_event_types(self) -> list[EventType]:
        return [_to_event_type(row) for row in models.EventType.objects.all()]

    @_gateway
    def get_event_type(self, type_id: EventTypeId) -> EventType | None:
        row = models.EventType.objects.filter(pk=type_id.value).first()
        return _to_event_type(row) if row else None

    @_gateway
    def event_type_exists(self, type_id: EventTypeId) -> bool:
        return models.EventType.objects.filter(pk=type_id.value).exists()

    @_gateway
    def create_event_type(self, name: EventTypeName) -> EventType:
        try:
            with transaction.atomic():
                row = models.EventType.objects.create(name=name.value)
        except IntegrityError as exc:
            raise DuplicateRowError(f"event type {name} exists") from exc
        return _to_event_type(row)

    @_gateway
    def update_event_type(
        self, type_id: EventTypeId, name: EventTypeName
    ) -> EventType | None:
        row = models.EventType.objects.filter(pk=type_id.value).first()
        if row is None:
            return None
        row.name = name.value
        try:
            with transaction.atomic():
                row.save(update_fields=["name", "updated_at"])
        except IntegrityError as exc:
            raise DuplicateRowError(f"event type {name} exists") from exc
        return _to_event_type(row)

    @_gateway
    def delete_event_type(self, type_id: EventTypeId) -> int:
        try:
            result = models.EventType.objects.filter(pk=type_id.value).delete()
        except ProtectedError as exc:
            raise RowInUseError(f"event type {type_id} is referenced") from exc
        return _deleted(result, models.EventType)

    @_gateway
    def count_events_of_type(self, type_id: EventTypeId) -> int:
        return models.Event.objects.filter(event_type_id=type_id.value).count()

    @_gateway
    def count_preferences_for_type(self, type_id: EventTypeId) -> int:
        return models.MemberPreferredEventType.objects.filter(
            event_type_id=type_id.value
        ).count()

    # Events

    @_gateway
    def list_events(self) -> list[Event]:
        rows = models.Event.objects.select_related("event_type")
        return [_to_event(row) for row in rows]

    @_gateway
    def get_event(self, event_id: EventId) -> Event | None:
        row = (
            models.Event.objects.select_related("event_type")
            .filter(pk=event_id.value)
            .first()
        )
        return _to_event(row) if row else None

    @_gateway
    def create_event(
        self, type_id: EventTypeId, name: Name, event_date: EventDate
    ) -> Event:
        row = models.Event.objects.create(
            event_type_id=type_id.value, name=name.value, date=event_date.value
        )
        return self.get_event(EventId(row.pk))

    @_gateway
    def update_event(
        self, event_id: EventId, type_id: EventTypeId, name: Name, event_date: EventDate
    ) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        if row is None:
            return None
        row.event_type_id = type_id.value
        row.name = name.value
        row.date = event_date.value
        row.save(update_fields=["event_type", "name", "date", "updated_at"])
        return self.get_event(event_id)

    @_gateway
    def delete_event(self, event_id: EventId) -> int:
        try:
            result = models.Event.objects.filter(pk=event_id.value).delete()
        except ProtectedError as exc:
            raise RowInUseError(f"event {event_id} is referenced") from exc
        return _deleted(result, models.Event)

    @_gateway
    def count_registrations_for_event(self, event_id: EventId) -> int:
        return models.MemberEvent.objects.filter(event_id=event_id.value).count()

    @_gateway
    def count_unpreferred_registrations(
        self, event_id: EventId, type_id: EventTypeId
    ) -> int:
        preferring = models.MemberPreferredEventType.objects.filter(
            event_type_id=type_id.value
        ).values("member_id")
        return (
            models.MemberEvent.objects.filter(event_id=event_id.value)
            .exclude(member_id__in=preferring)
            .count()
        )

    @_gateway
    def list_available_events(self, member_id: MemberId, today: date) -> list[Event]:
        preferred = models.MemberPreferredEventType.objects.filter(
            member_id=member_id.value
        ).values("event_type_id")
        registered = models.MemberEvent.objects.filter(
            member_id=member_id.value
        ).values("event_id")
        rows = (
            models.Event.objects.select_related("event_type")
            .filter(date__gte=today, event_type_id__in=preferred)
            .exclude(pk__in=registered)
        )
        return [_to_event(row) for row in rows]

    # Members

    @_gateway
    def list_members(self) -> list[Member]:
        rows = models.Member.objects.prefetch_related("preferences", "registrations")
        return [_to_member(row) for row in rows]

    @_gateway
    def get_member(self, member_id: MemberId) -> Member | None:
        row = (
            models.Member.objects.prefetch_related("preferences", "registrations")
            .filter(pk=member_id.value)
            .first()
        )
        return _to_member(row) if row else None

    @_gateway
    def member_exists(self, member_id: MemberId) -> bool:
        return models.Member.objects.filter(pk=member_id.value).exists()

    @_gateway
    def create_member(self, name: Name) -> Member:
        row = models.Member.objects.create(name=name.value)
        return _to_member(row)

    @_gateway
    def update_member(self, member_id: MemberId, name: Name) -> Member | None:
        row = models.Member.objects.filter(pk=member_id.value).first()
        if row is None:
            return None
        row.name = name.value
        row.save(update_fields=["name", "updated_at"])
        return _to_member(row)

    @_gateway
    def delete_member(self, member_id: MemberId) -> int:
        result = models.Member.objects.filter(pk=member_id.value).delete()
        return _deleted(result, models.Member)

    # Preferences

    @_gateway
    def list_preferences(self, member_id: MemberId) -> list[EventTypeId]:
        type_ids = models.MemberPreferredEventType.objects.filter(
            member_id=member_id.value
        ).values_list("event_type_id", flat=True)
        return [EventTypeId(type_id) for type_id in type_ids]

    @_gateway
    def has_preference(self, member_id: MemberId, type_id: EventTypeId) -> bool:
        return models.MemberPreferredEventType.objects.filter(
            member_id=member_id.value, event_type_id=type_id.value
        ).exists()

    @_gateway
    def add_preference(self, member_id: MemberId, type_id: EventTypeId) -> Preference:
        try:
            with transaction.atomic():
                row = models.MemberPreferredEventType.objects.create(
                    member_id=member_id.value, event_type_id=type_id.value
                )
        except IntegrityError as exc:
            raise DuplicateRowError(
                f"member {member_id} already prefers type {type_id}"
            ) from exc
        return Preference(
            member_id=member_id, event_type_id=type_id, created_at=row.created_at
        )

    @_gateway
    def remove_preference(self, member_id: MemberId, type_id: EventTypeId) -> int:
        result = models.MemberPreferredEventType.objects.filter(
            member_id=member_id.value, event_type_id=type_id.value
        ).delete()
        return _deleted(result, models.MemberPreferredEventType)

    @_gateway
    def delete_preferences(self, member_id: MemberId) -> int:
        result = models.MemberPreferredEventType.objects.filter(
            member_id=member_id.value
        ).delete()
        return _deleted(result, models.MemberPreferredEventType)

    # Registrations

    @_gateway
    def count_member_registrations_of_type(
        self, member_id: MemberId, type_id: EventTypeId
    ) -> int:
        return models.MemberEvent.objects.filter(
            member_id=member_id.value, event__event_type_id=type_id.value
        ).count()

    @_gateway
    def add_registration(self, member_id: MemberId, event_id: EventId) -> Registration:
        try:
            with transaction.atomic():
                row = models.MemberEvent.objects.create(
                    member_id=member_id.value, event_id=event_id.value
                )
        except IntegrityError as exc:
            raise DuplicateRowError(
                f"member {member_id} already registered for event {event_id}"
            ) from exc
        return Registration(
            member_id=member_id, event_id=event_id, created_at=row.created_at
        )

    @_gateway
    def remove_registration(self, member_id: MemberId, event_id: EventId) -> int:
        result = models.MemberEvent.objects.filter(
            member_id=member_id.value, event_id=event_id.value
        ).delete()
        return _deleted(result, models.MemberEvent)

    @_gateway
    def delete_registrations(self, member_id: MemberId) -> int:
        result = models.MemberEvent.objects.filter(member_id=member_id.value).delete()
        return _deleted(result, models.MemberEvent)
