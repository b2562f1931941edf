"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.

Foreign keys pointing into EventType and Event are PROTECT so the store
refuses the same deletions the services guard against; junction rows are
owned by their member and cascade with it.
"""

from django.db import models


class EventType(models.Model):
    """Persistence model for event types."""

    name = models.CharField(max_length=100, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "event_types"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name


class Event(models.Model):
    """Persistence model for cycling events."""

    event_type = models.ForeignKey(
        EventType,
        on_delete=models.PROTECT,
        related_name="events",
        db_column="type_id",
    )
    name = models.CharField(max_length=200)
    date = models.DateField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "events"
        ordering = ["date", "id"]
        indexes = [
            models.Index(fields=["date"], name="events_date_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.date})"


class Member(models.Model):
    """Persistence model for club members."""

    name = models.CharField(max_length=200)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "members"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name


class MemberPreferredEventType(models.Model):
    """Junction row: a member prefers an event type."""

    member = models.ForeignKey(
        Member, on_delete=models.CASCADE, related_name="preferences"
    )
    event_type = models.ForeignKey(
        EventType, on_delete=models.PROTECT, related_name="preferences"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "member_preferred_event_types"
        ordering = ["member", "event_type"]
        constraints = [
            models.UniqueConstraint(
                fields=["member", "event_type"],
                name="uq_member_preferred_event_type",
            ),
        ]

    def __str__(self) -> str:
        return f"Member {self.member_id} prefers type {self.event_type_id}"


class MemberEvent(models.Model):
    """Junction row: a member is registered for an event."""

    member = models.ForeignKey(
        Member, on_delete=models.CASCADE, related_name="registrations"
    )
    event = models.ForeignKey(
        Event, on_delete=models.PROTECT, related_name="registrations"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "member_events"
        ordering = ["member", "event"]
        constraints = [
            models.UniqueConstraint(
                fields=["member", "event"],
                name="uq_member_event",
            ),
        ]

    def __str__(self) -> str:
        return f"Member {self.member_id} registered for event {self.event_id}"
