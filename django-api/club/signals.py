"""Django signals that write the audit log.

Every saved or deleted club row is reported on the ``club.audit`` logger.
"""

import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from club.models import Event, EventType, Member, MemberEvent, MemberPreferredEventType

audit_logger = logging.getLogger("club.audit")


@receiver(post_save, sender=EventType)
@receiver(post_save, sender=Event)
@receiver(post_save, sender=Member)
def log_entity_saved(sender, instance, created, **kwargs):
    """Record creation or update of an event type, event or member."""
    audit_logger.info(
        "%s %s %s", sender._meta.model_name, "created" if created else "updated", instance.pk
    )


@receiver(post_delete, sender=EventType)
@receiver(post_delete, sender=Event)
@receiver(post_delete, sender=Member)
def log_entity_deleted(sender, instance, **kwargs):
    """Record deletion of an event type, event or member."""
    audit_logger.info("%s deleted %s", sender._meta.model_name, instance.pk)


@receiver(post_save, sender=MemberPreferredEventType)
def log_preference_saved(sender, instance, created, **kwargs):
    if created:
        audit_logger.info(
            "member %s preference added %s", instance.member_id, instance.event_type_id
        )


@receiver(post_delete, sender=MemberPreferredEventType)
def log_preference_deleted(sender, instance, **kwargs):
    audit_logger.info(
        "member %s preference removed %s", instance.member_id, instance.event_type_id
    )


@receiver(post_save, sender=MemberEvent)
def log_registration_saved(sender, instance, created, **kwargs):
    if created:
        audit_logger.info(
            "member %s registered for event %s", instance.member_id, instance.event_id
        )


@receiver(post_delete, sender=MemberEvent)
def log_registration_deleted(sender, instance, **kwargs):
    audit_logger.info(
        "member %s unregistered from event %s", instance.member_id, instance.event_id
    )
