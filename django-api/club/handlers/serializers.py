"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class EventTypeSerializer(serializers.Serializer):
    """Serializer for EventType domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    type_id = serializers.IntegerField(source="type_id.value")
    type_name = serializers.CharField()
    name = serializers.CharField()
    date = serializers.DateField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class MemberSerializer(serializers.Serializer):
    """Serializer for Member domain model.

    Association keys are camelCase to match what the browser client sends.
    """

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    preferredEventTypes = serializers.SerializerMethodField(
        method_name="get_preferred_event_types"
    )
    registeredEvents = serializers.SerializerMethodField(
        method_name="get_registered_events"
    )
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_preferred_event_types(self, member) -> list[int]:
        return [type_id.value for type_id in member.preferred_event_types]

    def get_registered_events(self, member) -> list[int]:
        return [event_id.value for event_id in member.registered_events]


class PreferenceSerializer(serializers.Serializer):
    member_id = serializers.IntegerField(source="member_id.value")
    event_type_id = serializers.IntegerField(source="event_type_id.value")
    created_at = serializers.DateTimeField()


class RegistrationSerializer(serializers.Serializer):
    member_id = serializers.IntegerField(source="member_id.value")
    event_id = serializers.IntegerField(source="event_id.value")
    created_at = serializers.DateTimeField()
