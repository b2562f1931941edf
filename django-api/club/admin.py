from django.contrib import admin

from club.models import Event, EventType, Member, MemberEvent, MemberPreferredEventType


class PreferenceInline(admin.TabularInline):
    """Preferences change through the API, which keeps registrations backed."""

    model = MemberPreferredEventType
    extra = 0
    can_delete = False
    readonly_fields = ["member", "event_type", "created_at"]

    def has_add_permission(self, request, obj=None):
        return False


class RegistrationInline(admin.TabularInline):
    """Registrations go through the API so the preference rule is applied."""

    model = MemberEvent
    extra = 0
    can_delete = False
    readonly_fields = ["member", "event", "created_at"]

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(EventType)
class EventTypeAdmin(admin.ModelAdmin):
    list_display = ["name", "created_at", "updated_at"]
    search_fields = ["name"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "event_type", "date"]
    list_filter = ["event_type"]
    search_fields = ["name"]
    inlines = [RegistrationInline]

    def get_readonly_fields(self, request, obj=None):
        # Retyping a saved event could strand its registrations.
        if obj is not None:
            return [*super().get_readonly_fields(request, obj), "event_type"]
        return super().get_readonly_fields(request, obj)


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    list_display = ["name", "created_at"]
    search_fields = ["name"]
    inlines = [PreferenceInline, RegistrationInline]
