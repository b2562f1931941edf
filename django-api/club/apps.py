from django.apps import AppConfig


class ClubConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "club"
    verbose_name = "Cycling club"

    def ready(self) -> None:
        from club import signals  # noqa: F401
