from django.apps import AppConfig


class EventsConfig(AppConfig):
    """Event catalog and offer inventory."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "events"
