from django.apps import AppConfig


class OrdersConfig(AppConfig):
    """Checkout, orders and issued tickets."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "orders"
