"""Django ORM models (persistence layer) for orders and issued tickets."""

import uuid

from django.conf import settings
from django.db import models

from events.models import Event, Offer


class Order(models.Model):
    """Persistence model for a completed checkout.

    Contact fields are a snapshot taken at checkout and do not follow the
    buyer's profile.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="orders")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="ticket_orders"
    )
    first_name = models.CharField(max_length=50, blank=True)
    last_name = models.CharField(max_length=50, blank=True)
    email = models.CharField(max_length=50, blank=True)
    mobile_number = models.CharField(max_length=16, blank=True)
    charge_id = models.CharField(max_length=100, unique=True)
    idempotency_key = models.CharField(max_length=100, unique=True)
    is_refunded = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="orders_order_user_idx"),
        ]

    def __str__(self) -> str:
        return f"Order {self.id}"


class Ticket(models.Model):
    """Persistence model for a single issued ticket."""

    class Status(models.TextChoices):
        UNUSED = "unused"
        USED = "used"
        REFUNDED = "refunded"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="tickets")
    offer = models.ForeignKey(Offer, on_delete=models.PROTECT, related_name="tickets")
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="tickets")
    price = models.DecimalField(max_digits=8, decimal_places=2)
    barcode = models.CharField(max_length=50)
    status = models.CharField(
        max_length=10, choices=Status.choices, default=Status.UNUSED
    )
    scanned_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["event", "barcode"], name="ticket_barcode_unique_per_event"
            ),
        ]

    def __str__(self) -> str:
        return self.barcode


class CompensatedCharge(models.Model):
    """A charge taken by a checkout that did not commit.

    ``refunded`` is false when the compensating refund failed and the charge
    needs manual reconciliation. Rows per idempotency key count the attempts
    already spent under that key.
    """

    charge_id = models.CharField(max_length=100, unique=True)
    idempotency_key = models.CharField(max_length=100, db_index=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="compensated_charges"
    )
    amount = models.PositiveIntegerField()
    currency = models.CharField(max_length=3)
    refunded = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.charge_id
