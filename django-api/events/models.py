"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    class Status(models.TextChoices):
        DRAFT = "draft"
        ACTIVE = "active"
        CONTINGENT = "contingent"
        CANCELED = "canceled"
        COMPLETED = "completed"
        POSTPONED = "postponed"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    venue = models.JSONField(blank=True, null=True)
    timezone = models.CharField(max_length=50, default="America/New_York")
    start_date = models.DateTimeField(blank=True, null=True)
    end_date = models.DateTimeField(blank=True, null=True)
    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.DRAFT
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="events_event_created_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class Offer(models.Model):
    """Persistence model for ticket offers.

    ``quantity`` is the remaining stock. It only changes through the
    conditional update in ``DjangoOfferStore.reserve``.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="offers")
    name = models.CharField(max_length=100, blank=True)
    description = models.TextField(blank=True)
    price = models.DecimalField(max_digits=8, decimal_places=2, default=0)
    quantity = models.PositiveIntegerField(default=0)
    min_order_quantity = models.PositiveIntegerField(default=1)
    max_order_quantity = models.PositiveIntegerField(default=50)
    start_sale_date = models.DateTimeField(blank=True, null=True)
    end_sale_date = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["event"], name="events_offer_event_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=0), name="offer_quantity_non_negative"
            ),
            models.CheckConstraint(
                condition=models.Q(price__gte=0), name="offer_price_non_negative"
            ),
            models.CheckConstraint(
                condition=models.Q(min_order_quantity__gte=1), name="offer_min_order_at_least_one"
            ),
            models.CheckConstraint(
                condition=models.Q(max_order_quantity__gte=models.F("min_order_quantity")),
                name="offer_max_order_not_below_min",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"
