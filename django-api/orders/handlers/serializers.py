"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.UUIDField(source="id.value")
    offerId = serializers.UUIDField(source="offer_id.value")
    eventId = serializers.UUIDField(source="event_id.value")
    price = serializers.DecimalField(max_digits=8, decimal_places=2, source="price.amount")
    barcode = serializers.CharField()
    status = serializers.CharField(source="status.value")
    scannedAt = serializers.DateTimeField(source="scanned_at", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")


class OrderSerializer(serializers.Serializer):
    """Serializer for Order domain model."""

    id = serializers.UUIDField(source="id.value")
    eventId = serializers.UUIDField(source="event_id.value")
    firstName = serializers.CharField(source="contact.first_name")
    lastName = serializers.CharField(source="contact.last_name")
    email = serializers.CharField(source="contact.email")
    mobileNumber = serializers.CharField(source="contact.mobile_number")
    isRefunded = serializers.BooleanField(source="is_refunded")
    total = serializers.DecimalField(max_digits=10, decimal_places=2, source="total.amount")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")
    tickets = TicketSerializer(many=True)
