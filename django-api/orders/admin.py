from django.contrib import admin

from orders.models import CompensatedCharge, Order, Ticket


class TicketInline(admin.TabularInline):
    model = Ticket
    extra = 0
    readonly_fields = ["offer", "price", "barcode", "created_at"]


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ["id", "event", "user", "email", "charge_id", "is_refunded", "created_at"]
    list_filter = ["is_refunded", "event"]
    search_fields = ["email", "charge_id", "last_name"]
    readonly_fields = ["charge_id", "idempotency_key"]
    inlines = [TicketInline]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ["barcode", "event", "offer", "price", "status", "scanned_at"]
    list_filter = ["status", "event"]
    search_fields = ["barcode"]


@admin.register(CompensatedCharge)
class CompensatedChargeAdmin(admin.ModelAdmin):
    list_display = ["charge_id", "idempotency_key", "user", "amount", "currency", "refunded", "created_at"]
    list_filter = ["refunded"]
    search_fields = ["charge_id", "idempotency_key"]
    readonly_fields = ["charge_id", "idempotency_key", "user", "amount", "currency"]
