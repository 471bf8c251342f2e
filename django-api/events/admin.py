from django.contrib import admin

from events.models import Event, Offer


class OfferInline(admin.TabularInline):
    model = Offer
    extra = 1


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "status", "start_date", "created_at"]
    list_filter = ["status"]
    search_fields = ["name"]
    inlines = [OfferInline]


@admin.register(Offer)
class OfferAdmin(admin.ModelAdmin):
    list_display = ["name", "event", "price", "quantity", "start_sale_date", "end_sale_date"]
    list_filter = ["event"]
