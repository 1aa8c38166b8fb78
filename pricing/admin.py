from django.contrib import admin

from pricing.models import Booking, Event, PricingLog


class PricingLogInline(admin.TabularInline):
    model = PricingLog
    extra = 0
    can_delete = False
    readonly_fields = ["old_price", "new_price", "reason", "created_at"]

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "base_price", "pricing_mode", "available_seats", "start_date"]
    list_filter = ["pricing_mode"]
    search_fields = ["name"]
    inlines = [PricingLogInline]

    def get_readonly_fields(self, request, obj=None):
        # pricing fields change only through the pricing service once created
        if obj is None:
            return ["last_price_update"]
        return ["base_price", "pricing_mode", "min_price", "max_price", "last_price_update"]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["event", "status", "price_paid", "created_at"]
    list_filter = ["status", "event"]


@admin.register(PricingLog)
class PricingLogAdmin(admin.ModelAdmin):
    list_display = ["event", "old_price", "new_price", "reason", "created_at"]
    list_filter = ["event"]

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
