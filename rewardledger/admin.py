"""Reward ledger admin."""

from django.contrib import admin
from django.utils.html import format_html

from rewardledger.models import RewardPointsEntry
from rewardledger.service import RewardPointService


@admin.register(RewardPointsEntry)
class RewardPointsEntryAdmin(admin.ModelAdmin):
    list_display = [
        "created_on_utc",
        "customer_id",
        "store_id",
        "points_display",
        "points_balance",
        "used_with_order_id",
        "message",
    ]
    list_filter = ["store_id"]
    search_fields = ["customer_id", "message"]
    # Only the message can be corrected here
    readonly_fields = [
        "customer_id",
        "store_id",
        "points",
        "points_balance",
        "used_amount",
        "used_with_order_id",
        "created_on_utc",
    ]
    date_hierarchy = "created_on_utc"
    ordering = ["-created_on_utc", "-id"]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def save_model(self, request, obj, form, change):
        RewardPointService().update_entry(obj)

    def points_display(self, obj):
        if obj.points > 0:
            return format_html('<span style="color:green">+{}</span>', obj.points)
        return format_html('<span style="color:red">{}</span>', obj.points)

    points_display.short_description = "Pontos"
