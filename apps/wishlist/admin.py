from django.contrib import admin
from django.utils.html import format_html, format_html_join
from django.utils.translation import gettext_lazy as _
from simple_history.admin import SimpleHistoryAdmin
from unfold.admin import ModelAdmin

from .conf import get_wishlist_settings
from .models import StoredWishlist
from .persistence import deserialize_content


class HistoryModelAdmin(SimpleHistoryAdmin, ModelAdmin):
    """Unfold ModelAdmin with django-simple-history support."""


@admin.register(StoredWishlist)
class StoredWishlistAdmin(HistoryModelAdmin):
    list_display = ("identifier", "wishlist_instance", "item_count_display", "created_at")
    list_filter = ("wishlist_instance", "created_at")
    search_fields = ("identifier",)
    readonly_fields = ("identifier", "wishlist_instance", "content_display", "created_at", "updated_at")
    fields = ("identifier", "wishlist_instance", "content_display", "created_at", "updated_at")

    @admin.display(description=_("Items"))
    def item_count_display(self, obj):
        return obj.item_count

    @admin.display(description=_("Content"))
    def content_display(self, obj):
        try:
            items = deserialize_content(obj.content)
        except (ValueError, KeyError):
            return format_html('<span class="text-red-600">{}</span>', _("Unreadable content"))

        if not items:
            return "-"

        number_format = get_wishlist_settings().number_format
        rows = format_html_join(
            "",
            "<tr><td>{}</td><td>{}</td><td>{}</td><td>{}</td></tr>",
            ((item.id, item.name, item.qty, item.format("price", number_format)) for item in items),
        )
        return format_html(
            '<table class="w-full text-sm"><thead><tr><th>{}</th><th>{}</th><th>{}</th><th>{}</th></tr></thead>'
            "<tbody>{}</tbody></table>",
            _("ID"),
            _("Name"),
            _("Qty"),
            _("Price"),
            rows,
        )

    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False
