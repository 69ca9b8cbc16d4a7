from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class WishlistConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.wishlist"
    label = "wishlist"
    verbose_name = _("Wishlists")

    def ready(self):
        """Import signals to register them."""
        import apps.wishlist.signals  # noqa: F401
