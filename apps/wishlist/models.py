from __future__ import annotations

import json

from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords

from .conf import DEFAULT_INSTANCE, get_wishlist_settings


class BaseModel(models.Model):
    """
    Abstract base with created / updated timestamps and an audit history.
    """

    history = HistoricalRecords(inherit=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class StoredWishlist(BaseModel):
    """
    A wishlist instance saved under an external identifier (e.g. a user id)
    so it can be restored into a later session. Restoring consumes the row;
    the history table keeps what was stored.
    """

    identifier = models.CharField(
        max_length=255,
        unique=True,
        verbose_name=_("Identifier"),
        help_text=_("External key the wishlist was stored under"),
    )
    wishlist_instance = models.CharField(
        max_length=255,
        default=DEFAULT_INSTANCE,
        db_column="instance",
        verbose_name=_("Instance"),
        help_text=_("Wishlist instance the content belongs to"),
    )
    content = models.TextField(
        verbose_name=_("Content"),
        help_text=_("Serialized wishlist items"),
    )

    class Meta:
        db_table = get_wishlist_settings().table
        verbose_name = _("Stored wishlist")
        verbose_name_plural = _("Stored wishlists")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.identifier} ({self.wishlist_instance})"

    @property
    def item_count(self) -> int:
        """Number of rows in the stored content."""
        try:
            return len(json.loads(self.content or "[]"))
        except ValueError:
            return 0
