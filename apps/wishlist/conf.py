"""
Wishlist configuration.

Values come from the ``WISHLIST`` dict in Django settings and are merged over
the defaults below. The resulting ``WishlistSettings`` is handed to
``WishlistManager`` explicitly; nothing in the app reads settings lazily.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from django.conf import settings

from .formatting import number_format

DEFAULT_INSTANCE = "default"

DEFAULTS = {
    "TAX": 21,
    "FORMAT": {
        "DECIMALS": 2,
        "DECIMAL_POINT": ".",
        "THOUSANDS_SEPARATOR": ",",
    },
    "DATABASE": {
        "CONNECTION": None,
        "TABLE": "shoppingwishlist",
    },
    "SESSION_NAMESPACE": "wishlist",
    "DESTROY_ON_LOGOUT": False,
    "STORED_RETENTION_DAYS": 90,
}


@dataclass(frozen=True)
class NumberFormat:
    decimals: int = 2
    decimal_point: str = "."
    thousands_separator: str = ","

    def format(self, value, decimals=None, decimal_point=None, thousands_separator=None) -> str:
        """Format ``value``, falling back to this format for every unset override."""
        return number_format(
            value,
            self.decimals if decimals is None else decimals,
            self.decimal_point if decimal_point is None else decimal_point,
            self.thousands_separator if thousands_separator is None else thousands_separator,
        )


@dataclass(frozen=True)
class WishlistSettings:
    tax_rate: Decimal = Decimal("21")
    number_format: NumberFormat = field(default_factory=NumberFormat)
    database: str = "default"
    table: str = "shoppingwishlist"
    session_namespace: str = "wishlist"
    destroy_on_logout: bool = False
    stored_retention_days: int = 90


def _section(user_settings: dict, name: str) -> dict:
    merged = dict(DEFAULTS[name])
    merged.update(user_settings.get(name) or {})
    return merged


def get_wishlist_settings() -> WishlistSettings:
    user_settings = getattr(settings, "WISHLIST", None) or {}

    fmt = _section(user_settings, "FORMAT")
    database = _section(user_settings, "DATABASE")
    tax = user_settings.get("TAX", DEFAULTS["TAX"])

    return WishlistSettings(
        tax_rate=Decimal(str(tax if tax is not None else 0)),
        number_format=NumberFormat(
            decimals=int(fmt["DECIMALS"] if fmt["DECIMALS"] is not None else 2),
            decimal_point="." if fmt["DECIMAL_POINT"] is None else fmt["DECIMAL_POINT"],
            thousands_separator="," if fmt["THOUSANDS_SEPARATOR"] is None else fmt["THOUSANDS_SEPARATOR"],
        ),
        database=database["CONNECTION"] or "default",
        table=database["TABLE"] or DEFAULTS["DATABASE"]["TABLE"],
        session_namespace=user_settings.get("SESSION_NAMESPACE") or DEFAULTS["SESSION_NAMESPACE"],
        destroy_on_logout=bool(user_settings.get("DESTROY_ON_LOGOUT", DEFAULTS["DESTROY_ON_LOGOUT"])),
        stored_retention_days=int(user_settings.get("STORED_RETENTION_DAYS", DEFAULTS["STORED_RETENTION_DAYS"])),
    )
