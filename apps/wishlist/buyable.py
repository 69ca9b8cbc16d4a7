from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Buyable(Protocol):
    """Anything that can be put on a wishlist directly."""

    def get_buyable_identifier(self, options=None): ...

    def get_buyable_description(self, options=None) -> str: ...

    def get_buyable_price(self, options=None): ...


class CanBeBought:
    """
    Mixin giving a Django model the ``Buyable`` interface.

    The identifier is the primary key, the description the first of ``name``,
    ``title`` or ``description`` that is set, and the price the ``price`` field.
    """

    def get_buyable_identifier(self, options=None):
        return self.pk

    def get_buyable_description(self, options=None) -> str | None:
        for attribute in ("name", "title", "description"):
            value = getattr(self, attribute, None)
            if value:
                return value
        return None

    def get_buyable_price(self, options=None):
        return getattr(self, "price", None)


def is_buyable(value) -> bool:
    # Classes carry the methods too, only instances count.
    return not isinstance(value, type) and isinstance(value, Buyable)
