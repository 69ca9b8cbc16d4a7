from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from decimal import Decimal

from django.http import HttpRequest

from .buyable import is_buyable
from .conf import DEFAULT_INSTANCE, WishlistSettings, get_wishlist_settings
from .exceptions import InvalidRowIdError
from .formatting import to_decimal
from .items import WishlistItem, resolve_model
from .persistence import PersistenceBridge, StoredWishlistRepository
from .session import DjangoSessionStore, SessionStore, session_key
from .signals import (
    ITEM_ADDED,
    ITEM_REMOVED,
    ITEM_RESTORED,
    ITEM_STORED,
    ITEM_UPDATED,
    Notifier,
    SignalNotifier,
)
from .store import ItemStore

logger = logging.getLogger(__name__)


class WishlistManager:
    """
    Session-backed wishlist.

    Holds nothing but the name of the current instance: every operation
    loads the instance's ``ItemStore`` from the session, applies the change
    and writes the whole store back before announcing it.
    """

    DEFAULT_INSTANCE = DEFAULT_INSTANCE

    def __init__(
        self,
        session: SessionStore,
        events: Notifier | None = None,
        config: WishlistSettings | None = None,
        bridge: PersistenceBridge | None = None,
    ):
        self.session = session
        self.config = config or get_wishlist_settings()
        self.events = events if events is not None else SignalNotifier(sender=type(self))
        self.bridge = bridge or PersistenceBridge(StoredWishlistRepository(using=self.config.database))
        self._instance = DEFAULT_INSTANCE

    # Instances

    def instance(self, instance: str | None = None) -> WishlistManager:
        self._instance = instance or DEFAULT_INSTANCE
        return self

    def current_instance(self) -> str:
        return self._instance

    @property
    def session_key(self) -> str:
        return session_key(self.config.session_namespace, self._instance)

    # Content

    def _get_content(self) -> ItemStore:
        if not self.session.has(self.session_key):
            return ItemStore()
        return ItemStore.from_data(self.session.get(self.session_key))

    def _put_content(self, content: ItemStore) -> None:
        self.session.put(self.session_key, content.to_data())

    @staticmethod
    def _get_from(content: ItemStore, row_id: str) -> WishlistItem:
        item = content.get(row_id)
        if item is None:
            raise InvalidRowIdError(row_id)
        return item

    def content(self) -> ItemStore:
        return self._get_content()

    def get(self, row_id: str) -> WishlistItem:
        return self._get_from(self._get_content(), row_id)

    def destroy(self) -> None:
        self.session.remove(self.session_key)

    # Adding

    def add(self, id, name=None, qty=None, price=None, options=None):
        """
        Add an item and return it, merged with any existing row of the same identity.

        ``id`` may be a product id (with name, qty, price and options), a
        ``Buyable`` (then called as ``add(buyable, qty, options)``), a mapping
        with id/name/qty/price/options keys, or a list of mappings or
        buyables, in which case a list of items is returned.
        """
        if self._is_multi(id):
            return self.add_many(id)
        return self.add_item(self._build_item(id, name, qty, price, options))

    def add_many(self, items: Iterable) -> list[WishlistItem]:
        return [self.add(item) for item in items]

    def add_item(self, item: WishlistItem) -> WishlistItem:
        content = self._get_content()
        item = content.merge(item)
        self._put_content(content)

        logger.debug("Added %s to wishlist %s (qty now %s).", item.row_id, self._instance, item.qty)
        self.events.emit(ITEM_ADDED, item)
        return item

    @staticmethod
    def _is_multi(value) -> bool:
        if not isinstance(value, (list, tuple)) or not value:
            return False
        return isinstance(value[0], Mapping) or is_buyable(value[0])

    def _build_item(self, id, name, qty, price, options) -> WishlistItem:
        if is_buyable(id):
            # Positionally this is add(buyable, qty, options).
            if isinstance(qty, Mapping):
                options, qty = qty, None
            quantity = name if name is not None else (qty if qty is not None else 1)
            item = WishlistItem.from_buyable(id, options, qty=quantity)
            item.associate(id)
        elif isinstance(id, Mapping):
            item = WishlistItem.from_dict(id)
        else:
            item = WishlistItem.from_attributes(id, name, qty, price, options)

        item.set_tax_rate(self.config.tax_rate)
        return item

    # Changing

    def update(self, row_id: str, change) -> WishlistItem | None:
        """
        Change a row's quantity (a number), product (a ``Buyable``) or
        attributes (a mapping). A change of identity moves the row, summing
        quantities if the new identity already exists. A quantity of zero or
        less removes the row and returns ``None``.
        """
        content = self._get_content()
        item = self._get_from(content, row_id)

        if is_buyable(change):
            item.update_from_buyable(change)
        elif isinstance(change, Mapping):
            item.update_from_dict(change)
        else:
            item.set_quantity(change)

        if item.row_id != row_id:
            content.pull(row_id)
            existing = content.get(item.row_id)
            if existing is not None:
                item.qty = existing.qty + item.qty

        if item.qty <= 0:
            content.pull(item.row_id)
            self._put_content(content)
            logger.debug("Removed %s from wishlist %s by update.", item.row_id, self._instance)
            self.events.emit(ITEM_REMOVED, item)
            return None

        content.put(item)
        self._put_content(content)

        logger.debug("Updated %s in wishlist %s.", item.row_id, self._instance)
        self.events.emit(ITEM_UPDATED, item)
        return item

    def remove(self, row_id: str) -> None:
        content = self._get_content()
        item = self._get_from(content, row_id)

        content.pull(item.row_id)
        self._put_content(content)

        logger.debug("Removed %s from wishlist %s.", item.row_id, self._instance)
        self.events.emit(ITEM_REMOVED, item)

    def associate(self, row_id: str, model) -> None:
        if isinstance(model, str):
            resolve_model(model)

        content = self._get_content()
        item = self._get_from(content, row_id)
        item.associate(model)

        content.put(item)
        self._put_content(content)

    def set_tax(self, row_id: str, tax_rate) -> None:
        content = self._get_content()
        item = self._get_from(content, row_id)
        item.set_tax_rate(tax_rate)

        content.put(item)
        self._put_content(content)

    def search(self, predicate: Callable[[WishlistItem, str], bool]) -> ItemStore:
        return self._get_content().filter(predicate)

    # Aggregates

    def count(self):
        return self._get_content().sum("qty")

    def subtotal_value(self) -> Decimal:
        return to_decimal(self._get_content().sum("subtotal"))

    def tax_value(self) -> Decimal:
        return to_decimal(self._get_content().sum("tax"))

    def total_value(self) -> Decimal:
        return to_decimal(self._get_content().sum("total"))

    def subtotal(self, decimals=None, decimal_point=None, thousands_separator=None) -> str:
        return self.format(self.subtotal_value(), decimals, decimal_point, thousands_separator)

    def tax(self, decimals=None, decimal_point=None, thousands_separator=None) -> str:
        return self.format(self.tax_value(), decimals, decimal_point, thousands_separator)

    def total(self, decimals=None, decimal_point=None, thousands_separator=None) -> str:
        return self.format(self.total_value(), decimals, decimal_point, thousands_separator)

    def format(self, value, decimals=None, decimal_point=None, thousands_separator=None) -> str:
        return self.config.number_format.format(value, decimals, decimal_point, thousands_separator)

    # Durable storage

    def store(self, identifier) -> None:
        content = self._get_content()
        self.bridge.save(identifier, self._instance, content)
        self.events.emit(ITEM_STORED, identifier)

    def restore(self, identifier) -> None:
        """
        Put a stored wishlist back into its instance and delete the stored row.

        Rows already in the session under the same identity are overwritten,
        not summed. Unknown identifiers are ignored.
        """
        stored = self.bridge.load(identifier)
        if stored is None:
            return

        current_instance = self._instance
        self.instance(stored.instance)
        try:
            content = self._get_content()
            for item in stored.items:
                content.put(item)
            self._put_content(content)
            self.events.emit(ITEM_RESTORED, identifier)
        finally:
            self.instance(current_instance)

        self.bridge.discard(identifier)
        logger.info("Restored wishlist %r into instance %s.", stored.identifier, stored.instance)


def get_wishlist(request: HttpRequest, instance: str | None = None, events: Notifier | None = None) -> WishlistManager:
    """Wishlist bound to ``request.session``, pointed at ``instance``."""
    return WishlistManager(DjangoSessionStore(request.session), events=events).instance(instance)
