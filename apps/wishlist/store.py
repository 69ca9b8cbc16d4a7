from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from decimal import Decimal

from .formatting import to_decimal
from .items import WishlistItem


class ItemStore:
    """
    Insertion-ordered ``row_id -> WishlistItem`` mapping for one wishlist instance.

    ``merge`` sums quantities when the row already exists (the add policy),
    ``put`` overwrites (the restore policy).
    """

    def __init__(self, items: Iterable[WishlistItem] = ()):
        self._items: dict[str, WishlistItem] = {}
        for item in items:
            self.put(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[WishlistItem]:
        return iter(self._items.values())

    def __contains__(self, row_id) -> bool:
        return row_id in self._items

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"<ItemStore rows={len(self)}>"

    def has(self, row_id: str) -> bool:
        return row_id in self._items

    def get(self, row_id: str, default=None) -> WishlistItem | None:
        return self._items.get(row_id, default)

    def put(self, item: WishlistItem) -> WishlistItem:
        self._items[item.row_id] = item
        return item

    def merge(self, item: WishlistItem) -> WishlistItem:
        existing = self._items.get(item.row_id)
        if existing is not None:
            item.qty = existing.qty + item.qty
        return self.put(item)

    def pull(self, row_id: str) -> WishlistItem | None:
        return self._items.pop(row_id, None)

    def keys(self) -> list[str]:
        return list(self._items)

    def values(self) -> list[WishlistItem]:
        return list(self._items.values())

    def items(self) -> list[tuple[str, WishlistItem]]:
        return list(self._items.items())

    def first(self) -> WishlistItem | None:
        return next(iter(self._items.values()), None)

    def filter(self, predicate: Callable[[WishlistItem, str], bool]) -> ItemStore:
        return ItemStore(item for row_id, item in self._items.items() if predicate(item, row_id))

    def sum(self, attribute: str) -> Decimal | int:
        total = 0
        for item in self._items.values():
            value = getattr(item, attribute)
            total = total + (value if isinstance(value, int) else to_decimal(value))
        return total

    def to_dict(self) -> dict[str, dict]:
        return {row_id: item.to_dict() for row_id, item in self._items.items()}

    def to_data(self) -> list[dict]:
        return [item.to_data() for item in self._items.values()]

    @classmethod
    def from_data(cls, data: Iterable[dict] | None) -> ItemStore:
        return cls(WishlistItem.from_data(entry) for entry in data or ())
