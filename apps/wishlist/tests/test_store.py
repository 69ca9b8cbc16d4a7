from decimal import Decimal

from apps.wishlist.items import WishlistItem
from apps.wishlist.store import ItemStore


def make_item(id=1, qty=1, price="10.00", options=None):
    return WishlistItem(id, f"Item {id}", price, options, qty=qty)


class TestItemStore:
    def test_merge_sums_quantities(self):
        store = ItemStore()
        store.merge(make_item(qty=1))
        merged = store.merge(make_item(qty=2))

        assert len(store) == 1
        assert merged.qty == 3
        assert store.get(merged.row_id) is merged

    def test_put_overwrites(self):
        store = ItemStore([make_item(qty=5)])
        store.put(make_item(qty=2))

        assert len(store) == 1
        assert store.first().qty == 2

    def test_keeps_insertion_order(self):
        store = ItemStore([make_item(3), make_item(1), make_item(2)])
        assert [item.id for item in store] == [3, 1, 2]

    def test_pull(self):
        item = make_item()
        store = ItemStore([item])
        assert store.pull(item.row_id) is item
        assert store.pull(item.row_id) is None
        assert not store

    def test_filter_preserves_order_and_source(self):
        store = ItemStore([make_item(1), make_item(2), make_item(3)])
        found = store.filter(lambda item, row_id: item.id != 2)

        assert [item.id for item in found] == [1, 3]
        assert len(store) == 3

    def test_sum(self):
        store = ItemStore([make_item(1, qty=2), make_item(2, qty=Decimal("0.5"), price="4.00")])
        assert store.sum("qty") == Decimal("2.5")
        assert store.sum("subtotal") == Decimal("22.00")
        assert ItemStore().sum("qty") == 0

    def test_from_data(self):
        source = ItemStore([make_item(1, options={"color": "red"}), make_item(2)])
        restored = ItemStore.from_data(source.to_data())

        assert restored.keys() == source.keys()
        assert ItemStore.from_data(None).keys() == []
