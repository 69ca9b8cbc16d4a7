from decimal import Decimal


class BuyableProduct:
    """Plain object implementing the buyable interface."""

    def __init__(self, id=1, name="Item name", price=Decimal("10.00")):
        self.id = id
        self.name = name
        self.price = price

    def get_buyable_identifier(self, options=None):
        return self.id

    def get_buyable_description(self, options=None):
        return self.name

    def get_buyable_price(self, options=None):
        return self.price


class NotBuyable:
    def __init__(self, id=1):
        self.id = id
