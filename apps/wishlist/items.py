from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from django.apps import apps
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.utils.module_loading import import_string

from .conf import NumberFormat
from .exceptions import UnknownModelError, ValidationError
from .formatting import to_decimal
from .identity import compute_row_id

FORMATTABLE_ATTRIBUTES = ("price", "price_tax", "unit_tax", "subtotal", "total", "tax")
DECIMAL_TAG = "__decimal__"


def _dump_option(value):
    """Make an option value JSON-safe without losing the type its row id was computed from."""
    if isinstance(value, Decimal):
        return {DECIMAL_TAG: str(value)}
    if isinstance(value, Mapping):
        return {key: _dump_option(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_dump_option(item) for item in value]
    return value


def _load_option(value):
    if isinstance(value, Mapping):
        if set(value) == {DECIMAL_TAG}:
            return Decimal(value[DECIMAL_TAG])
        return {key: _load_option(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_load_option(item) for item in value]
    return value


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _coerce_number(value, field: str):
    """Return ``value`` as int or Decimal, raising ``ValidationError`` for anything non-numeric."""
    if isinstance(value, bool) or value is None:
        raise ValidationError(field)
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal, str)):
        try:
            number = to_decimal(value.strip() if isinstance(value, str) else value)
        except (InvalidOperation, ValueError):
            raise ValidationError(field) from None
        if not number.is_finite():
            raise ValidationError(field)
        return number
    raise ValidationError(field)


def validate_identifier(value):
    if _is_blank(value) or isinstance(value, bool):
        raise ValidationError("identifier")
    return value


def validate_name(value):
    if _is_blank(value):
        raise ValidationError("name")
    return value


def validate_quantity(value):
    return _coerce_number(value, "quantity")


def validate_price(value) -> Decimal:
    price = to_decimal(_coerce_number(value, "price"))
    if price < 0:
        raise ValidationError("price")
    return price


def validate_options(value) -> dict:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValidationError("options")
    return dict(value)


def model_label(model_class) -> str:
    if isinstance(model_class, type) and issubclass(model_class, models.Model):
        return model_class._meta.label
    return f"{model_class.__module__}.{model_class.__qualname__}"


def resolve_model(label: str):
    """Resolve a Django model label ("app_label.Model") or a dotted import path to a class."""
    try:
        return apps.get_model(label)
    except (LookupError, ValueError):
        pass
    try:
        return import_string(label)
    except ImportError:
        raise UnknownModelError(label) from None


@dataclass(frozen=True)
class ModelReference:
    """Points a wishlist item at an external object: a type label and, optionally, its key."""

    label: str
    pk: Any = None

    @classmethod
    def from_target(cls, target) -> ModelReference:
        if isinstance(target, str):
            resolve_model(target)
            return cls(target)
        if isinstance(target, type):
            return cls(model_label(target))
        pk = target.pk if isinstance(target, models.Model) else None
        return cls(model_label(type(target)), pk)

    def resolve(self):
        return resolve_model(self.label)

    def to_data(self) -> dict:
        return {"label": self.label, "pk": self.pk}

    @classmethod
    def from_data(cls, data) -> ModelReference | None:
        if not data:
            return None
        return cls(data["label"], data.get("pk"))


class WishlistItem:
    """
    One row of a wishlist.

    Identity (``row_id``) is derived from ``id`` and ``options`` and is
    recomputed whenever either changes. Monetary values derived from price,
    quantity and tax rate are computed on read and never stored.
    """

    def __init__(self, id, name, price, options=None, qty=1, tax_rate=0):
        self.id = validate_identifier(id)
        self.name = validate_name(name)
        self.price = validate_price(price)
        self.options = validate_options(options)
        self.qty = validate_quantity(qty)
        self.tax_rate = to_decimal(_coerce_number(tax_rate, "tax rate"))
        self.associated_model: ModelReference | None = None
        self.row_id = compute_row_id(self.id, self.options)

    def __repr__(self) -> str:
        return f"<WishlistItem {self.row_id} id={self.id!r} qty={self.qty}>"

    # Construction

    @classmethod
    def from_attributes(cls, id, name, qty, price, options=None) -> WishlistItem:
        validate_identifier(id)
        validate_name(name)
        validate_quantity(qty)
        validate_price(price)
        return cls(id, name, price, options, qty=qty)

    @classmethod
    def from_dict(cls, attributes: Mapping) -> WishlistItem:
        return cls.from_attributes(
            attributes.get("id"),
            attributes.get("name"),
            attributes.get("qty"),
            attributes.get("price"),
            attributes.get("options") or {},
        )

    @classmethod
    def from_buyable(cls, buyable, options=None, qty=1) -> WishlistItem:
        options = validate_options(options)
        return cls.from_attributes(
            buyable.get_buyable_identifier(options),
            buyable.get_buyable_description(options),
            qty,
            buyable.get_buyable_price(options),
            options,
        )

    # Mutation

    def set_quantity(self, qty) -> None:
        self.qty = validate_quantity(qty)

    def set_tax_rate(self, tax_rate) -> None:
        self.tax_rate = to_decimal(_coerce_number(tax_rate, "tax rate"))

    def update_from_buyable(self, buyable) -> None:
        item_id = validate_identifier(buyable.get_buyable_identifier(self.options))
        name = validate_name(buyable.get_buyable_description(self.options))
        price = validate_price(buyable.get_buyable_price(self.options))

        self.id, self.name, self.price = item_id, name, price
        self.row_id = compute_row_id(self.id, self.options)

    def update_from_dict(self, attributes: Mapping) -> None:
        # Validate everything first so a bad field leaves the item untouched.
        changes = {}
        if "id" in attributes:
            changes["id"] = validate_identifier(attributes["id"])
        if "name" in attributes:
            changes["name"] = validate_name(attributes["name"])
        if "qty" in attributes:
            changes["qty"] = validate_quantity(attributes["qty"])
        if "price" in attributes:
            changes["price"] = validate_price(attributes["price"])
        if "options" in attributes:
            changes["options"] = validate_options(attributes["options"])

        for attribute, value in changes.items():
            setattr(self, attribute, value)
        self.row_id = compute_row_id(self.id, self.options)

    def associate(self, target) -> None:
        self.associated_model = (
            target if isinstance(target, ModelReference) else ModelReference.from_target(target)
        )

    @property
    def model(self):
        """The associated Django model instance, looked up by its key or by the item id."""
        if self.associated_model is None:
            return None
        try:
            model_class = self.associated_model.resolve()
        except UnknownModelError:
            return None
        if not (isinstance(model_class, type) and issubclass(model_class, models.Model)):
            return None
        pk = self.associated_model.pk if self.associated_model.pk is not None else self.id
        return model_class._default_manager.filter(pk=pk).first()

    # Derived values

    @property
    def unit_tax(self) -> Decimal:
        return self.price * self.tax_rate / Decimal("100")

    @property
    def price_tax(self) -> Decimal:
        return self.price + self.unit_tax

    @property
    def subtotal(self) -> Decimal:
        return to_decimal(self.qty) * self.price

    @property
    def total(self) -> Decimal:
        return to_decimal(self.qty) * self.price_tax

    @property
    def tax(self) -> Decimal:
        return to_decimal(self.qty) * self.unit_tax

    def format(
        self,
        attribute: str,
        number_format: NumberFormat | None = None,
        decimals=None,
        decimal_point=None,
        thousands_separator=None,
    ) -> str:
        if attribute not in FORMATTABLE_ATTRIBUTES:
            raise ValueError(f"{attribute!r} is not a monetary attribute of a wishlist item.")
        return (number_format or NumberFormat()).format(
            getattr(self, attribute), decimals, decimal_point, thousands_separator
        )

    # Serialization

    def to_dict(self) -> dict:
        return {
            "row_id": self.row_id,
            "id": self.id,
            "name": self.name,
            "qty": self.qty,
            "price": self.price,
            "options": dict(self.options),
            "tax": self.tax,
            "subtotal": self.subtotal,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), cls=DjangoJSONEncoder)

    def to_data(self) -> dict:
        """Lossless, JSON-safe form used for the session and the stored table."""
        return {
            "row_id": self.row_id,
            "id": self.id,
            "name": self.name,
            "qty": self.qty if isinstance(self.qty, int) else str(self.qty),
            "price": str(self.price),
            "options": _dump_option(self.options),
            "tax_rate": str(self.tax_rate),
            "associated_model": self.associated_model.to_data() if self.associated_model else None,
        }

    @classmethod
    def from_data(cls, data: Mapping) -> WishlistItem:
        item = cls(
            data["id"],
            data["name"],
            data["price"],
            _load_option(data.get("options") or {}),
            qty=data["qty"],
            tax_rate=data.get("tax_rate", 0),
        )
        item.associated_model = ModelReference.from_data(data.get("associated_model"))
        return item
