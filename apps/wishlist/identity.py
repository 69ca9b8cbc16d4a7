"""
Row identity for wishlist items.

A row id is the md5 hex digest of the product id followed by the option set
in a canonical, key-sorted encoding. The encoding follows PHP's
``serialize()`` format, so id 1 without options is always
``027c91341fd5cf4d2579b49c4b6a90da``.
"""

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from decimal import Decimal


def _encode_string(value: str) -> str:
    return f's:{len(value.encode("utf-8"))}:"{value}";'


def _encode_key(key) -> str:
    if isinstance(key, bool):
        key = int(key)
    if isinstance(key, int):
        return f"i:{key};"
    key = str(key)
    # Integer-like string keys are stored as integers by PHP arrays.
    if key.isdigit() and (key == "0" or not key.startswith("0")):
        return f"i:{int(key)};"
    return _encode_string(key)


def _encode_float(value: float) -> str:
    if value == int(value) and abs(value) < 1e15:
        return f"d:{int(value)};"
    return f"d:{value!r};"


def _encode_value(value) -> str:
    if value is None:
        return "N;"
    if isinstance(value, bool):
        return f"b:{int(value)};"
    if isinstance(value, int):
        return f"i:{value};"
    if isinstance(value, float):
        return _encode_float(value)
    if isinstance(value, Decimal):
        return _encode_float(float(value))
    if isinstance(value, Mapping):
        return _encode_array(list(value.items()))
    if isinstance(value, (list, tuple)):
        return _encode_array(list(enumerate(value)), sort=False)
    return _encode_string(str(value))


def _encode_array(pairs, sort: bool = True) -> str:
    if sort:
        pairs = sorted(pairs, key=lambda pair: str(pair[0]))
    body = "".join(f"{_encode_key(key)}{_encode_value(value)}" for key, value in pairs)
    return f"a:{len(pairs)}:{{{body}}}"


def canonical_options(options: Mapping | None) -> str:
    """Encode ``options`` with keys sorted, independent of insertion order."""
    return _encode_array(list((options or {}).items()))


def compute_row_id(item_id, options: Mapping | None = None) -> str:
    payload = f"{item_id}{canonical_options(options)}"
    return hashlib.md5(payload.encode("utf-8")).hexdigest()
