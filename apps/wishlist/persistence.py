"""
Durable storage for whole wishlist instances.

``StoredWishlistRepository`` is the only code touching the table;
``PersistenceBridge`` turns an ``ItemStore`` into a stored row and back.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from django.core.serializers.json import DjangoJSONEncoder

from .exceptions import AlreadyStoredError
from .items import WishlistItem
from .models import StoredWishlist
from .store import ItemStore

logger = logging.getLogger(__name__)


def serialize_content(store: ItemStore) -> str:
    return json.dumps(store.to_data(), cls=DjangoJSONEncoder)


def deserialize_content(content: str) -> list[WishlistItem]:
    return [WishlistItem.from_data(entry) for entry in json.loads(content or "[]")]


class StoredWishlistRepository:
    def __init__(self, using: str = "default"):
        self.using = using

    def _queryset(self):
        return StoredWishlist.objects.using(self.using)

    def exists(self, identifier) -> bool:
        return self._queryset().filter(identifier=str(identifier)).exists()

    def insert(self, identifier, instance: str, content: str) -> StoredWishlist:
        record = StoredWishlist(identifier=str(identifier), wishlist_instance=instance, content=content)
        record.save(using=self.using)
        return record

    def find_by_identifier(self, identifier) -> StoredWishlist | None:
        return self._queryset().filter(identifier=str(identifier)).first()

    def delete_by_identifier(self, identifier) -> int:
        deleted, _ = self._queryset().filter(identifier=str(identifier)).delete()
        return deleted


@dataclass
class StoredContent:
    identifier: str
    instance: str
    items: list[WishlistItem]


class PersistenceBridge:
    def __init__(self, repository: StoredWishlistRepository):
        self.repository = repository

    def save(self, identifier, instance: str, store: ItemStore) -> StoredWishlist:
        if self.repository.exists(identifier):
            logger.warning("Refusing to store wishlist %r: identifier already taken.", identifier)
            raise AlreadyStoredError(identifier)

        record = self.repository.insert(identifier, instance, serialize_content(store))
        logger.info("Stored wishlist %r (%s) with %d row(s).", record.identifier, instance, len(store))
        return record

    def load(self, identifier) -> StoredContent | None:
        record = self.repository.find_by_identifier(identifier)
        if record is None:
            return None
        return StoredContent(record.identifier, record.wishlist_instance, deserialize_content(record.content))

    def discard(self, identifier) -> None:
        self.repository.delete_by_identifier(identifier)
