"""
Signals for the wishlist app.

Every wishlist mutation is announced through a notifier; the default one
sends the Django signals below. Receivers get ``event`` (the event name) and
``payload`` (the item for item events, the identifier for store/restore).

Also clears the session wishlists on logout when configured to.
"""

import logging
from typing import Protocol

from django.contrib.auth.signals import user_logged_out
from django.dispatch import Signal, receiver

from .conf import get_wishlist_settings
from .session import DjangoSessionStore

logger = logging.getLogger(__name__)

ITEM_ADDED = "item.added"
ITEM_UPDATED = "item.updated"
ITEM_REMOVED = "item.removed"
ITEM_STORED = "item.stored"
ITEM_RESTORED = "item.restored"

item_added = Signal()
item_updated = Signal()
item_removed = Signal()
item_stored = Signal()
item_restored = Signal()

SIGNALS = {
    ITEM_ADDED: item_added,
    ITEM_UPDATED: item_updated,
    ITEM_REMOVED: item_removed,
    ITEM_STORED: item_stored,
    ITEM_RESTORED: item_restored,
}


class Notifier(Protocol):
    def emit(self, event: str, payload=None) -> None: ...


class SignalNotifier:
    def __init__(self, sender=None):
        self.sender = sender

    def emit(self, event: str, payload=None) -> None:
        try:
            signal = SIGNALS[event]
        except KeyError:
            raise ValueError(f"Unknown wishlist event {event!r}.") from None
        signal.send(sender=self.sender, event=event, payload=payload)


@receiver(user_logged_out)
def destroy_wishlists_on_logout(sender, request, user, **kwargs):
    """Drop every wishlist instance from the session when DESTROY_ON_LOGOUT is on."""
    config = get_wishlist_settings()
    if not config.destroy_on_logout or request is None:
        return

    session = DjangoSessionStore(request.session)
    prefix = f"{config.session_namespace}."
    removed = [key for key in session.keys() if key.startswith(prefix)]
    for key in removed:
        session.remove(key)

    if removed:
        logger.debug("Destroyed %d wishlist instance(s) on logout.", len(removed))
