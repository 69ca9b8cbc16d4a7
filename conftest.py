import pytest
from django.contrib.sessions.backends.db import SessionStore

from apps.wishlist.conf import NumberFormat, WishlistSettings
from apps.wishlist.services import WishlistManager
from apps.wishlist.session import DjangoSessionStore


class RecordingNotifier:
    """Collects emitted events instead of sending signals."""

    def __init__(self):
        self.events = []

    def emit(self, event, payload=None):
        self.events.append((event, payload))

    def names(self):
        return [event for event, _ in self.events]


@pytest.fixture
def session():
    return SessionStore()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def config():
    return WishlistSettings()


@pytest.fixture
def wishlist(session, notifier, config):
    return WishlistManager(DjangoSessionStore(session), events=notifier, config=config)


@pytest.fixture
def untaxed_wishlist(session, notifier):
    return WishlistManager(
        DjangoSessionStore(session),
        events=notifier,
        config=WishlistSettings(tax_rate=0, number_format=NumberFormat()),
    )
