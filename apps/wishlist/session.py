from __future__ import annotations

from typing import Any, Protocol


class SessionStore(Protocol):
    def get(self, key: str) -> Any: ...

    def put(self, key: str, value: Any) -> None: ...

    def has(self, key: str) -> bool: ...

    def remove(self, key: str) -> None: ...

    def keys(self) -> list[str]: ...


class DjangoSessionStore:
    """Adapts a Django ``SessionBase`` (``request.session``) to the wishlist session protocol."""

    def __init__(self, session):
        self.session = session

    def get(self, key: str) -> Any:
        return self.session.get(key)

    def put(self, key: str, value: Any) -> None:
        self.session[key] = value

    def has(self, key: str) -> bool:
        return key in self.session

    def remove(self, key: str) -> None:
        self.session.pop(key, None)

    def keys(self) -> list[str]:
        return list(self.session.keys())


def session_key(namespace: str, instance: str) -> str:
    return f"{namespace}.{instance}"
