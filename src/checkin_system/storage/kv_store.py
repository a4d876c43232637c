from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """String-to-string persistence used by the record store.

    Implementations raise PersistenceError on I/O failures.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError
