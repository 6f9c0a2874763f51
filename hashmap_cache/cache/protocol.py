from __future__ import annotations

from typing import Optional, Protocol, TypeVar

K = TypeVar("K", contravariant=True)
V = TypeVar("V")


class Cache(Protocol[K, V]):
    def put(self, key: K, value: V) -> None:
        ...

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        ...

    def __len__(self) -> int:
        ...
