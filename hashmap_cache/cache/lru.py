from __future__ import annotations

from collections import OrderedDict
from typing import Generic, List, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """고정 용량 LRU 캐시 (OrderedDict 하나로 내용과 순서를 함께 관리).

    - 순서: 앞쪽 = 가장 오래 사용하지 않은 키, 뒤쪽 = 가장 최근 사용한 키
    - get: 키가 존재하면 값을 반환하고, 가장 최근 사용으로 갱신 (miss 시 변경 없음)
    - put: 기존 키면 값 갱신 후 최근 사용으로 이동, 새 키면 용량이 찼을 때 정확히 하나를 제거

    스레드 안전하지 않음. 여러 스레드에서 쓰려면 호출부에서 lock 으로 감싸야 함.
    """

    def __init__(self, capacity: int = 1024) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"LRUCache capacity must be an int, got {type(capacity).__name__}")
        if capacity <= 0:
            raise ValueError("LRUCache capacity must be > 0")
        self._capacity = capacity
        self._store: "OrderedDict[K, V]" = OrderedDict()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        if key not in self._store:
            return default
        self._touch(key)
        return self._store[key]

    def put(self, key: K, value: V) -> None:
        if key in self._store:
            self._store[key] = value
            self._touch(key)
            return
        if len(self._store) >= self._capacity:
            self._store.popitem(last=False)  # remove least recently used
        self._store[key] = value

    def _touch(self, key: K) -> None:
        """키를 가장 최근 사용 위치(끝)로 이동. 없는 키면 KeyError."""
        self._store.move_to_end(key)

    def keys(self) -> List[K]:
        """LRU -> MRU 순서의 키 스냅샷 (최근 사용 순서를 바꾸지 않음)"""
        return list(self._store.keys())

    def items(self) -> List[Tuple[K, V]]:
        return list(self._store.items())

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, keys={self.keys()!r})"
