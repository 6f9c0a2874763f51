"""LRU 캐시 데모: A~D 를 넣고 B 를 조회해 최근 사용 순서를 보여준다.

Usage:
    hashmap-cache-demo
    python -m hashmap_cache.demo --capacity 2 --verbose
"""
from __future__ import annotations

import argparse
from typing import List, Optional

from hashmap_cache.cache.lru import LRUCache
from hashmap_cache.cache.protocol import Cache
from hashmap_cache.utils.config import load_config

DEMO_KEYS = ["A", "B", "C", "D"]


def _show(cache: LRUCache[str, str], step: str) -> None:
    print(f"  {step:<22} -> {cache.keys()}")


def run_demo(capacity: int, verbose: bool = False) -> Optional[str]:
    cache: LRUCache[str, str] = LRUCache(capacity)
    typed: Cache[str, str] = cache

    print(f"--- LRU cache demo (capacity={cache.capacity}) ---")
    for key in DEMO_KEYS:
        typed.put(key, f"value_{key.lower()}")
        if verbose:
            _show(cache, f"put({key!r})")

    typed.get("B")
    if verbose:
        _show(cache, "get('B')")

    value = typed.get("B")
    print(f"get('B') = {value!r}")
    print(f"order (LRU -> MRU): {cache.keys()}")
    return value


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="LRU cache demonstration")
    parser.add_argument("--capacity", type=int, default=None, help="cache capacity (overrides CACHE_CAPACITY)")
    parser.add_argument("--env", default=None, help="path to a .env file")
    parser.add_argument("--verbose", action="store_true", help="print cache order after each step")
    args = parser.parse_args(argv)

    cfg = load_config(args.env)
    capacity = args.capacity if args.capacity is not None else cfg.cache_capacity
    run_demo(capacity, verbose=args.verbose or cfg.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
