from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class DemoConfig:
    cache_capacity: int = 3
    # 단계마다 캐시 상태 출력
    verbose: bool = False


def load_config(env_path: Optional[str] = None) -> DemoConfig:
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv()
    raw_capacity = os.getenv("CACHE_CAPACITY", "3")
    try:
        capacity = int(raw_capacity)
    except ValueError:
        raise ValueError(f"CACHE_CAPACITY must be an integer, got {raw_capacity!r}") from None
    return DemoConfig(
        cache_capacity=capacity,
        verbose=os.getenv("DEMO_VERBOSE", "0") not in ("0", "false", "False"),
    )
