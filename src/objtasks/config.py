from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjtasksConfig:
    log_level: str = "WARNING"
    json_indent: int | None = None  # None = compact output
    json_sort_keys: bool = False
