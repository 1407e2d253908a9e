"""Environment-driven configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from bean_board.sources.google_sheets import SHEET_CSV_URL


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _safe_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class BoardConfig:
    csv_url: str = SHEET_CSV_URL
    source: str = "sheets"  # sheets|file
    csv_path: str | None = None
    cache_ttl_sec: float = 300.0
    fetch_timeout_sec: float = 10.0
    fetch_retries: int = 2
    retry_backoff_sec: float = 1.0
    dictionary_version: str = "v1"

    @classmethod
    def from_env(cls) -> "BoardConfig":
        return cls(
            csv_url=os.getenv("BEAN_BOARD_CSV_URL") or SHEET_CSV_URL,
            source=(os.getenv("BEAN_BOARD_SOURCE", "sheets").strip().lower() or "sheets"),
            csv_path=os.getenv("BEAN_BOARD_CSV_PATH"),
            cache_ttl_sec=max(0.0, _safe_float(os.getenv("BEAN_BOARD_CACHE_TTL_SEC"), 300.0)),
            fetch_timeout_sec=_safe_float(os.getenv("BEAN_BOARD_FETCH_TIMEOUT_SEC"), 10.0),
            fetch_retries=max(0, _safe_int(os.getenv("BEAN_BOARD_FETCH_RETRIES"), 2)),
            retry_backoff_sec=max(0.0, _safe_float(os.getenv("BEAN_BOARD_RETRY_BACKOFF_SEC"), 1.0)),
            dictionary_version=os.getenv("BEAN_BOARD_DICTIONARY_VERSION", "v1"),
        )
