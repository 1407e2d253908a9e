"""Local CSV file source."""

from __future__ import annotations

from pathlib import Path

from bean_board.exceptions import FetchError
from bean_board.sources.base import BaseSource


class FileCsvSource(BaseSource):
    """Reads a CSV export saved to disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def read_text(self) -> str:
        if not self.path.exists():
            raise FetchError(f"CSV file not found: {self.path}")
        try:
            return self.path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise FetchError(f"Failed to read CSV file: {exc}") from exc

    def describe(self) -> str:
        return f"file:{self.path}"
