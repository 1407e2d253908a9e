"""Sources for bean-board."""

from bean_board.sources.base import BaseSource
from bean_board.sources.file import FileCsvSource
from bean_board.sources.google_sheets import SHEET_CSV_URL, SheetsCsvSource

__all__ = ["BaseSource", "FileCsvSource", "SheetsCsvSource", "SHEET_CSV_URL"]
