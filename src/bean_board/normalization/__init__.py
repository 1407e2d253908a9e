"""Name standardization utilities for bean-board."""

from bean_board.normalization.engine import (
    NameStandardizer,
    StandardizationConfig,
    standardize_names,
    standardize_origin_name,
    standardize_roaster_name,
)
from bean_board.normalization.repository import StandardizationTable, TableRepository

__all__ = [
    "NameStandardizer",
    "StandardizationConfig",
    "StandardizationTable",
    "TableRepository",
    "standardize_names",
    "standardize_origin_name",
    "standardize_roaster_name",
]
