"""Standardization tables v1."""

from bean_board.normalization.data.v1.origins import ORIGINS
from bean_board.normalization.data.v1.roasters import ROASTERS

__all__ = ["ROASTERS", "ORIGINS"]
