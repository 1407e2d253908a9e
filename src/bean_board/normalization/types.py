"""Shared types for name standardization."""

from typing import Literal

Domain = Literal["roaster", "origin"]
