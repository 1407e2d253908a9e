"""Standardization table repository."""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import import_module
from types import MappingProxyType
from typing import Mapping

from bean_board.normalization.types import Domain


def lookup_key(value: str) -> str:
    return value.lower().strip()


@dataclass(frozen=True)
class StandardizationTable:
    domain: Domain
    entries: Mapping[str, str] = field(default_factory=dict)

    def lookup(self, value: str) -> str | None:
        return self.entries.get(lookup_key(value))

    def __len__(self) -> int:
        return len(self.entries)


class TableRepository:
    """Loads roaster and origin tables from packaged data modules."""

    def __init__(self, version: str = "v1"):
        self.version = version
        try:
            module = import_module(f"bean_board.normalization.data.{version}")
        except ModuleNotFoundError as exc:
            raise ValueError(f"Unknown dictionary version: {version}") from exc
        self.roasters = _build_table("roaster", module.ROASTERS)
        self.origins = _build_table("origin", module.ORIGINS)

    def table(self, domain: Domain) -> StandardizationTable:
        return self.roasters if domain == "roaster" else self.origins


def _build_table(domain: Domain, data: Mapping[str, str]) -> StandardizationTable:
    entries = {lookup_key(variant): canonical for variant, canonical in data.items()}
    return StandardizationTable(domain=domain, entries=MappingProxyType(entries))
