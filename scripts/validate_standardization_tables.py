"""Validate roaster/origin standardization tables.

Checks:
1. Variant keys are already lowercase and trimmed (lookups use that form).
2. Canonical names are non-empty.
3. No chains: a canonical name never looks up to a different canonical name,
   so standardizing twice gives the same result as standardizing once.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
DATA_ROOT = ROOT / "src" / "bean_board" / "normalization" / "data"
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))


def fail(message: str) -> None:
    print(f"[table-check] ERROR: {message}")
    raise SystemExit(1)


def find_problems(label: str, table: dict[str, str]) -> list[str]:
    problems: list[str] = []
    for variant, canonical in table.items():
        if variant != variant.lower().strip():
            problems.append(f"{label}: key is not lowercase-trimmed: {variant!r}")
        if not canonical.strip():
            problems.append(f"{label}: empty canonical name for {variant!r}")
            continue
        chained = table.get(canonical.lower().strip(), canonical)
        if chained != canonical:
            problems.append(f"{label}: {canonical!r} maps onward to {chained!r}")
    return problems


def iter_table_versions() -> list[str]:
    versions = [
        path.name
        for path in sorted(DATA_ROOT.iterdir())
        if path.is_dir() and (path / "__init__.py").exists()
    ]
    if not versions:
        fail(f"No table versions found under {DATA_ROOT}")
    return versions


def main() -> int:
    problems: list[str] = []
    for version in iter_table_versions():
        module = importlib.import_module(f"bean_board.normalization.data.{version}")
        problems.extend(find_problems(f"{version}/roasters", module.ROASTERS))
        problems.extend(find_problems(f"{version}/origins", module.ORIGINS))

    if problems:
        fail("; ".join(problems))

    print("[table-check] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
