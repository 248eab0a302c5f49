"""
Per-generation patch reconciliation.

A patch overlay is a sparse JSON object keyed by stringified dex number::

    {"25": {"baseStats": {"def": 30}}, "35": {"types": ["노말"]}}

Applying it to the base dataset yields that generation's dataset. Top-level
fields replace the base value; ``baseStats`` merges stat by stat. Entries
for dex numbers missing from the base are ignored: reconciliation never
adds or removes records, and never mutates the base.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from dexbuild.exceptions import PatchParseError
from dexbuild.schemas import SpeciesPatch, SpeciesRecord

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

Overlay = dict[str, SpeciesPatch]


# =============================================================================
# Merge
# =============================================================================


def merge_record(record: SpeciesRecord, patch: SpeciesPatch) -> SpeciesRecord:
    """Return a new record with ``patch`` applied to ``record``."""
    changes = patch.changes()
    stats = changes.pop("baseStats", None)

    merged: dict[str, Any] = record.to_json()
    merged.update(changes)
    if stats:
        merged["baseStats"] = {**merged["baseStats"], **stats}
    return SpeciesRecord.model_validate(merged)


def reconcile(
    base: list[SpeciesRecord], overlay: Mapping[str, SpeciesPatch]
) -> list[SpeciesRecord]:
    """
    Apply a patch overlay to the base dataset.

    Args:
        base: Base records (not modified).
        overlay: Dex number string -> patch.

    Returns:
        All records, patched where the overlay matches, sorted by ``dexNo``.
        With an empty overlay, ``base`` itself is returned.
    """
    if not overlay:
        return base

    by_dex: dict[int, SpeciesRecord] = {r.dex_no: r for r in base}
    for dex_str, patch in overlay.items():
        dex = int(dex_str)
        row = by_dex.get(dex)
        if row is None:
            continue
        by_dex[dex] = merge_record(row, patch)

    return sorted(by_dex.values(), key=lambda r: r.dex_no)


# =============================================================================
# Overlay files
# =============================================================================


def parse_overlay(raw: Any, path: Path) -> Overlay:
    """Validate a decoded patch file.

    Raises:
        PatchParseError: If ``raw`` is not an object, a key is not an
            integer dex number, or an entry is not a valid patch.
    """
    if not isinstance(raw, dict):
        raise PatchParseError(path, "expected a JSON object keyed by dex number")

    overlay: Overlay = {}
    for key, entry in raw.items():
        try:
            int(key)
        except ValueError:
            raise PatchParseError(path, f"key {key!r} is not a dex number") from None
        try:
            overlay[key] = SpeciesPatch.model_validate(entry)
        except ValidationError as exc:
            msg = f"entry {key!r} is invalid ({exc.error_count()} errors)"
            raise PatchParseError(path, msg) from exc
    return overlay


def read_overlay(path: Path) -> Overlay:
    """Read and validate a patch file.

    Raises:
        PatchParseError: If the file cannot be read, decoded, or validated.
    """
    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise PatchParseError(path, str(exc)) from exc
    return parse_overlay(raw, path)


def load_overlay(path: Path) -> Overlay:
    """Load a generation's patch file, treating problems as "no patches".

    A missing file is the normal case and is silent. An unreadable or
    malformed file is also treated as empty, with a warning printed so the
    typo is visible in the run log.
    """
    if not path.exists():
        return {}
    try:
        return read_overlay(path)
    except PatchParseError as exc:
        print(f"WARNING: ignoring patch file {exc}")
        return {}
