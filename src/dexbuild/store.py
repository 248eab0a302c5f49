"""Per-generation dataset output.

Layout under the output directory::

    {output_dir}/
    ├── gen6/species.json              # JSON array of species records
    ├── gen6/species.json.meta.json    # sidecar: source, generated_at, count
    └── gen9/...

The dataset file itself is a bare JSON array (the format the calculator app
imports); build metadata lives in the sidecar so the dataset stays clean.
Patch overlays are read from ``{patch_dir}/{generation}-species-patches.json``.

Writes overwrite in place. There is no partial-write protection; a failed
write propagates to the caller.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dexbuild.schemas import SpeciesRecord

DATASET_FILENAME = "species.json"
PATCH_SUFFIX = "-species-patches.json"


class DatasetStore:
    """Manages the generated per-generation datasets and their patch files."""

    def __init__(self, base_dir: Path, patch_dir: Path | None = None) -> None:
        self.base = base_dir
        self.patches = patch_dir if patch_dir is not None else Path("patches")

    def dataset_path(self, generation: str) -> Path:
        """Path of ``generation``'s dataset file."""
        return self._resolve(Path(generation) / DATASET_FILENAME)

    def meta_path(self, generation: str) -> Path:
        """Path of the sidecar metadata for ``generation``'s dataset."""
        full = self.dataset_path(generation)
        return full.with_suffix(full.suffix + ".meta.json")

    def patch_path(self, generation: str) -> Path:
        """Path of ``generation``'s (optional) patch overlay."""
        return self.patches / f"{generation}{PATCH_SUFFIX}"

    def write_dataset(
        self,
        generation: str,
        records: Sequence[SpeciesRecord],
        source: str = "pokeapi.co",
        **params: Any,
    ) -> Path:
        """Write a generation's dataset plus its sidecar metadata.

        Args:
            generation: Generation tag (e.g. ``"gen9"``).
            records: Records to write, already sorted.
            source: Data source identifier.
            **params: Extra metadata fields.

        Returns:
            Path of the written dataset file.
        """
        full = self.dataset_path(generation)
        full.parent.mkdir(parents=True, exist_ok=True)

        with full.open("w", encoding="utf-8") as f:
            json.dump([r.to_json() for r in records], f, ensure_ascii=False, indent=2)

        meta: dict[str, Any] = {
            "source": source,
            "generated_at": datetime.now(UTC).isoformat(),
            "generation": generation,
            "count": len(records),
        }
        if params:
            meta.update(params)
        with self.meta_path(generation).open("w", encoding="utf-8") as f:
            json.dump({"meta": meta}, f, indent=2)

        return full

    def read_dataset(self, generation: str) -> list[dict[str, Any]] | None:
        """Read a written dataset back, or None if it doesn't exist."""
        full = self.dataset_path(generation)
        if not full.exists():
            return None
        with full.open(encoding="utf-8") as f:
            result: list[dict[str, Any]] = json.load(f)
        return result

    def read_meta(self, generation: str) -> dict[str, Any]:
        """Sidecar metadata for a dataset, or ``{}`` if none was written."""
        sidecar = self.meta_path(generation)
        if not sidecar.exists():
            return {}
        with sidecar.open(encoding="utf-8") as f:
            result: dict[str, Any] = json.load(f)
        return result.get("meta", {})

    def _resolve(self, path: Path) -> Path:
        full = self.base / path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes output directory: {path}"
            raise ValueError(msg) from None
        return full
