"""
Prefect flow for building the per-generation species datasets.

Fetches the base dataset once, then for every generation applies that
generation's patch overlay (if any) and writes ``{gen}/species.json``.

Run locally:
    python -m dexbuild.flows.build
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from dexbuild.config import get_settings
from dexbuild.flows.fetch import fetch_all
from dexbuild.reconcile import load_overlay, reconcile
from dexbuild.store import DatasetStore

if TYPE_CHECKING:
    from pathlib import Path

    from dexbuild.schemas import SpeciesRecord

_settings = get_settings()
store = DatasetStore(_settings.output_dir, _settings.patch_dir)


@task(name="build-generation", cache_policy=NO_CACHE)
def build_generation(generation: str, base: list[SpeciesRecord]) -> Path:
    """Patch the base dataset for one generation and write it."""
    overlay = load_overlay(store.patch_path(generation))
    records = reconcile(base, overlay)
    path = store.write_dataset(generation, records, patches=len(overlay))
    print(f"Wrote {len(records)} entries ({len(overlay)} patches) -> {path}")
    return path


@flow(name="build-datasets", log_prints=True)
def build_all(max_id: int | None = None, generations: list[str] | None = None) -> dict[str, int]:
    """
    Fetch the base dataset and write one dataset per generation.

    Per-species fetch failures shrink the dataset; a write failure aborts
    the flow.

    Returns:
        Generation tag -> number of records written.
    """
    if generations is None:
        generations = get_settings().generations
    base = fetch_all(max_id)

    counts: dict[str, int] = {}
    for generation in generations:
        build_generation(generation, base)
        counts[generation] = len(base)

    print(f"✅ Wrote species.json for {', '.join(generations)} ({len(base)} species each)")
    return counts


if __name__ == "__main__":
    result = build_all()
    print(f"Build complete: {result}")
