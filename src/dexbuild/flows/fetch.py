"""
Prefect flow for fetching the base species dataset from PokeAPI.

Ids are fetched one at a time in ascending order. Each success is followed
by a short pacing pause; a failure is retried once after a longer backoff
and then skipped, leaving a gap in the dataset rather than failing the run.

Run locally:
    python -m dexbuild.flows.fetch

Run with Prefect dashboard:
    prefect server start &
    python -m dexbuild.flows.fetch
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from dexbuild.config import Settings, get_settings
from dexbuild.datasources.pokeapi import build_record
from dexbuild.exceptions import FetchError
from dexbuild.schemas import FetchStatus, SpeciesRecord

#: Builds one record for a species id, raising ``FetchError`` on failure.
RecordBuilder = Callable[[int], SpeciesRecord]


# =============================================================================
# Retry policy
# =============================================================================


@dataclass(frozen=True)
class FetchPolicy:
    """Pacing and retry knobs for the batch loop."""

    retry_attempts: int = 1
    pacing_seconds: float = 0.08
    backoff_seconds: float = 0.5
    progress_every: int = 50

    @classmethod
    def from_settings(cls, settings: Settings) -> FetchPolicy:
        return cls(
            retry_attempts=settings.retry_attempts,
            pacing_seconds=settings.pacing_seconds,
            backoff_seconds=settings.backoff_seconds,
            progress_every=settings.progress_every,
        )


@dataclass
class FetchOutcome:
    """Result of fetching one species id."""

    species_id: int
    status: FetchStatus
    attempts: int
    record: SpeciesRecord | None = None
    error: str | None = None


def _pause(seconds: float) -> None:
    if seconds > 0:
        time.sleep(seconds)


def fetch_one(species_id: int, build: RecordBuilder, policy: FetchPolicy) -> FetchOutcome:
    """
    Fetch one species id under the retry policy.

    Never raises for upstream failures: the outcome is ``SKIPPED`` once
    every attempt has failed.
    """
    last_error: FetchError | None = None
    total_attempts = policy.retry_attempts + 1

    for attempt in range(1, total_attempts + 1):
        try:
            record = build(species_id)
        except FetchError as exc:
            last_error = exc
            label = "Failed" if attempt == 1 else "Retry failed"
            print(f"{label} at #{species_id}: {exc}")
            if attempt < total_attempts:
                _pause(policy.backoff_seconds)
            continue

        _pause(policy.pacing_seconds)
        status = FetchStatus.FETCHED if attempt == 1 else FetchStatus.RECOVERED
        return FetchOutcome(species_id, status, attempts=attempt, record=record)

    return FetchOutcome(
        species_id,
        FetchStatus.SKIPPED,
        attempts=total_attempts,
        error=str(last_error) if last_error else None,
    )


def _unique_by_dex(records: list[SpeciesRecord]) -> list[SpeciesRecord]:
    """Sort by ``dexNo``, keeping the first record seen for each number."""
    by_dex: dict[int, SpeciesRecord] = {}
    for record in records:
        if record.dex_no in by_dex:
            print(f"WARNING: duplicate dexNo {record.dex_no} ({record.id}), keeping first")
            continue
        by_dex[record.dex_no] = record
    return sorted(by_dex.values(), key=lambda r: r.dex_no)


# =============================================================================
# Tasks and flow
# =============================================================================


@task(name="fetch-species-range", cache_policy=NO_CACHE)
def fetch_species_range(
    max_id: int,
    policy: FetchPolicy | None = None,
    build: RecordBuilder | None = None,
) -> list[SpeciesRecord]:
    """
    Fetch species ``1..max_id`` sequentially.

    Args:
        max_id: Highest id to fetch (inclusive).
        policy: Retry/pacing policy (defaults to settings).
        build: Record builder (defaults to ``build_record``).

    Returns:
        Successfully built records sorted by ``dexNo``; skipped ids are
        reported in the run log and absent from the result.
    """
    policy = policy or FetchPolicy.from_settings(get_settings())
    build = build or build_record

    records: list[SpeciesRecord] = []
    counts = {status: 0 for status in FetchStatus}
    skipped: list[int] = []

    for species_id in range(1, max_id + 1):
        outcome = fetch_one(species_id, build, policy)
        counts[outcome.status] += 1
        if outcome.record is not None:
            records.append(outcome.record)
        else:
            skipped.append(species_id)
        if species_id % policy.progress_every == 0:
            print(f"...processed #{species_id}")

    print(
        "Summary: "
        + ", ".join(f"{status.value}={count}" for status, count in counts.items())
        + (f" (skipped ids: {skipped})" if skipped else "")
    )
    return _unique_by_dex(records)


@flow(name="fetch-species", log_prints=True)
def fetch_all(max_id: int | None = None) -> list[SpeciesRecord]:
    """
    Fetch the base species dataset.

    This is the Prefect flow that drives the batch loop; per-id failures
    are logged and skipped, never raised.
    """
    settings = get_settings()
    if max_id is None:
        max_id = settings.max_id
    print(f"Fetching species 1..{max_id} from {settings.api_base_url}...")
    return fetch_species_range(max_id, FetchPolicy.from_settings(settings))


if __name__ == "__main__":
    result = fetch_all()
    print(f"Flow complete: {len(result)} species")
