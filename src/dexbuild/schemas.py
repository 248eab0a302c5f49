"""
Domain models for dexbuild.

Pydantic models for the normalized species records we emit and the patch
overlays applied on top of them. Upstream payload models live with their
data source (``datasources/pokeapi/models.py``).

Field names are snake_case in Python and camelCase on disk, matching the
``species.json`` format the calculator app reads.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# Fetch bookkeeping
# =============================================================================


class FetchStatus(StrEnum):
    """Outcome of fetching one species id."""

    FETCHED = "fetched"
    RECOVERED = "recovered"  # failed first, succeeded on retry
    SKIPPED = "skipped"


# =============================================================================
# Species records
# =============================================================================


class BaseStats(BaseModel):
    """The six base stats. Missing stats are 0."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    hp: int = 0
    atk: int = 0
    def_: int = Field(default=0, alias="def")
    spa: int = 0
    spd: int = 0
    spe: int = 0


class SpeciesRecord(BaseModel):
    """One normalized species, as written to ``species.json``.

    Records are immutable: the base dataset is shared by every generation's
    reconciliation. Extra keys (added by patch overlays) are kept and
    serialized after the standard fields.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    id: str = Field(..., description="Slug of the English name")
    dex_no: int = Field(..., alias="dexNo", ge=1)
    ko_name: str = Field(..., alias="koName")
    en_name: str = Field(..., alias="enName")
    jp_name: str = Field(..., alias="jpName")
    types: list[str] = Field(..., min_length=1, max_length=2)
    base_stats: BaseStats = Field(default_factory=BaseStats, alias="baseStats")
    abilities: list[str] = Field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        """Serialize with on-disk (camelCase) keys."""
        return self.model_dump(by_alias=True, mode="json")


# =============================================================================
# Patch overlays
# =============================================================================

# Keys (field names and aliases) that are typed and so cannot be null.
_STAT_KEYS = frozenset({"hp", "atk", "def", "def_", "spa", "spd", "spe"})
_RECORD_KEYS = frozenset(
    {
        "id",
        "koName",
        "ko_name",
        "enName",
        "en_name",
        "jpName",
        "jp_name",
        "types",
        "baseStats",
        "base_stats",
        "abilities",
    }
)


def _reject_nulls(data: Any, keys: frozenset[str]) -> Any:
    """Typed patch fields may be omitted but not set to null."""
    if isinstance(data, dict):
        nulls = sorted(k for k in keys if k in data and data[k] is None)
        if nulls:
            msg = f"null is not a valid value for {', '.join(nulls)}"
            raise ValueError(msg)
    return data


class BaseStatsPatch(BaseModel):
    """Partial stat block; only the named stats are overwritten."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    hp: int | None = None
    atk: int | None = None
    def_: int | None = Field(default=None, alias="def")
    spa: int | None = None
    spd: int | None = None
    spe: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _no_null_stats(cls, data: Any) -> Any:
        return _reject_nulls(data, _STAT_KEYS)


class SpeciesPatch(BaseModel):
    """Partial species record from a per-generation patch file.

    Every field present replaces the base value, except ``baseStats`` which
    is merged stat by stat. ``dexNo`` is the join key and cannot be patched.
    Standard fields cannot be null; extra keys are carried through as given,
    null included.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str | None = None
    ko_name: str | None = Field(default=None, alias="koName")
    en_name: str | None = Field(default=None, alias="enName")
    jp_name: str | None = Field(default=None, alias="jpName")
    types: list[str] | None = Field(default=None, min_length=1, max_length=2)
    base_stats: BaseStatsPatch | None = Field(default=None, alias="baseStats")
    abilities: list[str] | None = None

    @model_validator(mode="before")
    @classmethod
    def _check_keys(cls, data: Any) -> Any:
        if isinstance(data, dict) and ("dexNo" in data or "dex_no" in data):
            msg = "dexNo cannot be patched"
            raise ValueError(msg)
        return _reject_nulls(data, _RECORD_KEYS)

    def changes(self) -> dict[str, Any]:
        """Return only the fields this patch sets, with on-disk keys."""
        return self.model_dump(by_alias=True, exclude_unset=True)

