"""Name localization and normalization helpers.

Pure functions, no I/O. Every function here is total: unknown input
degrades to a formatted fallback instead of raising.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from dexbuild.datasources.pokeapi.models import LocalizedName

# PokeAPI type identifier -> Korean label.
TYPE_LABELS_KO: dict[str, str] = {
    "normal": "노말",
    "fire": "불꽃",
    "water": "물",
    "electric": "전기",
    "grass": "풀",
    "ice": "얼음",
    "fighting": "격투",
    "poison": "독",
    "ground": "땅",
    "flying": "비행",
    "psychic": "에스퍼",
    "bug": "벌레",
    "rock": "바위",
    "ghost": "고스트",
    "dragon": "드래곤",
    "dark": "악",
    "steel": "강철",
    "fairy": "페어리",
}

_SEPARATOR_RE = re.compile(r"[-_]")
_WORD_START_RE = re.compile(r"\b\w")
_SLUG_RUN_RE = re.compile(r"[^a-z0-9]+")


def to_title(name: str) -> str:
    """Format a canonical identifier for display.

    ``"mr-mime"`` -> ``"Mr Mime"``, ``"tapu_koko"`` -> ``"Tapu Koko"``.
    """
    spaced = _SEPARATOR_RE.sub(" ", name)
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), spaced)


def slugify(name: str) -> str:
    """Derive a stable lowercase id from a canonical name.

    Runs of anything outside ``[a-z0-9]`` collapse to a single ``-`` and
    leading/trailing separators are trimmed: ``"Mr. Mime"`` -> ``"mr-mime"``.
    """
    return _SLUG_RUN_RE.sub("-", name.lower()).strip("-")


def pick_localized_name(names: Iterable[LocalizedName], languages: Sequence[str]) -> str | None:
    """Return the first name whose language matches, in preference order."""
    by_language: dict[str, str] = {}
    for variant in names:
        by_language.setdefault(variant.language.name, variant.name)
    for lang in languages:
        found = by_language.get(lang)
        if found:
            return found
    return None


def localize_name(
    names: Iterable[LocalizedName],
    languages: Sequence[str],
    fallback: str,
) -> str:
    """Localized name, or the title-cased ``fallback`` when no language matches."""
    return pick_localized_name(names, languages) or to_title(fallback)


def localize_type(identifier: str) -> str:
    """Korean label for a type; unknown types pass through unchanged."""
    return TYPE_LABELS_KO.get(identifier, identifier)
