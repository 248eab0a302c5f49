"""Species record building: two required lookups plus per-ability lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from dexbuild.config import Settings, get_settings
from dexbuild.datasources.pokeapi import client
from dexbuild.datasources.pokeapi.abilities import localize_abilities
from dexbuild.datasources.pokeapi.models import RawPokemon, RawSpecies
from dexbuild.exceptions import FetchError
from dexbuild.localize import localize_name, localize_type, slugify, to_title
from dexbuild.schemas import BaseStats, SpeciesRecord

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dexbuild.datasources.pokeapi.models import PokemonStat, PokemonType

# PokeAPI stat name -> on-disk stat key
STAT_KEYS: dict[str, str] = {
    "hp": "hp",
    "attack": "atk",
    "defense": "def",
    "special-attack": "spa",
    "special-defense": "spd",
    "speed": "spe",
}


# =============================================================================
# Normalization helpers
# =============================================================================


def stat_block(stats: Sequence[PokemonStat]) -> BaseStats:
    """Collect the six base stats; any stat not reported is 0."""
    values: dict[str, int] = {}
    for entry in stats:
        key = STAT_KEYS.get(entry.stat.name)
        if key is not None and key not in values:
            values[key] = entry.base_stat
    return BaseStats.model_validate(values)


def ordered_types(types: Sequence[PokemonType]) -> list[str]:
    """Localized type labels, primary slot first."""
    return [localize_type(t.type.name) for t in sorted(types, key=lambda t: t.slot)]


# =============================================================================
# Record builder
# =============================================================================


def build_record(species_id: int, settings: Settings | None = None) -> SpeciesRecord:
    """
    Fetch and normalize one species.

    ``dexNo`` comes from the species resource, not from ``species_id``; the
    two coincide for the national dex but the species resource is
    authoritative. Ability lookups that fail fall back to English names.

    Args:
        species_id: PokeAPI id to fetch (1-based).
        settings: Build settings (defaults to ``get_settings()``).

    Returns:
        The normalized SpeciesRecord.

    Raises:
        FetchError: If either required lookup fails or is malformed, or the
            assembled record is invalid (e.g. no types).
    """
    settings = settings or get_settings()
    base_url = settings.api_base_url

    pokemon_url = client.pokemon_url(species_id, base_url)
    pokemon = client.fetch_model(pokemon_url, RawPokemon)
    species = client.fetch_model(client.species_url(species_id, base_url), RawSpecies)

    en_name = to_title(pokemon.name)
    abilities = localize_abilities(
        pokemon.abilities,
        settings.ability_languages,
        delay_seconds=settings.ability_delay_seconds,
    )

    try:
        return SpeciesRecord(
            id=slugify(en_name),
            dex_no=species.id,
            ko_name=localize_name(species.names, settings.ko_name_languages, en_name),
            en_name=en_name,
            jp_name=localize_name(species.names, settings.jp_name_languages, en_name),
            types=ordered_types(pokemon.types),
            base_stats=stat_block(pokemon.stats),
            abilities=abilities,
        )
    except ValidationError as exc:
        msg = f"invalid species record ({exc.error_count()} errors)"
        raise FetchError(pokemon_url, msg) from exc
