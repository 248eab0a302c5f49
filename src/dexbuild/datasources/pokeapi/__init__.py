"""PokeAPI species data source.

Public API:
  - client: Low-level HTTP (URL builders, JSON fetch, payload validation)
  - models: Pydantic models for pokemon / pokemon-species / ability payloads
  - abilities: ability_name, localize_abilities
  - species: build_record, stat_block, ordered_types
"""

from dexbuild.datasources.pokeapi.abilities import ability_name, localize_abilities
from dexbuild.datasources.pokeapi.species import (
    STAT_KEYS,
    build_record,
    ordered_types,
    stat_block,
)

__all__ = [
    "STAT_KEYS",
    "ability_name",
    "build_record",
    "localize_abilities",
    "ordered_types",
    "stat_block",
]
