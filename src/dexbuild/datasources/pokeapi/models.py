"""Pydantic models for the PokeAPI payloads we read.

Only the fields the record builder uses are declared; everything else in
the payload is ignored. A payload that fails validation is treated as
malformed by the client.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class NamedResource(BaseModel):
    """A ``{"name", "url"}`` reference to another resource."""

    name: str
    url: str | None = None


class OptionalResource(BaseModel):
    """A resource reference whose name or url may be absent."""

    name: str | None = None
    url: str | None = None


class LocalizedName(BaseModel):
    """One language variant of a name."""

    name: str
    language: NamedResource


class PokemonType(BaseModel):
    slot: int
    type: NamedResource


class PokemonStat(BaseModel):
    base_stat: int
    stat: NamedResource


class AbilityRef(BaseModel):
    ability: OptionalResource = Field(default_factory=OptionalResource)
    is_hidden: bool = False
    slot: int | None = None


class RawPokemon(BaseModel):
    """``/pokemon/{id}``: battle data (types, stats, ability references)."""

    id: int | None = None
    name: str
    types: list[PokemonType] = Field(default_factory=list)
    stats: list[PokemonStat] = Field(default_factory=list)
    abilities: list[AbilityRef] = Field(default_factory=list)


class RawSpecies(BaseModel):
    """``/pokemon-species/{id}``: national dex number and localized names."""

    id: int
    name: str | None = None
    names: list[LocalizedName] = Field(default_factory=list)


class RawAbility(BaseModel):
    """``/ability/{id}``: localized ability names."""

    id: int | None = None
    name: str | None = None
    names: list[LocalizedName] = Field(default_factory=list)
