"""Ability name localization.

Each ability reference carries its own resource URL, fetched lazily. A
failed lookup never fails the species: the ability falls back to its
title-cased English identifier.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from dexbuild.datasources.pokeapi import client
from dexbuild.datasources.pokeapi.models import RawAbility
from dexbuild.exceptions import CapabilityLookupError, FetchError
from dexbuild.localize import localize_name, to_title

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dexbuild.datasources.pokeapi.models import AbilityRef


def fetch_ability(url: str) -> RawAbility:
    """Fetch one ability resource.

    Raises:
        CapabilityLookupError: If the lookup fails or is malformed.
    """
    try:
        return client.fetch_model(url, RawAbility)
    except FetchError as exc:
        raise CapabilityLookupError(exc.url, exc.message, status=exc.status) from exc


def ability_name(name: str, url: str, languages: Sequence[str]) -> str:
    """Localized ability name, or ``to_title(name)`` if the lookup fails."""
    try:
        ability = fetch_ability(url)
    except CapabilityLookupError:
        return to_title(name)
    return localize_name(ability.names, languages, name)


def localize_abilities(
    refs: Sequence[AbilityRef],
    languages: Sequence[str],
    *,
    delay_seconds: float = 0.0,
) -> list[str]:
    """Localize ability references in declaration order.

    References missing a name or url are skipped. Each lookup is followed by
    ``delay_seconds`` of pacing.
    """
    names: list[str] = []
    for ref in refs:
        name, url = ref.ability.name, ref.ability.url
        if not name or not url:
            continue
        names.append(ability_name(name, url, languages))
        if delay_seconds > 0:
            time.sleep(delay_seconds)
    return names
