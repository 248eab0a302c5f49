"""
PokeAPI client.

Low-level HTTP for the three endpoints the builder reads. Every failure
(transport error, non-2xx status, non-JSON body, payload that does not
match its model) is raised as ``FetchError`` so callers handle one type.

API docs: https://pokeapi.co/docs/v2
Fair use: no hard rate limit, but callers should pace requests.
"""

from __future__ import annotations

from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from dexbuild.exceptions import FetchError
from dexbuild.services.http import session

ModelT = TypeVar("ModelT", bound=BaseModel)


def pokemon_url(species_id: int, base_url: str) -> str:
    """URL of the battle-data resource for ``species_id``."""
    return f"{base_url.rstrip('/')}/pokemon/{species_id}"


def species_url(species_id: int, base_url: str) -> str:
    """URL of the species (localization) resource for ``species_id``."""
    return f"{base_url.rstrip('/')}/pokemon-species/{species_id}"


def _extract_status_code(exc: Exception) -> int | None:
    resp = getattr(exc, "response", None)
    return getattr(resp, "status_code", None)


def get_json(url: str) -> dict[str, Any]:
    """GET ``url`` and return the decoded JSON object.

    Raises:
        FetchError: On any transport, status, or decoding failure.
    """
    try:
        resp = session.get(url)
        resp.raise_for_status()
    except requests.HTTPError as exc:
        status = _extract_status_code(exc)
        raise FetchError(url, str(status or exc), status=status) from exc
    except requests.RequestException as exc:
        raise FetchError(url, str(exc)) from exc

    try:
        data = resp.json()
    except ValueError as exc:
        raise FetchError(url, f"invalid JSON: {exc}", status=resp.status_code) from exc
    if not isinstance(data, dict):
        raise FetchError(url, "expected a JSON object", status=resp.status_code)
    return data


def fetch_model(url: str, model: type[ModelT]) -> ModelT:
    """GET ``url`` and validate the body against ``model``.

    Raises:
        FetchError: If the request fails or the payload is malformed.
    """
    payload = get_json(url)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        msg = f"malformed {model.__name__} payload ({exc.error_count()} errors)"
        raise FetchError(url, msg) from exc
