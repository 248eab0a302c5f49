"""
Shared HTTP client for PokeAPI lookups.

Provides a pre-configured ``requests.Session`` with a pooled adapter, the
builder's ``User-Agent`` and a default timeout on every request.

The adapter performs no transport-level retries: the batch fetcher owns the
retry policy (one retry per species id, after a backoff), and abilities are
never retried.

Usage::

    from dexbuild.services.http import session

    resp = session.get("https://pokeapi.co/api/v2/pokemon/1")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from dexbuild.config import get_settings

#: No transport retries; failures surface to the caller immediately.
DEFAULT_RETRY = Retry(
    total=0,
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_USER_AGENT = "pokemon-calc-builder"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
        user_agent: ``User-Agent`` header sent upstream.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = user_agent

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, shared by every client.
session: requests.Session = create_session(
    timeout=get_settings().http_timeout,
    user_agent=get_settings().user_agent,
)
