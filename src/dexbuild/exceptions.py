"""Exception types raised across the build pipeline."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003


class DexbuildError(Exception):
    """Base class for all dexbuild errors."""


class FetchError(DexbuildError):
    """A required upstream lookup failed or returned a malformed payload."""

    def __init__(self, url: str, message: str, status: int | None = None) -> None:
        self.url = url
        self.status = status
        self.message = message
        super().__init__(f"GET {url} -> {message}")


class CapabilityLookupError(FetchError):
    """An ability's localization lookup failed.

    Only raised inside the record builder, which always recovers from it.
    """


class PatchParseError(DexbuildError):
    """A patch overlay file could not be read or did not validate."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")
