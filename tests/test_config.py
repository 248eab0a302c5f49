"""Tests for application settings."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from dexbuild.config import Settings, get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestDefaults:
    """Defaults reproduce the standard national-dex build."""

    def test_range_and_generations(self) -> None:
        settings = Settings()
        assert settings.max_id == 1025
        assert settings.generations == ["gen6", "gen7", "gen8", "gen9"]

    def test_languages(self) -> None:
        settings = Settings()
        assert settings.ko_name_languages[0] == "ko"
        assert settings.jp_name_languages == ["ja-Hrkt", "ja"]
        assert settings.ability_languages == ["ko"]

    def test_paths(self) -> None:
        settings = Settings()
        assert settings.output_dir == Path("src/data")
        assert settings.patch_dir == Path("patches")

    def test_pacing(self) -> None:
        settings = Settings()
        assert settings.retry_attempts == 1
        assert settings.pacing_seconds == 0.08
        assert settings.backoff_seconds == 0.5
        assert settings.ability_delay_seconds == 0.04


class TestEnvironment:
    """Settings are overridable with DEXBUILD_* variables."""

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, fresh_settings: None) -> None:
        monkeypatch.setenv("DEXBUILD_MAX_ID", "151")
        monkeypatch.setenv("DEXBUILD_OUTPUT_DIR", "/tmp/out")
        settings = get_settings()
        assert settings.max_id == 151
        assert settings.output_dir == Path("/tmp/out")

    def test_list_from_json(self, monkeypatch: pytest.MonkeyPatch, fresh_settings: None) -> None:
        monkeypatch.setenv("DEXBUILD_GENERATIONS", '["gen9"]')
        assert get_settings().generations == ["gen9"]

    def test_cached(self, fresh_settings: None) -> None:
        assert get_settings() is get_settings()

    def test_invalid_max_id(self) -> None:
        with pytest.raises(ValidationError):
            Settings(max_id=0)
