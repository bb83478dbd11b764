"""Tests for configuration models and YAML loading."""

from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import ValidationError

from resume_fit.core.config import (
    AnalysisConfig,
    CacheConfig,
    FetchConfig,
    ProviderConfig,
    Settings,
)


class TestCacheConfig:
    def test_defaults(self) -> None:
        c = CacheConfig()
        assert c.ttl_seconds == 3600
        assert c.key_prefix == "analysis:"
        assert c.redis_url is None
        assert c.fingerprint_chars == 500

    def test_ttl_positive(self) -> None:
        with pytest.raises(ValidationError):
            CacheConfig(ttl_seconds=0)


class TestProviderConfig:
    def test_defaults(self) -> None:
        p = ProviderConfig()
        assert p.primary == "openrouter"
        assert p.secondary == "gemini"
        assert p.timeout_seconds == 30.0

    def test_names_normalized(self) -> None:
        p = ProviderConfig(primary="  OpenAI ", secondary="")
        assert p.primary == "openai"
        assert p.secondary is None

    def test_disable_with_none(self) -> None:
        p = ProviderConfig(primary=None, secondary=None)
        assert p.primary is None
        assert p.secondary is None

    def test_timeout_positive(self) -> None:
        with pytest.raises(ValidationError):
            ProviderConfig(timeout_seconds=0)

    def test_unknown_provider_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Unknown LLM provider 'nope'"):
            ProviderConfig(primary="nope")

    def test_unknown_provider_in_yaml_fails_at_load(self, tmp_path: Path) -> None:
        cfg = tmp_path / "settings.yaml"
        cfg.write_text("providers:\n  secondary: geminii\n")
        with pytest.raises(ValidationError, match="geminii"):
            Settings.load(cfg)


class TestFetchAndAnalysisConfig:
    def test_defaults(self) -> None:
        assert FetchConfig().timeout_seconds == 10.0
        assert AnalysisConfig().prompt_text_chars == 2000


class TestSettingsFromYaml:
    def test_load_full(self, tmp_path: Path) -> None:
        cfg = tmp_path / "settings.yaml"
        cfg.write_text(dedent("""\
            cache:
              ttl_seconds: 60
              redis_url: "redis://localhost:6379/0"
            providers:
              primary: null
              secondary: gemini
              timeout_seconds: 5
            fetch:
              timeout_seconds: 3
        """))
        s = Settings.from_yaml(cfg)
        assert s.cache.ttl_seconds == 60
        assert s.cache.redis_url == "redis://localhost:6379/0"
        assert s.providers.primary is None
        assert s.providers.secondary == "gemini"
        assert s.providers.timeout_seconds == 5.0
        assert s.fetch.timeout_seconds == 3.0

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        cfg = tmp_path / "settings.yaml"
        cfg.write_text("")
        assert Settings.from_yaml(cfg) == Settings()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            Settings.from_yaml(tmp_path / "nope.yaml")

    def test_invalid_value(self, tmp_path: Path) -> None:
        cfg = tmp_path / "settings.yaml"
        cfg.write_text("cache:\n  ttl_seconds: -5\n")
        with pytest.raises(ValidationError):
            Settings.from_yaml(cfg)


class TestSettingsLoad:
    def test_explicit_path_must_exist(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.load(tmp_path / "missing.yaml")

    def test_defaults_when_no_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("RESUME_FIT_CONFIG", raising=False)
        monkeypatch.delenv("REDIS_URL", raising=False)
        assert Settings.load() == Settings()

    def test_env_config_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        cfg = tmp_path / "custom.yaml"
        cfg.write_text("cache:\n  ttl_seconds: 42\n")
        monkeypatch.setenv("RESUME_FIT_CONFIG", str(cfg))
        monkeypatch.delenv("REDIS_URL", raising=False)
        assert Settings.load().cache.ttl_seconds == 42

    def test_redis_url_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("RESUME_FIT_CONFIG", raising=False)
        monkeypatch.setenv("REDIS_URL", "redis://cache:6379/1")
        assert Settings.load().cache.redis_url == "redis://cache:6379/1"

    def test_yaml_redis_url_wins_over_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        cfg = tmp_path / "settings.yaml"
        cfg.write_text('cache:\n  redis_url: "redis://yaml:6379/0"\n')
        monkeypatch.setenv("REDIS_URL", "redis://env:6379/0")
        assert Settings.load(cfg).cache.redis_url == "redis://yaml:6379/0"
