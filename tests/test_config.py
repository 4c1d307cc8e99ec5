from __future__ import annotations

import pytest

from pycropsanywhere.config import ResolverConfig


def test_defaults() -> None:
    config = ResolverConfig()
    assert config.thread_safe is False
    assert config.log_matches is False


def test_from_env_reads_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CROPSANYWHERE_THREAD_SAFE", "yes")
    monkeypatch.setenv("CROPSANYWHERE_LOG_MATCHES", " ON ")

    config = ResolverConfig.from_env()

    assert config.thread_safe is True
    assert config.log_matches is True


def test_from_env_unrecognized_value_keeps_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CROPSANYWHERE_THREAD_SAFE", "sometimes")
    monkeypatch.delenv("CROPSANYWHERE_LOG_MATCHES", raising=False)

    config = ResolverConfig.from_env()

    assert config.thread_safe is False
    assert config.log_matches is False


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CROPSANYWHERE_THREAD_SAFE", "1")

    config = ResolverConfig.from_env(thread_safe=False, log_matches=True)

    assert config.thread_safe is False
    assert config.log_matches is True


def test_config_is_frozen() -> None:
    config = ResolverConfig()
    with pytest.raises(AttributeError):
        config.thread_safe = True  # type: ignore[misc]
