from __future__ import annotations

from pathlib import Path

import pytest

from cfgenerator.settings import get_settings


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch):
    for name in ("CFGENERATOR_INTERPRETER", "CFGENERATOR_INPUT", "CFGENERATOR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def configmap(tmp_path: Path) -> Path:
    """A flat volume directory shaped like a mounted ConfigMap."""
    volume = tmp_path / "configmap"
    volume.mkdir()
    (volume / "API_PORT").write_text("8080")
    (volume / "DATABASE_USERNAME").write_text("app")
    return volume
