"""Tests for infrastructure settings."""

from pathlib import Path

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import ShopSettings


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    for name in (
        "SHOP_BACKEND",
        "SHOP_DATA_FILE",
        "SHOP_CURRENCY",
        "LOW_STOCK_THRESHOLD",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults() -> None:
    """Defaults apply when nothing is configured."""
    settings = ShopSettings.from_env()

    assert settings.backend == "json"
    assert settings.data_file is None
    assert settings.currency_code == "USD"
    assert settings.low_stock_threshold == 10


def test_from_env_uses_file_path(monkeypatch, tmp_path: Path) -> None:
    """File paths should resolve to Path instances."""
    data_file = tmp_path / "shop.json"
    data_file.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("SHOP_DATA_FILE", str(data_file))
    monkeypatch.setenv("SHOP_BACKEND", " SQL ")
    monkeypatch.setenv("SHOP_CURRENCY", "eur")

    settings = ShopSettings.from_env()

    assert isinstance(settings.data_file, Path)
    assert settings.data_file == data_file.resolve()
    assert settings.backend == "sql"
    assert settings.currency_code == "EUR"


def test_from_env_picks_single_file_in_data_dir(tmp_path: Path) -> None:
    """A single JSON file under data/ becomes the default."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "seed.json").write_text("{}", encoding="utf-8")

    settings = ShopSettings.from_env()

    assert settings.data_file == (data_dir / "seed.json").resolve()


def test_from_env_ignores_ambiguous_data_dir(tmp_path: Path) -> None:
    """Several JSON files under data/ leave the default unset."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "a.json").write_text("{}", encoding="utf-8")
    (data_dir / "b.json").write_text("{}", encoding="utf-8")

    settings = ShopSettings.from_env()

    assert settings.data_file is None


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_invalid_threshold_falls_back(monkeypatch, raw: str) -> None:
    """Invalid thresholds fall back to the default."""
    monkeypatch.setenv("LOW_STOCK_THRESHOLD", raw)

    settings = ShopSettings.from_env()

    assert settings.low_stock_threshold == 10


def test_unknown_backend_falls_back_to_json(monkeypatch) -> None:
    """Unknown backends fall back to the JSON provider."""
    monkeypatch.setenv("SHOP_BACKEND", "mongo")
    monkeypatch.setenv("LOW_STOCK_THRESHOLD", "7")

    settings = ShopSettings.from_env()

    assert settings.backend == "json"
    assert settings.low_stock_threshold == 7
