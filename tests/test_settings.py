from pathlib import Path

from heroplan.settings import debug_enabled, load_settings


def test_debug_requires_explicit_one(monkeypatch) -> None:
    monkeypatch.setenv("HEROPLAN_DEBUG", "true")
    assert debug_enabled() is False
    monkeypatch.setenv("HEROPLAN_DEBUG", "1")
    assert debug_enabled() is True


def test_load_settings_from_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HEROPLAN_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("HEROPLAN_CATALOG_URL", "https://example.test/js/data")
    monkeypatch.delenv("HEROPLAN_DEBUG", raising=False)

    settings = load_settings()

    assert settings.data_dir == tmp_path
    assert settings.catalog_url == "https://example.test/js/data"
    assert settings.debug is False


def test_load_settings_blank_catalog_url_is_none(monkeypatch) -> None:
    monkeypatch.setenv("HEROPLAN_CATALOG_URL", "")
    assert load_settings().catalog_url is None
