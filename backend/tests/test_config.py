"""Tests for environment and YAML configuration loading."""

from pathlib import Path

from eventhub.config import Settings


def test_settings_loads_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("MONGODB_URI", "  mongodb://db.internal:27017  ")
    monkeypatch.setenv("MONGODB_DATABASE", "catalog")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DATABASE__SERVER_SELECTION_TIMEOUT_MS", "1500")

    settings = Settings(_env_file=None)

    assert settings.mongodb_uri == "mongodb://db.internal:27017"
    assert settings.mongodb_database == "catalog"
    assert settings.log_level == "DEBUG"
    assert settings.database.server_selection_timeout_ms == 1500


def test_missing_uri_does_not_fail_at_startup(monkeypatch) -> None:
    monkeypatch.delenv("MONGODB_URI", raising=False)

    settings = Settings(_env_file=None)

    assert settings.mongodb_uri == ""
    assert settings.database.events_collection == "events"
    assert settings.database.bookings_collection == "bookings"


def test_yaml_config_overrides_sections(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "database:\n"
        "  max_pool_size: 5\n"
        "api:\n"
        "  port: 9000\n"
        "  allowed_origins:\n"
        "    - https://events.example.com\n",
        encoding="utf-8",
    )

    settings = Settings(_env_file=None, config_path=config_path)
    settings.load_yaml_config()

    assert settings.database.max_pool_size == 5
    assert settings.database.server_selection_timeout_ms == 5000
    assert settings.api.port == 9000
    assert settings.api.allowed_origins == ["https://events.example.com"]


def test_missing_yaml_keeps_defaults(tmp_path: Path) -> None:
    settings = Settings(_env_file=None, config_path=tmp_path / "absent.yaml")
    settings.load_yaml_config()

    assert settings.api.port == 8000
