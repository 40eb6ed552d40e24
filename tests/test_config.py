import pydantic
import pytest

from blend_estimates.config import (
    OracleSettings,
    Settings,
    load_config_from_file,
    save_config_to_file,
)


def test_default_settings() -> None:
    settings = Settings()
    assert settings.log_level == "INFO"
    assert settings.oracle.max_price_age == 900


def test_load_config_from_file(tmp_path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text('log_level = "DEBUG"\n\n[oracle]\nmax_price_age = 60\n')

    settings = load_config_from_file(config_path)
    assert settings.log_level == "DEBUG"
    assert settings.oracle.max_price_age == 60


def test_save_and_reload_config(tmp_path) -> None:
    config_path = tmp_path / "nested" / "config.toml"
    settings = Settings(log_level="WARNING", oracle=OracleSettings(max_price_age=300))

    save_config_to_file(settings, config_path)

    assert config_path.exists()
    assert load_config_from_file(config_path) == settings


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLEND_ESTIMATES_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("BLEND_ESTIMATES_ORACLE__MAX_PRICE_AGE", "120")

    settings = Settings()
    assert settings.log_level == "ERROR"
    assert settings.oracle.max_price_age == 120


def test_file_values_take_priority_over_environment(
    tmp_path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("BLEND_ESTIMATES_LOG_LEVEL", "ERROR")
    config_path = tmp_path / "config.toml"
    config_path.write_text('log_level = "DEBUG"\n')

    assert load_config_from_file(config_path).log_level == "DEBUG"


def test_invalid_settings() -> None:
    with pytest.raises(pydantic.ValidationError):
        Settings(log_level="LOUD")
    with pytest.raises(pydantic.ValidationError):
        OracleSettings(max_price_age=-1)
