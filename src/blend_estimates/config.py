import tomllib
from pathlib import Path
from typing import Literal

import tomlkit
from pydantic import BaseModel, NonNegativeInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from blend_estimates.logging import logger

CONFIG_DIR = Path.home() / ".config" / "blend_estimates"
CONFIG_FILE = CONFIG_DIR / "config.toml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class OracleSettings(BaseModel):
    # Prices older than this many seconds are reported by `PoolOracle.stale_assets`
    max_price_age: NonNegativeInt = 900


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BLEND_ESTIMATES_",
        env_nested_delimiter="__",
    )

    log_level: LogLevel = "INFO"
    oracle: OracleSettings = OracleSettings()


def load_config_from_file(config_path: Path) -> Settings:
    # Values from the file take priority, environment variables fill the remaining fields
    return Settings(
        **tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(config: Settings, config_path: Path = CONFIG_FILE) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        tomlkit.dumps(
            config.model_dump(),
        ),
    )
    logger.info(f"Saved configuration to {config_path}.")


if CONFIG_FILE.exists():
    settings = load_config_from_file(CONFIG_FILE)
else:
    settings = Settings()
