import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by ARTICAT_CONFIG_FILE env var."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get the value for a field from the YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML file."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        config_file = os.environ.get("ARTICAT_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class StoreConfig(BaseModel):
    """Article store configuration (nested in Config, uses env_nested_delimiter)."""

    first_id: int = Field(default=1, ge=1)  # First id handed out by the allocator


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from ARTICAT_LOG_FILE env var."""
        return os.environ.get("ARTICAT_LOG_FILE")


class Config(BaseSettings):
    store: StoreConfig = StoreConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = {
        "env_prefix": "ARTICAT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows ARTICAT_STORE__FIRST_ID override
        "extra": "ignore",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority (highest to lowest): init, env, .env, YAML file, secrets."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Call once from the embedding application before creating the container.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    handler: logging.Handler
    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
