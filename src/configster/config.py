"""Settings management for the configster command line."""

import logging
import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from configster.errors import SettingsError

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Defaults applied when a command-line option is not given."""

    delimiter: str = ","
    output_format: Literal["rich", "plain", "json"] = "rich"
    encoding: str = "utf-8"
    strict: bool = False

    @field_validator("delimiter")
    @classmethod
    def _single_char(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("delimiter must be a single character")
        return v


class SettingsManager:
    """Loads user settings from settings.yaml in the config directory."""

    def __init__(self, config_dir: Path | None = None) -> None:
        if config_dir is None:
            # Check for environment variable override
            env_config = os.getenv("CONFIGSTER_CONFIG")
            if env_config:
                config_dir = Path(env_config).expanduser().resolve()
            else:
                # Default to ~/.configster
                config_dir = Path.home() / ".configster"

        self.config_dir = config_dir
        self.settings_file = config_dir / "settings.yaml"

    def load(self) -> Settings:
        """Load settings, falling back to defaults when no file exists.

        Raises:
            SettingsError: The file is not valid YAML or holds invalid values.
        """
        if not self.settings_file.is_file():
            return Settings()

        logger.debug("Loading settings from %s", self.settings_file)
        try:
            with open(self.settings_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise SettingsError(f"Cannot read {self.settings_file}: {e}") from e

        if not isinstance(data, dict):
            raise SettingsError(f"{self.settings_file}: expected a mapping at the top level")

        try:
            return Settings(**data)
        except ValidationError as e:
            raise SettingsError(f"{self.settings_file}: {e}") from e
