import json
import os
import typing as tp
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from funcplay.core.types import NonNegativeDistance
from funcplay.logger.logger import logger

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_CONFIG_PATH = Path().home() / ".funcplay.json"


class Settings(BaseModel):
    """Runtime settings for the playground.

    Attributes:
        min_distance: Guard distance used by the targeting checks.
        log_level: Name of the logging level.
    """

    min_distance: NonNegativeDistance = Field(
        2.0, description="Minimum distance kept from own and friendly positions."
    )
    log_level: str = Field("INFO", description="Logging level name.")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got '{value}'")
        return value

    @classmethod
    def load(cls, path: Optional[tp.Union[str, Path]] = None) -> "Settings":
        """Load settings from a JSON file and the environment.

        The file is ``path`` if given, else ``$FUNCPLAY_CONFIG``, else
        ``~/.funcplay.json`` when present. ``FUNCPLAY_MIN_DISTANCE`` and
        ``LOG_LEVEL`` override the file.

        Raises:
            FileNotFoundError: If an explicitly requested file does not exist.
        """
        values: dict[str, tp.Any] = {}

        explicit = path if path is not None else os.getenv("FUNCPLAY_CONFIG")
        if explicit is not None:
            config_path = Path(explicit)
            if not config_path.exists():
                raise FileNotFoundError(f"Config file not found at {config_path}")
        elif DEFAULT_CONFIG_PATH.exists():
            config_path = DEFAULT_CONFIG_PATH
        else:
            config_path = None

        if config_path is not None:
            with open(config_path, "r") as f:
                values.update(json.load(f))
            logger.debug(f"Loaded settings from {config_path}")

        if "FUNCPLAY_MIN_DISTANCE" in os.environ:
            values["min_distance"] = os.environ["FUNCPLAY_MIN_DISTANCE"]
        if "LOG_LEVEL" in os.environ:
            values["log_level"] = os.environ["LOG_LEVEL"]

        return cls(**values)
