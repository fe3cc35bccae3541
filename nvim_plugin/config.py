"""nvim-plugin configuration.

Typed settings for the wizard process. Uses a Pydantic v2 model so values
taken from the environment are validated at startup rather than halfway
through a generation run.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Config(BaseModel):
    """Process-wide settings.

    Created once by the CLI entry point and passed to whatever needs it.
    """

    output_dir: Path = Field(
        default=Path("."),
        description="Directory in which the <name>/ plugin folder is created",
    )
    log_level: str = Field(default="WARNING")
    log_file: Path | None = Field(
        default=None,
        description="Write logs here instead of stderr",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"invalid log level {value!r}; expected one of {', '.join(_LOG_LEVELS)}"
            )
        return level

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            NVIM_PLUGIN_OUTPUT_DIR, NVIM_PLUGIN_LOG_LEVEL, NVIM_PLUGIN_LOG_FILE.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("NVIM_PLUGIN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["NVIM_PLUGIN_OUTPUT_DIR"])
        if os.environ.get("NVIM_PLUGIN_LOG_LEVEL"):
            kwargs["log_level"] = os.environ["NVIM_PLUGIN_LOG_LEVEL"]
        if os.environ.get("NVIM_PLUGIN_LOG_FILE"):
            kwargs["log_file"] = Path(os.environ["NVIM_PLUGIN_LOG_FILE"])
        return cls(**kwargs)
