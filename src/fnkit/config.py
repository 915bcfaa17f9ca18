"""Configuration for the logging collaborator."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogConfig(BaseModel):
    """Where ``fn_log``/``fn_error`` lines go and at which levels.

    Level names are validated against the stdlib ``logging`` levels.
    """

    model_config = ConfigDict(frozen=True)

    logger_name: str = Field(default="fnkit", min_length=1)
    line_level: str = "INFO"
    error_level: str = "ERROR"

    @field_validator("line_level", "error_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown logging level: {value}")
        return name

    def level_number(self, name: str) -> int:
        """Numeric value of one of this config's level names."""
        return logging.getLevelName(name)
