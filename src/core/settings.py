"""
Runtime settings.

Defaults live here, environment variables (CHECKERS_*) override the defaults, and the command line overrides both
(see src/main.py).
"""

import os
from typing import Optional, Self

from pydantic import BaseModel, ValidationError, field_validator

from src.core.exceptions import InvalidRequestError

ENV_PREFIX = "CHECKERS_"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    num_pieces: int = 24
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise InvalidRequestError(
                f"Unknown log level {value!r}. Pick one from {', '.join(LOG_LEVELS)}."
            )
        return level

    @classmethod
    def from_env(cls) -> Self:
        """Only pass on the variables that are actually set, so the defaults above still apply."""
        overrides: dict[str, str] = {}
        for name in cls.model_fields:
            value = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if value is not None:
                overrides[name] = value
        try:
            return cls(**overrides)
        except ValidationError as err:
            first = err.errors()[0]
            variable = f"{ENV_PREFIX}{str(first['loc'][0]).upper()}"
            raise InvalidRequestError(f"{variable}: {first['msg']}") from err
