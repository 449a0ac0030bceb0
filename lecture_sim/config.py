"""
Configuration for simulation runs.
"""

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from .core.exceptions import ConfigurationError


class SimulationConfig(BaseModel):
    weeks: int = Field(4, ge=0, le=52)
    attend_probability: float = Field(0.5, ge=0.0, le=1.0)
    seed: Optional[int] = None
    log_level: str = Field("WARNING", pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')


def build_config(data: Optional[Dict[str, Any]] = None, **overrides) -> SimulationConfig:
    """Build a config from a plain dict, with keyword overrides taking precedence."""
    values = dict(data or {})
    values.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return SimulationConfig(**values)
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Invalid simulation configuration: {e}",
            error_code="INVALID_CONFIG",
            details={'errors': e.errors()}
        ) from e


def load_config(path: Optional[str] = None, **overrides) -> SimulationConfig:
    """Load configuration from a JSON file. Missing path means defaults."""
    data: Dict[str, Any] = {}
    if path:
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}", error_code="CONFIG_IO") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Config file {path} is not valid JSON: {e}", error_code="CONFIG_JSON") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a JSON object", error_code="CONFIG_JSON")
    return build_config(data, **overrides)
