"""Application configuration: settings schema and flatpages.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "flatpages.yaml"
ENV_PREFIX = "FLATPAGES_"


class Settings(BaseModel):
    app_name:           str  = "flatpages"
    pages_dir:          str  = Field(default="pages", description="Directory of flat .md pages")
    strict_frontmatter: bool = Field(default=False, description="Reject unknown frontmatter keys")
    log_level:          str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def _file_values(path: Path) -> dict[str, Any]:
    """Settings from the config file in the working directory; {} when absent."""
    if not path.is_file():
        return {}
    try:
        values = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if values is None:
        return {}
    if not isinstance(values, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(values).__name__}")
    return values


def _env_values() -> dict[str, str]:
    """Non-empty FLATPAGES_<FIELD> environment variables, keyed by field name."""
    env = {name: os.environ.get(ENV_PREFIX + name.upper()) for name in Settings.model_fields}
    return {name: val for name, val in env.items() if val}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Build Settings; later layers win: flatpages.yaml, env vars, non-None overrides.

    Raises ValueError (pydantic's ValidationError included) on bad input.
    """
    values = _file_values(Path(CONFIG_FILE))
    values.update(_env_values())
    values.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings.model_validate(values)
