"""Schedule configuration for the command line.

A config.yaml under the cronexpr home holds parser switches and named
schedules. String values may reference ``${NAME}``; NAME is looked up in the
process environment after the optional .env beside it has been applied.
Library callers skip all of this and pass a ParserConfig directly.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_HOME = Path.home() / ".cronexpr"

_ENV_VAR_RE = re.compile(r"\$\{(\w+)\}")


def _env_lookup(match: re.Match) -> str:
    name = match.group(1)
    if name in os.environ:
        return os.environ[name]
    logger.warning("Environment variable %s not set", name)
    return match.group(0)


def _substitute_env(value: Any) -> Any:
    """Expand ${NAME} in every string nested inside value."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(_env_lookup, value)
    if isinstance(value, dict):
        return {key: _substitute_env(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_substitute_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# Config models (Pydantic)
# ---------------------------------------------------------------------------

class ParserConfig(BaseModel):
    """Switches for the parser's strictness.

    The defaults reject anything ambiguous: more than six fields, descending
    ranges. Calendar domains are not checked unless asked for.
    """

    model_config = ConfigDict(frozen=True)

    ignore_extra_fields: bool = False
    allow_descending_ranges: bool = False
    validate_domains: bool = False


class LoggingConfig(BaseModel):
    level: str = "WARNING"


class AppConfig(BaseModel):
    """Top-level configuration for the command line."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    # name -> cron text
    schedules: dict[str, str] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def get_home_dir() -> Path:
    """Directory holding config.yaml and .env, overridable via CRONEXPR_HOME."""
    return Path(os.environ.get("CRONEXPR_HOME", str(DEFAULT_HOME))).expanduser()


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        logger.warning("No config file at %s, using defaults", path)
        return {}
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    logger.info("Loaded config from %s", path)
    return data


def load_config(
    config_path: str | Path | None = None,
    env_path: str | Path | None = None,
) -> AppConfig:
    """Build an AppConfig from config.yaml, expanding ${NAME} references.

    Both paths default to files in the cronexpr home. A missing .env is
    skipped silently; a missing config.yaml yields the defaults.
    """
    home = get_home_dir()
    env_file = Path(env_path) if env_path is not None else home / ".env"
    config_file = Path(config_path) if config_path is not None else home / "config.yaml"

    if env_file.exists():
        load_dotenv(env_file)
        logger.info("Loaded environment from %s", env_file)

    return AppConfig(**_substitute_env(_read_yaml(config_file)))
