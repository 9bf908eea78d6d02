"""
Runtime settings for fairnotes.

Settings come from four layers, later ones winning: the defaults on
`Settings`, an optional YAML config file, ``FAIRNOTES_*`` environment
variables (a ``.env`` file in the working directory is loaded first),
and finally explicit overrides from the command line.

Example config file::

    template: ~/vaults/templates/career_fair_2025
    id_strategy: unique
    guard_remerge: true
    skip_invalid: false
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml  # type: ignore
from dotenv import load_dotenv

from .errors import ArgumentError
from .fileclass.ids import ID_STRATEGIES

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = Path(__file__).resolve().parent / "templates" / "career_fair_2025"

ENV_OVERRIDES = {
    "FAIRNOTES_TEMPLATE": "template",
    "FAIRNOTES_ID_STRATEGY": "id_strategy",
}


@dataclass(frozen=True)
class Settings:
    template: Path = DEFAULT_TEMPLATE
    schema_path: str = "classes/company.md"
    companies_dir: str = "companies"
    id_strategy: str = "legacy"
    guard_remerge: bool = False
    escape_values: bool = True
    skip_invalid: bool = False


def _load_config_file(config_path: str | Path) -> Dict[str, Any]:
    path = Path(config_path).expanduser()
    if not path.exists():
        raise ArgumentError(f"configuration file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ArgumentError(f"failed to parse YAML configuration {path}: {exc}") from exc
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ArgumentError(f"configuration file {path} must contain a mapping")
    logger.info("Loaded configuration from %s", path)
    return config


BOOL_SETTINGS = ("guard_remerge", "escape_values", "skip_invalid")
STR_SETTINGS = ("schema_path", "companies_dir", "id_strategy")


def _coerce(settings: Settings) -> Settings:
    for name in BOOL_SETTINGS:
        value = getattr(settings, name)
        if not isinstance(value, bool):
            raise ArgumentError(f"{name} must be true or false, got {value!r}")
    for name in STR_SETTINGS:
        value = getattr(settings, name)
        if not isinstance(value, str) or not value:
            raise ArgumentError(f"{name} must be a non-empty string, got {value!r}")
    if not isinstance(settings.template, (str, Path)) or not str(settings.template):
        raise ArgumentError(f"template must be a path, got {settings.template!r}")
    template = Path(settings.template).expanduser()
    if settings.id_strategy not in ID_STRATEGIES:
        raise ArgumentError(
            f"id_strategy must be one of {', '.join(ID_STRATEGIES)}, got {settings.id_strategy!r}"
        )
    return replace(settings, template=template)


def load_settings(config_path: Optional[str | Path] = None, **overrides: Any) -> Settings:
    """Build `Settings` from config file, environment and overrides.

    Args:
        config_path: Optional YAML file whose keys match `Settings`.
        **overrides: Values from the command line; ``None`` means "not
            given" and leaves the lower layers in effect.

    Raises:
        ArgumentError: The config file is missing or malformed, or a
            value is invalid.
    """
    load_dotenv()
    known = {f.name for f in fields(Settings)}
    values: Dict[str, Any] = {}

    if config_path is not None:
        for key, value in _load_config_file(config_path).items():
            if key not in known:
                logger.warning("Ignoring unknown configuration key: %s", key)
                continue
            values[key] = value

    for env_name, key in ENV_OVERRIDES.items():
        env_value = os.getenv(env_name)
        if env_value:
            values[key] = env_value
            logger.debug("Environment override %s=%s", env_name, env_value)

    for key, value in overrides.items():
        if key not in known:
            raise ArgumentError(f"unknown setting: {key}")
        if value is not None:
            values[key] = value

    return _coerce(Settings(**values))
