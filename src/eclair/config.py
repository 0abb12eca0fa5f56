"""
View configuration.

Defaults mirror the viewer's built-in settings. A project can override
them in .eclair/config.yaml, and the environment can override the
viewport for headless runs.

Example .eclair/config.yaml:

    viewport:
      width: 1600
      height: 900
    fit_padding: 60
    hidden_types: [Custom]
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .core.errors import ConfigError
from .core.types import NodeType

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(".eclair/config.yaml")

# Environment variable -> config field
ENV_OVERRIDES: Dict[str, str] = {
    "ECLAIR_VIEWPORT_WIDTH": "viewport_width",
    "ECLAIR_VIEWPORT_HEIGHT": "viewport_height",
    "ECLAIR_FIT_PADDING": "fit_padding",
}


class ViewConfig(BaseModel):
    viewport_width: float = Field(default=1280.0, gt=0)
    viewport_height: float = Field(default=800.0, gt=0)
    fit_padding: float = Field(default=80.0, ge=0)

    # Layered layout spacing
    rank_sep: float = Field(default=120.0, gt=0)
    node_sep: float = Field(default=50.0, gt=0)
    margin: float = Field(default=40.0, ge=0)

    hidden_types: List[NodeType] = Field(default_factory=list)


def _flatten(data: Dict[str, Any]) -> Dict[str, Any]:
    """Accept the nested 'viewport' and 'layout' sections of the YAML file."""
    flat = {k: v for k, v in data.items() if k not in ("viewport", "layout")}
    viewport = data.get("viewport") or {}
    if "width" in viewport:
        flat["viewport_width"] = viewport["width"]
    if "height" in viewport:
        flat["viewport_height"] = viewport["height"]
    flat.update(data.get("layout") or {})
    return flat


def load_config(config_path: Optional[Path] = None, env: Optional[Dict[str, str]] = None) -> ViewConfig:
    """
    Load configuration from YAML, then apply environment overrides.

    A missing file yields the defaults. A malformed file or an invalid
    value raises ConfigError.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    env = os.environ if env is None else env

    data: Dict[str, Any] = {}
    if path.exists():
        try:
            with open(path, "r") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{path} must contain a mapping")
        data = _flatten(raw)
        logger.debug("Loaded view config from %s", path)

    for var, field_name in ENV_OVERRIDES.items():
        if var in env:
            data[field_name] = env[var]

    try:
        return ViewConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
