"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from kubehello.deep_merge import deep_merge
from kubehello.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "output": "yaml",
    "default_namespace": "default",
    "image_paths": [
        "spec.containers",
        "spec.initContainers",
        "spec.template.spec.containers",
        "spec.jobTemplate.spec.template.spec.containers",
    ],
    "kubectl": {"binary": "kubectl"},
    "kustomize": {"binary": "kustomize"},
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                msg = f"invalid config file {path}: {e}"
                raise ConfigError(msg) from e
            if not isinstance(user_config, dict):
                msg = f"config file {path} must contain a mapping"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
        else:
            logger.debug("Config file %s not found, using defaults", path)
    return config
