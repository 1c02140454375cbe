"""Reading the current-context namespace from a kubeconfig file."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from kubehello.errors import ConfigError

logger = logging.getLogger(__name__)


def kubeconfig_path(explicit: str | None = None) -> Path:
    """Locate the kubeconfig: explicit flag, then $KUBECONFIG, then ~/.kube."""
    if explicit:
        return Path(explicit)
    env = os.environ.get("KUBECONFIG", "")
    for entry in env.split(os.pathsep):
        if entry:
            return Path(entry)
    return Path.home() / ".kube" / "config"


def load_kubeconfig(path: Path) -> dict[str, Any]:
    """Parse a kubeconfig file. A missing file yields an empty config."""
    if not path.exists():
        logger.debug("No kubeconfig at %s", path)
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        msg = f"unable to read kubeconfig {path}: {e}"
        raise ConfigError(msg) from e
    return data if isinstance(data, dict) else {}


def current_namespace(kubeconfig: dict[str, Any]) -> str | None:
    """Return the namespace of the current context, if one is set."""
    current = kubeconfig.get("current-context")
    if not current:
        return None
    for entry in kubeconfig.get("contexts") or []:
        if isinstance(entry, dict) and entry.get("name") == current:
            context = entry.get("context") or {}
            ns = context.get("namespace")
            return str(ns) if ns else None
    return None
