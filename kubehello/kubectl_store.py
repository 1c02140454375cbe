"""Object store backed by the kubectl binary."""

from __future__ import annotations

import json
import logging
import subprocess
from typing import Any

from kubehello.errors import StoreError
from kubehello.manifest_loader import flatten_document

logger = logging.getLogger(__name__)

NOT_FOUND_MARKER = "Error from server (NotFound)"


class KubectlObjectStore:
    """Looks objects up with ``kubectl get -o json``."""

    def __init__(self, binary: str = "kubectl", kubeconfig: str | None = None) -> None:
        """Configure the binary and optional kubeconfig to pass through."""
        self.binary = binary
        self.kubeconfig = kubeconfig

    def _command(
        self, resource_type: str, name: str | None, namespace: str | None
    ) -> list[str]:
        cmd = [self.binary, "get", resource_type]
        if name:
            cmd.append(name)
        cmd.extend(["-o", "json"])
        if namespace is None:
            cmd.append("--all-namespaces")
        else:
            cmd.extend(["-n", namespace])
        if self.kubeconfig:
            cmd.extend(["--kubeconfig", self.kubeconfig])
        return cmd

    def _run(self, cmd: list[str]) -> dict[str, Any] | None:
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, check=True, capture_output=True, text=True)
        except FileNotFoundError as e:
            msg = f"unable to run {self.binary}: {e}"
            raise StoreError(msg) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            if NOT_FOUND_MARKER in stderr:
                return None
            msg = stderr or f"{' '.join(cmd)} exited with status {e.returncode}"
            raise StoreError(msg) from e
        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            msg = f"unexpected output from {self.binary}: {e}"
            raise StoreError(msg) from e
        if not isinstance(data, dict):
            msg = f"unexpected output from {self.binary}: not an object"
            raise StoreError(msg)
        return data

    def _objects(self, cmd: list[str]) -> list[dict[str, Any]]:
        data = self._run(cmd)
        if data is None:
            return []
        return [o for o in flatten_document(data) if isinstance(o, dict)]

    def get(
        self, resource_type: str, name: str, namespace: str | None
    ) -> list[dict[str, Any]]:
        """Return the named object, or nothing when it does not exist."""
        if namespace is None:
            # kubectl refuses to fetch by name across all namespaces
            return [
                o
                for o in self.list(resource_type, None)
                if (o.get("metadata") or {}).get("name") == name
            ]
        return self._objects(self._command(resource_type, name, namespace))

    def list(self, resource_type: str, namespace: str | None) -> list[dict[str, Any]]:
        """Return every object of a type in the order kubectl reports them."""
        return self._objects(self._command(resource_type, None, namespace))
