"""Backing object sources queried by type and name."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from kubehello.errors import MetadataAccessError
from kubehello.manifest_loader import expand_paths, flatten_document, load_documents
from kubehello.metadata import object_kind, object_name, object_namespace
from kubehello.resource_types import is_namespaced, matches_kind

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class ObjectStore(Protocol):
    """Lookup interface of a live object store.

    ``namespace=None`` asks for every namespace.
    """

    def get(
        self, resource_type: str, name: str, namespace: str | None
    ) -> list[dict[str, Any]]:
        """Return the objects of a type with a given name."""
        ...

    def list(self, resource_type: str, namespace: str | None) -> list[dict[str, Any]]:
        """Return every object of a type, in the store's enumeration order."""
        ...


class SnapshotObjectStore:
    """Serves objects from an in-memory snapshot of object documents."""

    def __init__(self, objects: Iterable[dict[str, Any]]) -> None:
        """Index the snapshot, keeping its order."""
        self.objects: list[dict[str, Any]] = []
        for obj in objects:
            try:
                object_kind(obj)
                object_name(obj)
            except MetadataAccessError:
                logger.warning("Skipping snapshot object without kind or name")
                continue
            self.objects.append(obj)

    @classmethod
    def from_files(cls, paths: list[str]) -> SnapshotObjectStore:
        """Load a snapshot from manifest files, flattening list documents."""
        objects: list[dict[str, Any]] = []
        for source in expand_paths(paths, recursive=True):
            for doc in load_documents(source):
                if doc.error is not None:
                    raise doc.error
                objects.extend(
                    o for o in flatten_document(doc.body) if isinstance(o, dict)
                )
        logger.debug("Loaded snapshot of %d objects", len(objects))
        return cls(objects)

    def _in_scope(self, obj: dict[str, Any], namespace: str | None) -> bool:
        if namespace is None or not is_namespaced(object_kind(obj)):
            return True
        return (object_namespace(obj) or "default") == namespace

    def list(self, resource_type: str, namespace: str | None) -> list[dict[str, Any]]:
        """Return every object of a type in snapshot order."""
        return [
            o
            for o in self.objects
            if matches_kind(resource_type, object_kind(o))
            and self._in_scope(o, namespace)
        ]

    def get(
        self, resource_type: str, name: str, namespace: str | None
    ) -> list[dict[str, Any]]:
        """Return the objects of a type with a given name."""
        matches = self.list(resource_type, namespace)
        return [o for o in matches if object_name(o) == name]
