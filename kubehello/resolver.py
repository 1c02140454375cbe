"""Execution of a resolution request into a lazy stream of resolved items."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from kubehello.errors import MetadataAccessError, ResolutionError, StoreError
from kubehello.input_mode import FilesInput
from kubehello.manifest_loader import (
    expand_paths,
    flatten_document,
    load_documents,
    load_kustomization,
)
from kubehello.metadata import creation_time, object_kind, object_name, object_namespace
from kubehello.resolved_item import ORIGIN_ARGS, ORIGIN_FILES, ResolvedItem
from kubehello.resource_types import is_namespaced
from kubehello.type_name_args import TypeNameRef, parse_type_name_args
from kubehello.visitor import visit

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from kubehello.manifest_loader import ManifestDocument
    from kubehello.object_store import ObjectStore
    from kubehello.resolution_request import ResolutionRequest
    from kubehello.resolved_item import VisitSummary

logger = logging.getLogger(__name__)


def _placeholder(source: str, origin: str, error: Exception) -> ResolvedItem:
    return ResolvedItem(
        kind="", name="", namespace="", origin=origin, source=source, source_error=error
    )


class Resolver:
    """Turns a ResolutionRequest into resolved items and visits them."""

    def __init__(self, store: ObjectStore, kustomize_binary: str = "kustomize") -> None:
        """Bind the backing store used for type/name lookups."""
        self.store = store
        self.kustomize_binary = kustomize_binary

    def resolve(self, request: ResolutionRequest) -> Iterator[ResolvedItem]:
        """Return the request's items as a lazy, ordered sequence.

        Malformed argument lists are rejected here, before anything is read.
        """
        if isinstance(request.input_mode, FilesInput):
            return self._resolve_files(request.input_mode, request)
        refs = parse_type_name_args(request.type_name_tokens)
        return self._resolve_args(refs, request)

    def visit(
        self,
        request: ResolutionRequest,
        fn: Callable[[ResolvedItem], None],
    ) -> VisitSummary:
        """Resolve the request and apply ``fn`` to each item in order."""
        return visit(
            self.resolve(request), fn, continue_on_error=request.continue_on_error
        )

    # -----------------------------
    # File input
    # -----------------------------

    def _resolve_files(
        self, mode: FilesInput, request: ResolutionRequest
    ) -> Iterator[ResolvedItem]:
        for source in expand_paths(mode.paths, recursive=mode.recursive):
            for doc in load_documents(source):
                yield from self._items_from_document(doc, request)
        if mode.kustomize:
            for doc in load_kustomization(mode.kustomize, self.kustomize_binary):
                yield from self._items_from_document(doc, request)

    def _items_from_document(
        self, doc: ManifestDocument, request: ResolutionRequest
    ) -> Iterator[ResolvedItem]:
        if doc.error is not None:
            yield _placeholder(doc.source, ORIGIN_FILES, doc.error)
            return
        members = flatten_document(doc.body) if request.flatten else [doc.body]
        for member in members:
            yield self._file_item(member, doc.source, request)

    def _file_item(
        self, obj: Any, source: str, request: ResolutionRequest
    ) -> ResolvedItem:
        try:
            kind = object_kind(obj)
            name = object_name(obj)
            namespace = object_namespace(obj)
        except MetadataAccessError as e:
            e.source = source
            return _placeholder(source, ORIGIN_FILES, e)
        try:
            created = creation_time(obj)
        except MetadataAccessError:
            # file greetings never show the timestamp
            logger.debug("Ignoring invalid creationTimestamp in %s", source)
            created = None

        if is_namespaced(kind):
            if not namespace:
                namespace = request.namespace
            elif request.enforce_namespace and namespace != request.namespace:
                err = ResolutionError(
                    f'the namespace from the provided object "{namespace}" does '
                    f'not match the namespace "{request.namespace}". You must pass '
                    f"'--namespace={namespace}' to perform this operation.",
                    source=source,
                )
                return _placeholder(source, ORIGIN_FILES, err)

        return ResolvedItem(
            kind=kind,
            name=name,
            namespace=namespace,
            origin=ORIGIN_FILES,
            source=source,
            creation_time=created,
            raw=obj,
        )

    # -----------------------------
    # Type/name input
    # -----------------------------

    def _resolve_args(
        self, refs: list[TypeNameRef], request: ResolutionRequest
    ) -> Iterator[ResolvedItem]:
        namespace = None if request.all_namespaces else request.namespace
        for ref in refs:
            if ref.error is not None:
                yield _placeholder(ref.token, ORIGIN_ARGS, ref.error)
                continue
            try:
                if ref.name is None:
                    objects = self.store.list(ref.resource_type, namespace)
                else:
                    objects = self.store.get(ref.resource_type, ref.name, namespace)
            except StoreError as e:
                err = ResolutionError(str(e), source=ref.token)
                yield _placeholder(ref.token, ORIGIN_ARGS, err)
                continue

            logger.debug("%s matched %d objects", ref.token, len(objects))
            if not objects:
                yield _placeholder(
                    ref.token, ORIGIN_ARGS, self._not_found(ref, namespace)
                )
                continue
            for obj in objects:
                members = flatten_document(obj) if request.flatten else [obj]
                for member in members:
                    yield self._store_item(member, ref.token)

    @staticmethod
    def _not_found(ref: TypeNameRef, namespace: str | None) -> ResolutionError:
        if ref.name is not None:
            msg = f'{ref.resource_type} "{ref.name}" not found'
        elif namespace is None:
            msg = f"no {ref.resource_type} resources found in any namespace"
        else:
            msg = f"no {ref.resource_type} resources found in {namespace} namespace"
        return ResolutionError(msg, source=ref.token)

    @staticmethod
    def _store_item(obj: Any, token: str) -> ResolvedItem:
        try:
            return ResolvedItem(
                kind=object_kind(obj),
                name=object_name(obj),
                namespace=object_namespace(obj),
                origin=ORIGIN_ARGS,
                source=token,
                creation_time=creation_time(obj),
                raw=obj,
            )
        except MetadataAccessError as e:
            e.source = token
            return _placeholder(token, ORIGIN_ARGS, e)
