"""Effective namespace and cross-namespace scoping for one invocation."""

from dataclasses import dataclass
from typing import Any

from kubehello.kubeconfig import current_namespace


@dataclass(frozen=True)
class NamespaceScope:
    """Namespace values consumed by the request builder."""

    namespace: str
    enforce_namespace: bool = False
    all_namespaces: bool = False


def resolve_namespace_scope(
    namespace: str | None,
    *,
    all_namespaces: bool = False,
    kubeconfig: dict[str, Any] | None = None,
    fallback: str = "default",
) -> NamespaceScope:
    """Resolve the namespace to scope lookups and defaults by.

    An explicit namespace is enforced: file documents naming another
    namespace are rejected. With ``all_namespaces`` the explicit namespace is
    still recorded but never enforced.
    """
    context_ns = current_namespace(kubeconfig or {})
    if all_namespaces:
        return NamespaceScope(
            namespace=namespace or context_ns or fallback,
            enforce_namespace=False,
            all_namespaces=True,
        )
    if namespace:
        return NamespaceScope(namespace=namespace, enforce_namespace=True)
    return NamespaceScope(namespace=context_ns or fallback)
