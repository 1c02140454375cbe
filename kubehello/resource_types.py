"""Mapping of user-typed resource types onto object kinds."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceType:
    """A known resource type with its accepted spellings."""

    kind: str
    plural: str
    short_names: tuple[str, ...] = ()
    namespaced: bool = True


KNOWN_TYPES: tuple[ResourceType, ...] = (
    ResourceType("Pod", "pods", ("po",)),
    ResourceType("Service", "services", ("svc",)),
    ResourceType("ConfigMap", "configmaps", ("cm",)),
    ResourceType("Secret", "secrets"),
    ResourceType("ServiceAccount", "serviceaccounts", ("sa",)),
    ResourceType("PersistentVolumeClaim", "persistentvolumeclaims", ("pvc",)),
    ResourceType("Deployment", "deployments", ("deploy",)),
    ResourceType("ReplicaSet", "replicasets", ("rs",)),
    ResourceType("StatefulSet", "statefulsets", ("sts",)),
    ResourceType("DaemonSet", "daemonsets", ("ds",)),
    ResourceType("Job", "jobs"),
    ResourceType("CronJob", "cronjobs", ("cj",)),
    ResourceType("Ingress", "ingresses", ("ing",)),
    ResourceType("Namespace", "namespaces", ("ns",), namespaced=False),
    ResourceType("Node", "nodes", ("no",), namespaced=False),
    ResourceType("PersistentVolume", "persistentvolumes", ("pv",), namespaced=False),
)


def _strip_group(resource_type: str) -> str:
    # deployments.apps -> deployments
    return resource_type.split(".", 1)[0]


def lookup_type(resource_type: str) -> ResourceType | None:
    """Find the known type matching a kind, plural, singular or short name."""
    key = _strip_group(resource_type).lower()
    for rt in KNOWN_TYPES:
        if key in {rt.kind.lower(), rt.plural, *rt.short_names}:
            return rt
    return None


def matches_kind(resource_type: str, kind: str) -> bool:
    """Check whether an object kind satisfies a user-typed resource type."""
    rt = lookup_type(resource_type)
    if rt:
        return rt.kind.lower() == kind.lower()
    key = _strip_group(resource_type).lower()
    k = kind.lower()
    # Unknown types: accept kind, naive plural and singular spellings
    return key in {k, k + "s", k + "es"}


def is_namespaced(kind: str) -> bool:
    """Return False for kinds known to be cluster-scoped."""
    rt = lookup_type(kind)
    return rt.namespaced if rt else True
