"""Access to the structural fields of schema-less object documents."""

from datetime import datetime, timezone
from typing import Any

from kubehello.errors import MetadataAccessError


def object_metadata(obj: Any) -> dict[str, Any]:
    """Return the ``metadata`` mapping of an object document."""
    if not isinstance(obj, dict):
        msg = f"object is not a mapping: {type(obj).__name__}"
        raise MetadataAccessError(msg)
    meta = obj.get("metadata")
    if not isinstance(meta, dict):
        msg = "unable to access metadata: object has no metadata"
        raise MetadataAccessError(msg)
    return meta


def object_kind(obj: Any) -> str:
    """Return the object's kind."""
    if not isinstance(obj, dict) or not obj.get("kind"):
        msg = "object has no kind"
        raise MetadataAccessError(msg)
    return str(obj["kind"])


def object_name(obj: Any) -> str:
    """Return the object's name."""
    name = object_metadata(obj).get("name")
    if not name:
        msg = f"{object_kind(obj)} object has no metadata.name"
        raise MetadataAccessError(msg)
    return str(name)


def object_namespace(obj: Any) -> str:
    """Return the object's namespace, or an empty string."""
    return str(object_metadata(obj).get("namespace") or "")


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an RFC 3339 timestamp such as ``2024-01-02T03:04:05Z``."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        # PyYAML already turned an unquoted timestamp into a datetime
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        msg = f"invalid creationTimestamp {value!r}"
        raise MetadataAccessError(msg) from e
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def creation_time(obj: Any) -> datetime | None:
    """Return the object's creation time, if recorded."""
    return parse_timestamp(object_metadata(obj).get("creationTimestamp"))


def lookup_path(obj: Any, dotted: str) -> Any:
    """Follow a dotted field path through nested mappings."""
    current = obj
    for part in dotted.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
    return current
