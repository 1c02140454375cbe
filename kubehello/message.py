"""Composition of the per-object greeting message."""

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from kubehello.metadata import lookup_path
from kubehello.resolved_item import ORIGIN_FILES, ResolvedItem

UNKNOWN_TIME = "<unknown>"


def format_creation_time(value: datetime | None) -> str:
    """Render a timestamp as ``2006-01-02 15:04:05 +0000 UTC``."""
    if value is None:
        return UNKNOWN_TIME
    return value.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S +0000 UTC")


def container_images(obj: Any, image_paths: Iterable[str]) -> list[str]:
    """Collect container image references found under the given paths."""
    images: list[str] = []
    for path in image_paths:
        containers = lookup_path(obj, path)
        if not isinstance(containers, list):
            continue
        for c in containers:
            if isinstance(c, dict) and c.get("image"):
                images.append(str(c["image"]))
    return images


def compose_message(item: ResolvedItem, image_paths: Iterable[str] = ()) -> str:
    """Build the message printed ahead of an object."""
    if item.origin == ORIGIN_FILES:
        return f"Hello {item.kind} {item.name} "
    parts = [
        "Hello",
        item.kind,
        item.name,
        format_creation_time(item.creation_time),
        *container_images(item.raw, image_paths),
    ]
    return " ".join(parts)
