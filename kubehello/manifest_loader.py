"""Reading manifest sources and splitting them into object documents."""

from __future__ import annotations

import json
import logging
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.error import URLError
from urllib.request import urlopen

import yaml

from kubehello.errors import ResolutionError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

MANIFEST_SUFFIXES = frozenset({".yaml", ".yml", ".json"})
URL_PREFIXES = ("http://", "https://")
STDIN_MARKER = "-"
URL_TIMEOUT = 60


@dataclass
class ManifestDocument:
    """One parsed document, or the error that prevented reading its source."""

    source: str
    index: int
    body: Any = None
    error: ResolutionError | None = None


def expand_paths(paths: tuple[str, ...] | list[str], *, recursive: bool) -> list[str]:
    """Expand directories into the manifest files they contain.

    Files named explicitly are kept regardless of suffix. URLs, stdin and
    missing paths pass through so reading them reports the failure in place.
    """
    expanded: list[str] = []
    for raw in paths:
        if raw == STDIN_MARKER or raw.startswith(URL_PREFIXES):
            expanded.append(raw)
            continue
        p = Path(raw)
        if not p.is_dir():
            expanded.append(raw)
            continue
        pattern = p.rglob("*") if recursive else p.glob("*")
        found = sorted(
            f for f in pattern if f.is_file() and f.suffix in MANIFEST_SUFFIXES
        )
        logger.debug("Expanded %s into %d manifest files", raw, len(found))
        expanded.extend(str(f) for f in found)
    return expanded


def read_source(source: str) -> str:
    """Return the text of a file, URL or stdin."""
    try:
        if source == STDIN_MARKER:
            return sys.stdin.read()
        if source.startswith(URL_PREFIXES):
            with urlopen(source, timeout=URL_TIMEOUT) as response:
                return response.read().decode("utf-8")
        return Path(source).read_text(encoding="utf-8")
    except (OSError, URLError, UnicodeDecodeError) as e:
        msg = f"unable to read {source}: {e}"
        raise ResolutionError(msg, source=source) from e


def is_json(text: str, source: str) -> bool:
    """Check whether a source holds JSON rather than YAML."""
    if source.endswith(".json"):
        return True
    return text.lstrip()[:1] in {"{", "["}


def parse_json_documents(text: str, source: str) -> Iterator[ManifestDocument]:
    """Yield every object of a stream of concatenated JSON values."""
    decoder = json.JSONDecoder()
    index = 0
    pos = 0
    while True:
        while pos < len(text) and text[pos].isspace():
            pos += 1
        if pos >= len(text):
            return
        try:
            body, pos = decoder.raw_decode(text, pos)
        except json.JSONDecodeError as e:
            msg = f"error parsing {source}: {e}"
            yield ManifestDocument(
                source=source, index=index, error=ResolutionError(msg, source=source)
            )
            return
        if body is None:
            continue
        yield ManifestDocument(source=source, index=index, body=body)
        index += 1


def parse_documents(text: str, source: str) -> Iterator[ManifestDocument]:
    """Yield every non-empty document of a YAML or JSON stream."""
    if is_json(text, source):
        yield from parse_json_documents(text, source)
        return
    index = 0
    try:
        for body in yaml.safe_load_all(text):
            if body is None:
                continue
            yield ManifestDocument(source=source, index=index, body=body)
            index += 1
    except yaml.YAMLError as e:
        msg = f"error parsing {source}: {e}"
        yield ManifestDocument(
            source=source, index=index, error=ResolutionError(msg, source=source)
        )


def load_documents(source: str) -> Iterator[ManifestDocument]:
    """Read one source and yield its documents, or one error document."""
    try:
        text = read_source(source)
    except ResolutionError as e:
        yield ManifestDocument(source=source, index=0, error=e)
        return
    yield from parse_documents(text, source)


def kustomize_build(directory: str, binary: str = "kustomize") -> str:
    """Render a kustomize overlay and return the resulting manifest stream."""
    cmd = [binary, "build", directory]
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, check=True, capture_output=True, text=True)
    except FileNotFoundError as e:
        msg = f"unable to run {binary}: {e}"
        raise ResolutionError(msg, source=directory) from e
    except subprocess.CalledProcessError as e:
        msg = f"{binary} build {directory} failed: {e.stderr.strip()}"
        raise ResolutionError(msg, source=directory) from e
    return result.stdout


def load_kustomization(
    directory: str, binary: str = "kustomize"
) -> Iterator[ManifestDocument]:
    """Yield the documents of a built kustomize overlay, or one error document."""
    try:
        text = kustomize_build(directory, binary)
    except ResolutionError as e:
        yield ManifestDocument(source=directory, index=0, error=e)
        return
    yield from parse_documents(text, directory)


def is_list_document(body: Any) -> bool:
    """Check whether a document is a collection to be flattened."""
    if not isinstance(body, dict):
        return False
    kind = str(body.get("kind") or "")
    return kind.endswith("List") and isinstance(body.get("items"), list)


def flatten_document(body: Any) -> Iterator[Any]:
    """Expand list documents into their members, recursively, in order."""
    if is_list_document(body):
        for member in body["items"]:
            yield from flatten_document(member)
    else:
        yield body
