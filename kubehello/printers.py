"""Printers that serialize objects under an operation label.

The factory is handed to the reporter explicitly; there is no global registry
of output formats.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import date, datetime
from typing import IO, Any

import yaml

from kubehello.errors import MetadataAccessError, RenderError
from kubehello.metadata import object_kind, object_name

PrinterFactory = Callable[[str], "Printer"]


class Printer(ABC):
    """Writes the operation line, then the object's serialization."""

    def __init__(self, operation: str) -> None:
        """Bind the operation label printed ahead of every object."""
        self.operation = operation

    @abstractmethod
    def serialize(self, obj: dict[str, Any]) -> str:
        """Return the text rendering of ``obj``."""

    def print_obj(self, obj: dict[str, Any], out: IO[str]) -> None:
        """Serialize ``obj`` and write it with its label in a single write."""
        body = self.serialize(obj)
        if body and not body.endswith("\n"):
            body += "\n"
        out.write(f"{self.operation}\n{body}")


def _json_default(value: Any) -> str:
    # PyYAML parses unquoted timestamps into datetimes
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


class JSONPrinter(Printer):
    def serialize(self, obj: dict[str, Any]) -> str:
        try:
            return json.dumps(obj, indent=4, default=_json_default)
        except (TypeError, ValueError) as e:
            msg = f"unable to print object as json: {e}"
            raise RenderError(msg) from e


class YAMLPrinter(Printer):
    def serialize(self, obj: dict[str, Any]) -> str:
        try:
            return yaml.safe_dump(obj, default_flow_style=False, sort_keys=True)
        except yaml.YAMLError as e:
            msg = f"unable to print object as yaml: {e}"
            raise RenderError(msg) from e


class NamePrinter(Printer):
    """Prints ``kind/name`` only."""

    def serialize(self, obj: dict[str, Any]) -> str:
        try:
            return f"{object_kind(obj).lower()}/{object_name(obj)}"
        except MetadataAccessError as e:
            msg = f"unable to print object name: {e}"
            raise RenderError(msg) from e


PRINTERS: dict[str, type[Printer]] = {
    "json": JSONPrinter,
    "yaml": YAMLPrinter,
    "name": NamePrinter,
}


def make_printer_factory(output: str) -> PrinterFactory:
    """Return a factory building printers of the requested output format."""
    printer_cls = PRINTERS.get(output.lower())
    if printer_cls is None:
        allowed = ", ".join(sorted(PRINTERS))
        msg = (
            f'unable to match a printer suitable for the output format "{output}", '
            f"allowed formats are: {allowed}"
        )
        raise RenderError(msg)

    def factory(operation: str) -> Printer:
        return printer_cls(operation)

    return factory
