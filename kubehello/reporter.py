"""Reporting of resolved items to the output stream."""

from __future__ import annotations

from collections.abc import Iterable
from typing import IO, TYPE_CHECKING

from kubehello.message import compose_message

if TYPE_CHECKING:
    from kubehello.printers import PrinterFactory
    from kubehello.resolved_item import ResolvedItem


class Reporter:
    """Writes one message and one rendered object per resolved item."""

    def __init__(
        self,
        printer_factory: PrinterFactory,
        out: IO[str],
        image_paths: Iterable[str] = (),
    ) -> None:
        """Store the printer factory, output stream and image field paths."""
        self.printer_factory = printer_factory
        self.out = out
        self.image_paths = tuple(image_paths)
        self.reported = 0

    def report(self, item: ResolvedItem) -> None:
        """Print ``item`` under its greeting message."""
        message = compose_message(item, self.image_paths)
        printer = self.printer_factory(message)
        printer.print_obj(item.raw, self.out)
        self.reported += 1
