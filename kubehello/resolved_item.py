"""Data models for resolved objects and their visit outcomes."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

ORIGIN_FILES = "files"
ORIGIN_ARGS = "args"


@dataclass
class ResolvedItem:
    """One object produced by the resolver, or a placeholder for a failure."""

    kind: str
    name: str
    namespace: str
    origin: str  # files/args
    source: str  # file path, URL or token the item came from
    creation_time: datetime | None = None
    raw: dict[str, Any] = field(default_factory=dict)
    source_error: Exception | None = None


@dataclass
class VisitOutcome:
    """Result of visiting a single item."""

    item: ResolvedItem
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class VisitSummary:
    """Ordered outcomes of one visitation pass."""

    outcomes: list[VisitOutcome] = field(default_factory=list)
    halted: bool = False

    @property
    def errors(self) -> list[Exception]:
        return [o.error for o in self.outcomes if o.error is not None]

    @property
    def first_error(self) -> Exception | None:
        errors = self.errors
        return errors[0] if errors else None

    @property
    def visited(self) -> int:
        return len(self.outcomes)

    def raise_for_error(self) -> None:
        """Raise the terminal error of the pass, if there is one."""
        err = self.first_error
        if err is not None:
            raise err
