"""Visiting resolved items with a continue-on-error policy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kubehello.errors import ResolutionError
from kubehello.resolved_item import VisitOutcome, VisitSummary

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from kubehello.resolved_item import ResolvedItem

logger = logging.getLogger(__name__)


def visit(
    items: Iterable[ResolvedItem],
    fn: Callable[[ResolvedItem], None],
    *,
    continue_on_error: bool = True,
) -> VisitSummary:
    """Apply ``fn`` to each item once, in order.

    Items carrying a ``source_error`` are not passed to ``fn``; the error is
    recorded instead, as is any ResolutionError raised by ``fn``. Without
    ``continue_on_error`` the first error stops the pass. A RenderError is
    never accumulated: it propagates out of the pass immediately.
    """
    summary = VisitSummary()
    for item in items:
        error: Exception | None = item.source_error
        if error is None:
            try:
                fn(item)
            except ResolutionError as e:
                error = e
        summary.outcomes.append(VisitOutcome(item=item, error=error))
        if error is None:
            continue
        logger.debug("Error visiting %s: %s", item.source, error)
        if not continue_on_error:
            summary.halted = True
            break
    return summary
