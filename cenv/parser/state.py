"""Section status transitions for the line rewriter."""

from __future__ import annotations

from typing import Optional

from ..models import ParseStatus

INITIAL_STATUS = ParseStatus.IGNORE


def transition(
    status: ParseStatus, line: str, keyword: Optional[str], selected: str
) -> ParseStatus:
    """Return the status that applies to ``line``.

    ``keyword`` is the marker keyword resolved from ``line`` (None when the
    line is not a marker). A blank line closes the current section.
    """
    if not line:
        return ParseStatus.IGNORE
    if keyword is not None:
        return ParseStatus.ACTIVE if keyword == selected else ParseStatus.INACTIVE
    return status


__all__ = ["INITIAL_STATUS", "transition"]
