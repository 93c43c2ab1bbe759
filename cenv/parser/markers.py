"""Section marker recognition.

A marker is a comment line naming the section that follows it::

    # ++ staging ++
    #++ staging
    ## ++ staging ++

The comment character may repeat, spaces around ``++`` are optional, and a
closing ``++`` is accepted but not required. Matching is anchored at the very
start of the line, so an indented marker is an ordinary line.
"""

from __future__ import annotations

from functools import lru_cache
import re
from typing import Optional, Pattern

DEFAULT_COMMENT_CHAR = "#"

_WORD_NAME = r"\w+"
_HYPHENATED_NAME = r"[\w-]+"


@lru_cache(maxsize=None)
def _keyword_pattern(comment_char: str, hyphenated: bool) -> Pattern[str]:
    name = _HYPHENATED_NAME if hyphenated else _WORD_NAME
    return re.compile(rf"^{re.escape(comment_char)}+ *\+\+ *({name})")


def resolve_keyword(
    line: str,
    *,
    comment_char: str = DEFAULT_COMMENT_CHAR,
    hyphenated: bool = False,
) -> Optional[str]:
    """Return the keyword named by a marker line, or None for any other line."""
    match = _keyword_pattern(comment_char, hyphenated).match(line)
    if match is None:
        return None
    return match.group(1)


class MarkerResolver:
    """Resolves marker lines for one comment character and name grammar."""

    def __init__(
        self,
        comment_char: str = DEFAULT_COMMENT_CHAR,
        *,
        hyphenated: bool = False,
    ) -> None:
        self.comment_char = comment_char
        self.hyphenated = hyphenated

    def resolve(self, line: str) -> Optional[str]:
        return resolve_keyword(
            line, comment_char=self.comment_char, hyphenated=self.hyphenated
        )


__all__ = ["DEFAULT_COMMENT_CHAR", "MarkerResolver", "resolve_keyword"]
