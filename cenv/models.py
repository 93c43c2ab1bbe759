"""Core data models shared across cenv components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from .errors import InvalidSelectionError


@dataclass(frozen=True)
class EnvContents:
    """Full text of an env file."""

    contents: str

    def lines(self) -> List[str]:
        """Split the contents into lines without their terminators.

        A final newline does not produce a trailing empty line and a
        ``\\r`` before each ``\\n`` is dropped.
        """
        if not self.contents:
            return []
        lines = self.contents.split("\n")
        if lines[-1] == "":
            lines.pop()
        return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass(frozen=True)
class Selection:
    """The section keyword a user asked to activate."""

    keyword: str

    def __post_init__(self) -> None:
        if not self.keyword or not self.keyword.strip():
            raise InvalidSelectionError("Keyword missing")


class ParseStatus(Enum):
    """Status of the section the rewriter is currently inside."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    IGNORE = "ignore"


__all__ = ["EnvContents", "ParseStatus", "Selection"]
