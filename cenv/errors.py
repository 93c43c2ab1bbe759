"""Exception types raised by cenv."""

from __future__ import annotations

from typing import Iterable


class CenvError(Exception):
    """Base class for every error cenv raises on purpose."""


class InvalidSelectionError(CenvError, ValueError):
    """Raised when the requested keyword is empty."""


class KeywordNotFoundError(CenvError):
    """Raised when no section marker matches the requested keyword."""

    def __init__(
        self,
        keyword: str,
        available: Iterable[str] = (),
        *,
        source: str = ".env file",
    ) -> None:
        self.keyword = keyword
        self.available = frozenset(available)
        self.source = source
        super().__init__(f'keyword "{keyword}" was not found in {source}')


class EnvFileError(CenvError):
    """Raised when the env file cannot be read or written."""


__all__ = [
    "CenvError",
    "EnvFileError",
    "InvalidSelectionError",
    "KeywordNotFoundError",
]
