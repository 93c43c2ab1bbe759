"""Strategies for commenting and uncommenting lines inside a section."""

from __future__ import annotations

from abc import ABC, abstractmethod
import re
from typing import Dict, Type

from .markers import DEFAULT_COMMENT_CHAR

_ASSIGNMENT_PATTERN = re.compile(r"^\w+=")


class ActivationPolicy(ABC):
    """Contract for turning section lines on and off."""

    name = ""

    def __init__(self, comment_char: str = DEFAULT_COMMENT_CHAR) -> None:
        self.comment_char = comment_char

    @abstractmethod
    def activate(self, line: str) -> str:
        """Return the effective (uncommented) form of ``line``."""

    def deactivate(self, line: str) -> str:
        """Return the commented form of ``line``; already commented lines are kept."""
        if not line or line.startswith(self.comment_char):
            return line
        return f"{self.comment_char} {line}"

    def _strip_comment(self, line: str) -> str | None:
        if not line.startswith(self.comment_char):
            return None
        remainder = line[len(self.comment_char):]
        if remainder.startswith(" "):
            remainder = remainder[1:]
        return remainder


class LooseActivation(ActivationPolicy):
    """Uncomments any commented line."""

    name = "loose"

    def activate(self, line: str) -> str:
        remainder = self._strip_comment(line)
        return line if remainder is None else remainder


class StrictActivation(ActivationPolicy):
    """Uncomments a line only when what remains looks like ``KEY=value``.

    Prose comments inside a section stay commented.
    """

    name = "strict"

    def activate(self, line: str) -> str:
        remainder = self._strip_comment(line)
        if remainder is None or not _ASSIGNMENT_PATTERN.match(remainder):
            return line
        return remainder


_POLICIES: Dict[str, Type[ActivationPolicy]] = {
    StrictActivation.name: StrictActivation,
    LooseActivation.name: LooseActivation,
}

DEFAULT_POLICY = StrictActivation.name


def available_policies() -> list[str]:
    return sorted(_POLICIES)


def get_policy(name: str, comment_char: str = DEFAULT_COMMENT_CHAR) -> ActivationPolicy:
    """Instantiate the activation policy registered under ``name``."""
    try:
        policy_cls = _POLICIES[name]
    except KeyError:
        choices = ", ".join(available_policies())
        raise ValueError(f"Unknown activation policy '{name}' (expected one of: {choices})") from None
    return policy_cls(comment_char)


__all__ = [
    "ActivationPolicy",
    "DEFAULT_POLICY",
    "LooseActivation",
    "StrictActivation",
    "available_policies",
    "get_policy",
]
