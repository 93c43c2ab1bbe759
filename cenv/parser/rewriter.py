"""Rewrites env file contents so that only the selected section is active."""

from __future__ import annotations

from typing import List, Optional, Set

from ..errors import KeywordNotFoundError
from ..models import EnvContents, ParseStatus, Selection
from .markers import DEFAULT_COMMENT_CHAR, MarkerResolver
from .policies import ActivationPolicy, StrictActivation
from .state import INITIAL_STATUS, transition


class EnvRewriter:
    """Comments out every section except the selected one.

    Lines before the first marker, and lines following a blank line until
    the next marker, are left untouched. Marker lines and blank lines are
    never rewritten.
    """

    def __init__(
        self,
        policy: ActivationPolicy | None = None,
        *,
        hyphenated: bool = False,
        source: str = ".env file",
    ) -> None:
        self.policy = policy or StrictActivation()
        self.resolver = MarkerResolver(self.policy.comment_char, hyphenated=hyphenated)
        self.source = source

    def rewrite(self, env: EnvContents, selection: Selection) -> EnvContents:
        status = INITIAL_STATUS
        keyword_found = False
        rewritten: List[str] = []

        for line in env.lines():
            keyword = self.resolver.resolve(line)
            status = transition(status, line, keyword, selection.keyword)
            if keyword is not None:
                keyword_found = keyword_found or keyword == selection.keyword
                rewritten.append(line)
            elif not line:
                rewritten.append(line)
            else:
                rewritten.append(self._render(status, line))

        if not keyword_found:
            raise KeywordNotFoundError(
                selection.keyword, self.list_keywords(env), source=self.source
            )

        # Always finish with exactly one newline.
        return EnvContents("\n".join(rewritten) + "\n")

    def list_keywords(self, env: EnvContents) -> Set[str]:
        """Return the distinct keywords named by marker lines in ``env``."""
        keywords: Set[str] = set()
        for line in env.lines():
            keyword = self.resolver.resolve(line)
            if keyword is not None:
                keywords.add(keyword)
        return keywords

    def _render(self, status: ParseStatus, line: str) -> str:
        if status is ParseStatus.ACTIVE:
            return self.policy.activate(line)
        if status is ParseStatus.INACTIVE:
            return self.policy.deactivate(line)
        return line


def parse_env(
    env: EnvContents,
    selection: Selection,
    *,
    policy: Optional[ActivationPolicy] = None,
    hyphenated: bool = False,
) -> EnvContents:
    """Rewrite ``env`` so that only ``selection``'s section is active."""
    return EnvRewriter(policy, hyphenated=hyphenated).rewrite(env, selection)


def list_available_keywords(
    env: EnvContents,
    *,
    comment_char: str = DEFAULT_COMMENT_CHAR,
    hyphenated: bool = False,
) -> Set[str]:
    """Return the distinct keywords present in ``env``."""
    resolver = MarkerResolver(comment_char, hyphenated=hyphenated)
    return {keyword for keyword in map(resolver.resolve, env.lines()) if keyword is not None}


__all__ = ["EnvRewriter", "list_available_keywords", "parse_env"]
