"""Coordinates a single env switch: read, rewrite, diff, write."""

from __future__ import annotations

from dataclasses import dataclass
import difflib
from pathlib import Path
from typing import List

from .config import CenvConfig
from .envfile import read_env_file, write_env_file
from .logging import get_logger
from .models import EnvContents, Selection
from .parser import EnvRewriter, get_policy


@dataclass
class SwitchOutcome:
    """Result of switching the env file to a keyword."""

    path: Path
    keyword: str
    diff: str
    changed: bool
    dry_run: bool


class EnvSwitcher:
    """Activates one section of the configured env file."""

    def __init__(
        self,
        config: CenvConfig | None = None,
        rewriter: EnvRewriter | None = None,
    ) -> None:
        self.config = config or CenvConfig.default(Path.cwd())
        self.rewriter = rewriter or self._build_rewriter(self.config)
        self.logger = get_logger("switcher")

    @classmethod
    def from_config(cls, config: CenvConfig) -> "EnvSwitcher":
        return cls(config=config)

    @property
    def path(self) -> Path:
        return self.config.env_file

    def switch(self, keyword: str, *, dry_run: bool = False) -> SwitchOutcome:
        """Rewrite the env file so that only ``keyword``'s section is active."""
        selection = Selection(keyword)
        self.logger.debug("Reading %s", self.path)
        original = read_env_file(self.path)

        updated = self.rewriter.rewrite(original, selection)
        self.logger.debug(
            "Rewrote %d lines using %s activation",
            len(original.lines()),
            self.rewriter.policy.name,
        )

        diff_text = self._render_diff(original, updated)
        changed = updated != original

        if dry_run:
            self.logger.info("Dry-run completed; %s not written", self.path.name)
            return SwitchOutcome(self.path, keyword, diff_text, changed, dry_run=True)

        if not changed:
            self.logger.info("%s already set to %s; skipping write", self.path.name, keyword)
            return SwitchOutcome(self.path, keyword, diff_text, changed=False, dry_run=False)

        write_env_file(updated, self.path)
        self.logger.info("%s updated to %s", self.path, keyword)
        return SwitchOutcome(self.path, keyword, diff_text, changed=True, dry_run=False)

    def available_keywords(self) -> List[str]:
        """Return the keywords of the env file in display order."""
        return sorted(self.rewriter.list_keywords(read_env_file(self.path)))

    @staticmethod
    def _build_rewriter(config: CenvConfig) -> EnvRewriter:
        policy = get_policy(config.activation, config.comment_char)
        return EnvRewriter(
            policy,
            hyphenated=config.hyphenated_keywords,
            source=f"{config.env_file.name} file",
        )

    def _render_diff(self, original: EnvContents, updated: EnvContents) -> str:
        diff = difflib.unified_diff(
            original.contents.splitlines(keepends=True),
            updated.contents.splitlines(keepends=True),
            fromfile=f"{self.path.name} (original)",
            tofile=f"{self.path.name} (updated)",
        )
        return "".join(diff)


__all__ = ["EnvSwitcher", "SwitchOutcome"]
