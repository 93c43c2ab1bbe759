"""Reading and writing the env file on disk."""

from __future__ import annotations

import os
from pathlib import Path
import tempfile

from .config import DEFAULT_ENV_FILE
from .errors import EnvFileError
from .models import EnvContents


def read_env_file(path: Path | str = DEFAULT_ENV_FILE) -> EnvContents:
    """Read the env file at ``path``."""
    env_path = Path(path)
    try:
        # newline="" keeps a bare \r inside a value; EnvContents.lines handles \r\n.
        with env_path.open(encoding="utf-8", newline="") as handle:
            contents = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvFileError(f"Unable to read {env_path.name} file - {_reason(exc)}") from exc
    return EnvContents(contents)


def write_env_file(env: EnvContents, path: Path | str = DEFAULT_ENV_FILE) -> None:
    """Replace the env file at ``path`` with ``env``.

    The new contents go to a temporary sibling first and are moved over the
    old file, so a failed write leaves the previous file intact. A symlinked
    path is resolved first so the link survives and its target is rewritten.
    """
    name = Path(path).name
    env_path = Path(path).resolve()
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{env_path.name}.", suffix=".tmp", dir=env_path.parent
        )
    except OSError as exc:
        raise EnvFileError(f"Unable to write {name} file - {_reason(exc)}") from exc

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(env.contents)
        if env_path.exists():
            os.chmod(tmp_path, env_path.stat().st_mode & 0o7777)
        os.replace(tmp_path, env_path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise EnvFileError(f"Unable to write {name} file - {_reason(exc)}") from exc


def _reason(exc: Exception) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


__all__ = ["read_env_file", "write_env_file"]
