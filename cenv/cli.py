"""CLI entrypoint for cenv."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, NoReturn

from .config import CenvConfig, ConfigError, load_config
from .errors import EnvFileError, InvalidSelectionError, KeywordNotFoundError
from .logging import configure_logging, get_logger
from .parser import LooseActivation, StrictActivation
from .switcher import EnvSwitcher

logger = get_logger("cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cenv",
        description="Switch between named environments kept in one .env file.",
    )
    parser.add_argument(
        "keyword",
        nargs="?",
        help="Name of the section to activate, as written in its '# ++ name ++' marker.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        help="Path to the env file (defaults to .env, or env_file from .cenv.yml).",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to a .cenv.yml file or the directory holding one.",
    )
    activation = parser.add_mutually_exclusive_group()
    activation.add_argument(
        "--loose",
        dest="activation",
        action="store_const",
        const=LooseActivation.name,
        help="Uncomment every commented line in the selected section.",
    )
    activation.add_argument(
        "--strict",
        dest="activation",
        action="store_const",
        const=StrictActivation.name,
        help="Only uncomment lines that look like KEY=value (default).",
    )
    parser.add_argument(
        "--hyphenated",
        action="store_true",
        help="Allow hyphens in section keywords.",
    )
    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="List the keywords found in the env file and exit.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview changes without writing the env file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for cenv."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        parser.exit(1, f"Problem loading configuration: {exc}\n")

    switcher = EnvSwitcher.from_config(config)
    env_name = switcher.path.name

    if args.list:
        try:
            keywords = switcher.available_keywords()
        except EnvFileError as exc:
            _fail(parser, exc)
        if not keywords:
            print(f"No keywords found in {env_name} file")
        for keyword in keywords:
            print(keyword)
        return

    if not args.keyword:
        parser.exit(
            1,
            "Problem parsing arguments: Keyword missing\n" + _available_hint(switcher),
        )

    try:
        outcome = switcher.switch(args.keyword, dry_run=bool(args.dry_run))
    except InvalidSelectionError as exc:
        parser.exit(1, f"Problem parsing arguments: {exc}\n" + _available_hint(switcher))
    except KeywordNotFoundError as exc:
        parser.exit(1, f"{exc}\n" + _format_available(sorted(exc.available), env_name))
    except EnvFileError as exc:
        _fail(parser, exc)

    if outcome.dry_run:
        print(f"{env_name} changes (dry-run):")
        print(outcome.diff or "(no diff)")
    else:
        print(f"Updated {env_name} to {outcome.keyword}")


def _resolve_config(args: argparse.Namespace) -> CenvConfig:
    if args.config is not None:
        config_path = Path(args.config)
        if not config_path.exists():
            raise ConfigError(f"{config_path} does not exist")
        config = load_config(config_path)
    elif args.file is not None:
        config = load_config(Path(args.file).expanduser().resolve().parent)
    else:
        config = load_config(Path.cwd())

    if args.file is not None:
        config.env_file = Path(args.file).expanduser().resolve()
    if args.activation is not None:
        config.activation = args.activation
    if args.hyphenated:
        config.hyphenated_keywords = True
    logger.debug(
        "Using %s (activation=%s, comment_char=%r)",
        config.env_file,
        config.activation,
        config.comment_char,
    )
    return config


def _fail(parser: argparse.ArgumentParser, exc: EnvFileError) -> NoReturn:
    logger.debug("Env file access failed", exc_info=exc)
    parser.exit(1, f"{exc}\n")


def _available_hint(switcher: EnvSwitcher) -> str:
    try:
        keywords = switcher.available_keywords()
    except EnvFileError:
        return ""
    return _format_available(keywords, switcher.path.name)


def _format_available(keywords: Iterable[str], env_name: str) -> str:
    keywords = list(keywords)
    if not keywords:
        return f"No keywords found in {env_name} file\n"
    return f"Available keywords: {', '.join(keywords)}\n"


if __name__ == "__main__":
    main(sys.argv[1:])
