from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .config import default_config_path, load_config, resolve_settings
from .prompts import Prompter
from .run import run_gitaura


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitaura",
        description="Create a git repository with backdated commits spread over a date range, then optionally push it to GitHub.",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to config.json (default: ~/.config/gitaura/config.json).")
    parser.add_argument("--directory", type=str, default="", help="Repository directory (default: ~/gitaura or `default_directory`).")
    parser.add_argument("--start-date", type=str, default="", help="First day of the history, YYYY-MM-DD.")
    parser.add_argument("--end-date", type=str, default="", help="Last day of the history, YYYY-MM-DD (inclusive).")
    parser.add_argument("--commits", type=int, default=None, help="Number of commits to create.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible commit distribution (overrides `seed`).")
    parser.add_argument("--push", choices=["ask", "yes", "no"], default="ask", help="Push to origin when done.")
    parser.add_argument("--dry-run", action="store_true", help="Print the commit plan without touching the filesystem or git.")
    parser.add_argument("--yes", action="store_true", help="Accept defaults (including values given by flags) without prompting.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = _build_parser().parse_args(argv)
    config_path = args.config if args.config is not None else default_config_path()

    try:
        config = load_config(config_path)
        options = resolve_settings(config, args)
        prompter = Prompter(assume_defaults=options.assume_defaults)
        return run_gitaura(options=options, prompter=prompter, config_path=config_path, config=config)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"An error occurred: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
