from __future__ import annotations

import argparse
import json
from pathlib import Path

from .models import DEFAULT_MESSAGE_TEMPLATE, RunOptions


def default_config_path() -> Path:
    return Path.home() / ".config" / "gitaura" / "config.json"


def default_directory() -> Path:
    return Path.home() / "gitaura"


def load_config(config_path: Path) -> dict:
    if not config_path.exists():
        return {}
    data = json.loads(config_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a JSON object: {config_path}")
    return data


def save_config(config_path: Path, config: dict) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(config, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def _optional_int(value: object, *, key: str) -> int | None:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ValueError(f"{key} must be an integer, got {value!r}") from e


def resolve_settings(config: dict, args: argparse.Namespace) -> RunOptions:
    """Built-in defaults, then the config file, then command-line flags."""
    directory_cfg = str(config.get("default_directory", "") or "").strip()
    directory = Path(directory_cfg).expanduser() if directory_cfg else default_directory()
    if getattr(args, "directory", None):
        directory = Path(args.directory).expanduser()

    seed = _optional_int(config.get("seed"), key="seed")
    if getattr(args, "seed", None) is not None:
        seed = int(args.seed)

    template = str(config.get("commit_message_template", "") or "").strip() or DEFAULT_MESSAGE_TEMPLATE

    return RunOptions(
        directory=directory,
        start_date=str(getattr(args, "start_date", "") or "").strip(),
        end_date=str(getattr(args, "end_date", "") or "").strip(),
        commits=getattr(args, "commits", None),
        seed=seed,
        push=str(getattr(args, "push", "ask") or "ask"),
        default_private=bool(config.get("default_private", True)),
        default_push=bool(config.get("default_push", True)),
        commit_message_template=template,
        dry_run=bool(getattr(args, "dry_run", False)),
        assume_defaults=bool(getattr(args, "yes", False)),
    )


def remember_answers(config_path: Path, config: dict, *, private: bool | None, push: bool | None) -> None:
    updated = dict(config)
    if private is not None:
        updated["default_private"] = bool(private)
    if push is not None:
        updated["default_push"] = bool(push)
    if updated != config:
        save_config(config_path, updated)
