from __future__ import annotations

import datetime as dt
import random
import time
from pathlib import Path

from .git import commit, stage
from .models import DEFAULT_MESSAGE_TEMPLATE


def iso_timestamp(day: dt.date) -> str:
    return dt.datetime.combine(day, dt.time(0, 0), tzinfo=dt.timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def marker_filename(rng: random.Random, now_ms: int | None = None) -> str:
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return f"commit_{now_ms}_{rng.randrange(10_000)}.txt"


def create_backdated_commit(
    repo: Path,
    day: dt.date,
    *,
    rng: random.Random,
    message_template: str = DEFAULT_MESSAGE_TEMPLATE,
) -> Path:
    timestamp = iso_timestamp(day)
    path = repo / marker_filename(rng)
    while path.exists():
        path = repo / marker_filename(rng)
    path.write_text(f"Backdated commit: {timestamp}", encoding="utf-8")
    stage(repo, path.name)
    commit(repo, message_template.format(date=day), date_iso=timestamp)
    return path
