from __future__ import annotations

import datetime as dt
import random
import subprocess
from pathlib import Path

import pytest

from gitaura.backdate import create_backdated_commit, iso_timestamp, marker_filename
from gitaura.process import CommandError


def _run(cmd: list[str], *, cwd: Path) -> str:
    proc = subprocess.run(cmd, cwd=str(cwd), check=True, capture_output=True, text=True)
    return proc.stdout


def _init_repo(repo: Path) -> None:
    repo.mkdir(parents=True, exist_ok=True)
    _run(["git", "init"], cwd=repo)


def test_iso_timestamp_is_utc_midnight() -> None:
    assert iso_timestamp(dt.date(2024, 1, 1)) == "2024-01-01T00:00:00Z"
    assert iso_timestamp(dt.date(1999, 12, 31)) == "1999-12-31T00:00:00Z"


def test_marker_filename_shape() -> None:
    name = marker_filename(random.Random(0), now_ms=1700000000123)
    assert name.startswith("commit_1700000000123_")
    assert name.endswith(".txt")
    suffix = int(name[len("commit_1700000000123_") : -len(".txt")])
    assert 0 <= suffix < 10_000


def test_commit_dates_match_assigned_day(tmp_path: Path) -> None:
    repo = tmp_path / "repo"
    _init_repo(repo)

    path = create_backdated_commit(repo, dt.date(2024, 1, 2), rng=random.Random(5))

    assert path.parent == repo
    assert path.read_text(encoding="utf-8") == "Backdated commit: 2024-01-02T00:00:00Z"
    out = _run(["git", "log", "-1", "--format=%aI%n%cI%n%s"], cwd=repo).splitlines()
    assert dt.datetime.fromisoformat(out[0]) == dt.datetime(2024, 1, 2, tzinfo=dt.timezone.utc)
    assert dt.datetime.fromisoformat(out[1]) == dt.datetime(2024, 1, 2, tzinfo=dt.timezone.utc)
    assert out[2] == "Commit for Tue Jan 02 2024"
    tracked = _run(["git", "ls-files"], cwd=repo).split()
    assert tracked == [path.name]


def test_same_day_commits_use_distinct_files(tmp_path: Path) -> None:
    repo = tmp_path / "repo"
    _init_repo(repo)
    rng = random.Random(1)
    paths = {create_backdated_commit(repo, dt.date(2023, 6, 1), rng=rng) for _ in range(3)}
    assert len(paths) == 3
    assert _run(["git", "rev-list", "--count", "HEAD"], cwd=repo).strip() == "3"


def test_custom_message_template(tmp_path: Path) -> None:
    repo = tmp_path / "repo"
    _init_repo(repo)
    create_backdated_commit(repo, dt.date(2022, 5, 17), rng=random.Random(2), message_template="chore: {date:%Y-%m-%d}")
    assert _run(["git", "log", "-1", "--format=%s"], cwd=repo).strip() == "chore: 2022-05-17"


def test_failure_outside_repository_is_fatal(tmp_path: Path) -> None:
    plain = tmp_path / "plain"
    plain.mkdir()
    with pytest.raises(CommandError) as exc:
        create_backdated_commit(plain, dt.date(2024, 1, 1), rng=random.Random(0))
    assert exc.value.argv[:2] == ["git", "add"]
    assert len(list(plain.glob("commit_*.txt"))) == 1
