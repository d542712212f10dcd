from __future__ import annotations

from pathlib import Path
from typing import Optional

from .process import check_cmd, run_git


def get_repo_toplevel(candidate: Path) -> Optional[Path]:
    code, out, _ = run_git(["rev-parse", "--show-toplevel"], cwd=candidate)
    if code != 0 or not out.strip():
        return None
    return Path(out.strip()).resolve()


def is_git_repo(repo: Path) -> bool:
    """True when `repo` is the top of a work tree, not merely nested inside another one."""
    code, out, _ = run_git(["rev-parse", "--is-inside-work-tree"], cwd=repo)
    if code != 0 or out.strip() != "true":
        return False
    return get_repo_toplevel(repo) == repo.resolve()


def get_remote_origin(repo: Path) -> str:
    code, out, _ = run_git(["remote", "get-url", "origin"], cwd=repo)
    if code == 0:
        return out.strip()
    return ""


def has_origin(repo: Path) -> bool:
    return bool(get_remote_origin(repo))


def init_repo(repo: Path) -> None:
    check_cmd(["git", "init"], cwd=repo)


def attach_origin(repo: Path, url: str, *, replace: bool) -> None:
    if replace:
        check_cmd(["git", "remote", "set-url", "origin", url], cwd=repo)
    else:
        check_cmd(["git", "remote", "add", "origin", url], cwd=repo)


def stage(repo: Path, path: Path | str) -> None:
    check_cmd(["git", "add", "--", str(path)], cwd=repo)


def commit(repo: Path, message: str, *, date_iso: str) -> None:
    env = {
        "GIT_AUTHOR_DATE": date_iso,
        "GIT_COMMITTER_DATE": date_iso,
    }
    check_cmd(["git", "commit", "-m", message], cwd=repo, env=env)


def push_current_branch(repo: Path) -> None:
    check_cmd(["git", "push", "-u", "origin", "HEAD"], cwd=repo, capture=False, timeout_s=None)
