from __future__ import annotations

import re
from pathlib import Path

from .process import CommandError, run_gh

REPO_URL_RE = re.compile(r"github\.com/[\w-]+/[\w-]+")
NAME_TAKEN_MARKER = "Name already exists on this account"


class RepoNameTaken(CommandError):
    pass


def is_github_repo_url(url: str) -> bool:
    return bool(REPO_URL_RE.search((url or "").strip()))


def normalize_repo_url(url: str) -> str:
    u = (url or "").strip()
    if u.endswith(".git"):
        return u
    if u.endswith("/"):
        u = u[:-1]
    return u + ".git"


def validate_repo_url(url: str) -> str | None:
    if not url or not is_github_repo_url(url):
        return "Please enter a valid GitHub repository URL"
    return None


def gh_available(cwd: Path) -> bool:
    code, _, _ = run_gh(["--version"], cwd=cwd)
    return code == 0


def gh_authenticated(cwd: Path) -> bool:
    code, _, _ = run_gh(["auth", "status"], cwd=cwd)
    return code == 0


def repo_exists(name: str, cwd: Path) -> bool:
    code, _, _ = run_gh(["repo", "view", name], cwd=cwd)
    return code == 0


def repo_clone_url(name: str, cwd: Path) -> str:
    args = ["repo", "view", name, "--json", "url", "-q", ".url"]
    code, out, err = run_gh(args, cwd=cwd)
    if code != 0:
        raise CommandError(["gh", *args], code, out, err)
    return out.strip() + ".git"


def create_repo(name: str, *, private: bool, cwd: Path) -> str:
    """
    Create `name` on the authenticated account and return the command's output.
    Raises RepoNameTaken when GitHub reports the name is already in use.
    """
    args = ["repo", "create", name, "--private" if private else "--public"]
    code, out, err = run_gh(args, cwd=cwd)
    if code != 0:
        if NAME_TAKEN_MARKER in err or NAME_TAKEN_MARKER in out:
            raise RepoNameTaken(["gh", *args], code, out, err)
        raise CommandError(["gh", *args], code, out, err)
    return out.strip()
