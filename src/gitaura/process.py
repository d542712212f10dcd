from __future__ import annotations

import os
import subprocess
from pathlib import Path


class CommandError(RuntimeError):
    def __init__(self, argv: list[str], returncode: int, stdout: str = "", stderr: str = "") -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        detail = (stderr or stdout or "").strip()[:500]
        msg = f"command failed ({returncode}): {' '.join(self.argv)}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


def _merged_env(env: dict[str, str] | None) -> dict[str, str] | None:
    if not env:
        return None
    merged = os.environ.copy()
    merged.update(env)
    return merged


def run_cmd(
    argv: list[str],
    cwd: Path,
    *,
    env: dict[str, str] | None = None,
    capture: bool = True,
    timeout_s: int | None = 300,
) -> tuple[int, str, str]:
    """
    Run `argv` (no shell) inside `cwd` and return (returncode, stdout, stderr).
    A missing executable is reported as returncode 127 instead of raising.
    With `capture=False` the child shares the terminal and both streams come back empty.
    """
    try:
        proc = subprocess.run(
            argv,
            cwd=str(cwd),
            env=_merged_env(env),
            capture_output=capture,
            text=True,
            timeout=timeout_s,
        )
    except FileNotFoundError as e:
        return 127, "", str(e)
    return proc.returncode, proc.stdout or "", proc.stderr or ""


def check_cmd(
    argv: list[str],
    cwd: Path,
    *,
    env: dict[str, str] | None = None,
    capture: bool = True,
    timeout_s: int | None = 300,
) -> str:
    code, out, err = run_cmd(argv, cwd, env=env, capture=capture, timeout_s=timeout_s)
    if code != 0:
        raise CommandError(argv, code, out, err)
    return out


def run_git(args: list[str], cwd: Path, timeout_s: int = 300) -> tuple[int, str, str]:
    return run_cmd(["git", *args], cwd, timeout_s=timeout_s)


def run_gh(args: list[str], cwd: Path, timeout_s: int = 300) -> tuple[int, str, str]:
    return run_cmd(["gh", *args], cwd, timeout_s=timeout_s)
