from __future__ import annotations

import json
import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_git(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    home = tmp_path / "home"
    home.mkdir()
    global_cfg = tmp_path / "global.gitconfig"
    global_cfg.write_text("[user]\n\tname = Test User\n\temail = test@example.com\n", encoding="utf-8")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_cfg))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    for key in ("GIT_AUTHOR_DATE", "GIT_COMMITTER_DATE", "GIT_DIR", "GIT_WORK_TREE"):
        monkeypatch.delenv(key, raising=False)


FAKE_GH = '''#!/usr/bin/env python3
import json
import sys
from pathlib import Path

LOG = Path({log!r})
STATE = Path({state!r})


def main() -> int:
    args = sys.argv[1:]
    with LOG.open("a", encoding="utf-8") as f:
        f.write(json.dumps(args) + "\\n")
    state = json.loads(STATE.read_text(encoding="utf-8"))
    if args == ["--version"]:
        if not state["installed"]:
            return 127
        print("gh version 2.40.0")
        return 0
    if args[:2] == ["auth", "status"]:
        return 0 if state["authenticated"] else 1
    if args[:2] == ["repo", "view"]:
        name = args[2]
        if name not in state["existing"]:
            sys.stderr.write("GraphQL: Could not resolve to a Repository\\n")
            return 1
        if "--json" in args:
            print("https://github.com/octo/" + name)
        else:
            print("octo/" + name)
        return 0
    if args[:2] == ["repo", "create"]:
        name = args[2]
        if name in state["taken"]:
            sys.stderr.write("GraphQL: Name already exists on this account (createRepository)\\n")
            return 1
        if name in state["broken"]:
            sys.stderr.write("HTTP 500: something went wrong\\n")
            return 1
        state["existing"].append(name)
        STATE.write_text(json.dumps(state), encoding="utf-8")
        print("https://github.com/octo/" + name)
        return 0
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
'''


class FakeGh:
    def __init__(self, bin_dir: Path) -> None:
        self.log = bin_dir / "gh-calls.log"
        self.state = bin_dir / "gh-state.json"

    def configure(
        self,
        *,
        installed: bool = True,
        authenticated: bool = True,
        existing: tuple[str, ...] = (),
        taken: tuple[str, ...] = (),
        broken: tuple[str, ...] = (),
    ) -> "FakeGh":
        state = {
            "installed": installed,
            "authenticated": authenticated,
            "existing": list(existing),
            "taken": list(taken),
            "broken": list(broken),
        }
        self.state.write_text(json.dumps(state), encoding="utf-8")
        return self

    @property
    def calls(self) -> list[list[str]]:
        if not self.log.exists():
            return []
        return [json.loads(line) for line in self.log.read_text(encoding="utf-8").splitlines() if line.strip()]


@pytest.fixture()
def fake_gh(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FakeGh:
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    gh = FakeGh(bin_dir)
    script = bin_dir / "gh"
    script.write_text(FAKE_GH.format(log=str(gh.log), state=str(gh.state)), encoding="utf-8")
    script.chmod(0o755)
    monkeypatch.setenv("PATH", str(bin_dir) + os.pathsep + os.environ.get("PATH", ""))
    return gh.configure()
