from __future__ import annotations

import datetime as dt
import re
from typing import Callable, Optional

Validator = Callable[[str], Optional[str]]

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_date(value: str) -> str | None:
    v = (value or "").strip()
    if not DATE_RE.match(v):
        return "Please enter a valid date in YYYY-MM-DD format"
    try:
        dt.date.fromisoformat(v)
    except ValueError:
        return "Please enter a valid date in YYYY-MM-DD format"
    return None


def parse_date(value: str) -> dt.date:
    err = validate_date(value)
    if err:
        raise ValueError(f"Invalid date {value!r}: expected YYYY-MM-DD")
    return dt.date.fromisoformat(value.strip())


def validate_positive_int(value: str) -> str | None:
    v = (value or "").strip()
    try:
        n = int(v)
    except ValueError:
        return "Please enter a positive integer"
    if n <= 0:
        return "Please enter a positive integer"
    return None


class Prompter:
    """
    Line-based prompts with defaults and validation.

    Invalid answers are reported and asked again. When stdin is closed (or
    `assume_defaults` is set) the default is used; if there is no valid default
    a ValueError is raised instead of looping forever.
    """

    def __init__(self, *, input_fn: Callable[[str], str] = input, assume_defaults: bool = False) -> None:
        self._input = input_fn
        self.assume_defaults = assume_defaults

    def _read(self, prompt: str) -> str | None:
        if self.assume_defaults:
            return None
        try:
            return self._input(prompt)
        except EOFError:
            return None

    def text(
        self,
        message: str,
        *,
        default: str | None = None,
        validate: Validator | None = None,
        normalize: Callable[[str], str] | None = None,
    ) -> str:
        suffix = f" [{default}]" if default else ""
        while True:
            ans = self._read(f"{message}{suffix}: ")
            value = (ans or "").strip() or (default or "")
            err = validate(value) if validate is not None else None
            if err is None:
                return normalize(value) if normalize is not None else value
            if ans is None:
                raise ValueError(f"No valid answer for {message!r}: {err}")
            print(f">> {err}")

    def number(self, message: str, *, default: int | None = None, validate: Validator | None = None) -> int:
        check = validate or validate_positive_int
        value = self.text(message, default=None if default is None else str(default), validate=check)
        return int(value.strip())

    def confirm(self, message: str, *, default: bool) -> bool:
        suffix = "[Y/n]" if default else "[y/N]"
        ans = self._read(f"{message} {suffix} ")
        if ans is None:
            return default
        ans = ans.strip().lower()
        if not ans:
            return default
        if ans in ("y", "yes"):
            return True
        if ans in ("n", "no"):
            return False
        return default
