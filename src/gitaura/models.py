from __future__ import annotations

import dataclasses
import datetime as dt
from pathlib import Path
from typing import Iterator

DEFAULT_MESSAGE_TEMPLATE = "Commit for {date:%a %b %d %Y}"


def date_range_days(start: dt.date, end: dt.date) -> Iterator[dt.date]:
    cur = start
    while cur <= end:
        yield cur
        cur += dt.timedelta(days=1)


@dataclasses.dataclass(frozen=True)
class DateRange:
    start: dt.date  # inclusive
    end: dt.date  # inclusive

    @classmethod
    def checked(cls, start: dt.date, end: dt.date) -> "DateRange":
        if end < start:
            raise ValueError(f"End date must be after start date (got {start.isoformat()} .. {end.isoformat()})")
        return cls(start=start, end=end)

    @property
    def day_count(self) -> int:
        return (self.end - self.start).days + 1

    @property
    def days(self) -> list[dt.date]:
        return list(date_range_days(self.start, self.end))


@dataclasses.dataclass(frozen=True)
class RepositoryTarget:
    url: str
    source: str  # existing | github | manual
    private: bool | None = None


@dataclasses.dataclass
class RunOptions:
    directory: Path
    start_date: str = ""
    end_date: str = ""
    commits: int | None = None
    seed: int | None = None
    push: str = "ask"  # ask | yes | no
    default_private: bool = True
    default_push: bool = True
    commit_message_template: str = DEFAULT_MESSAGE_TEMPLATE
    dry_run: bool = False
    assume_defaults: bool = False
