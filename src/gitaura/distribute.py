from __future__ import annotations

import datetime as dt
import random

from .models import DateRange


def distribute_commits(start: dt.date, end: dt.date, total: int, *, rng: random.Random | None = None) -> dict[dt.date, int]:
    """
    Spread `total` commits over every day in [start, end].

    Each commit lands on a uniformly random day, so some days may get none and
    others several. Every day of the range is present in the result.
    """
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")
    days = DateRange.checked(start, end).days
    if rng is None:
        rng = random.Random()
    plan = {d: 0 for d in days}
    for _ in range(total):
        plan[rng.choice(days)] += 1
    return plan


def plan_summary(plan: dict[dt.date, int]) -> tuple[int, dt.date | None, int]:
    active = sum(1 for n in plan.values() if n > 0)
    if not active:
        return 0, None, 0
    busiest = max(sorted(plan), key=lambda d: plan[d])
    return active, busiest, plan[busiest]
