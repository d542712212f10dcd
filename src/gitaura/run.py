from __future__ import annotations

import datetime as dt
import random
from pathlib import Path

from .backdate import create_backdated_commit
from .config import remember_answers
from .distribute import distribute_commits, plan_summary
from .git import push_current_branch
from .models import DateRange, RunOptions
from .prompts import Prompter, parse_date, validate_date
from .repo_setup import setup_repository


def format_startup_header(*, options: RunOptions, config_path: Path | None, config_missing: bool) -> str:
    if config_path is None:
        config_line = "(none)"
    else:
        config_line = f"{config_path}{' (not found, using defaults)' if config_missing else ''}"
    seed_line = "random" if options.seed is None else str(options.seed)
    push_line = {"yes": "yes", "no": "no"}.get(options.push, f"ask (default: {'yes' if options.default_push else 'no'})")
    lines = [
        "┌──────────────────────────────────────────────────────────────┐",
        "│                           gitaura                            │",
        "└──────────────────────────────────────────────────────────────┘",
        "",
        "Run plan:",
        f"1) Config: {config_line}",
        f"2) Directory: {options.directory} (created if missing)",
        "3) Repository: reuse origin, or find/create it with the GitHub CLI, or enter a URL",
        f"4) Commits: spread over your date range (seed: {seed_line})",
        f"5) Push: {push_line}",
    ]
    if options.dry_run:
        lines.append("")
        lines.append("DRY RUN: nothing will be created, committed or pushed.")
    lines.append("")
    return "\n".join(lines)


def resolve_directory(options: RunOptions, prompter: Prompter) -> Path:
    answer = prompter.text("Where would you like to create your repository?", default=str(options.directory))
    return Path(answer).expanduser().resolve()


def ensure_directory(target: Path) -> None:
    if target.exists():
        if not target.is_dir():
            raise NotADirectoryError(f"Not a directory: {target}")
        print(f"Directory already exists: {target}")
        return
    print(f"Creating directory: {target}")
    target.mkdir(parents=True, exist_ok=True)


def collect_plan_inputs(options: RunOptions, prompter: Prompter) -> tuple[DateRange, int]:
    start = prompter.text(
        "Enter the start date for your commits (YYYY-MM-DD)",
        default=options.start_date or None,
        validate=validate_date,
    )
    end = prompter.text(
        "Enter the end date for your commits (YYYY-MM-DD)",
        default=options.end_date or None,
        validate=validate_date,
    )
    count = prompter.number("How many commits do you want to create?", default=options.commits)
    return DateRange.checked(parse_date(start), parse_date(end)), count


def print_plan(plan: dict[dt.date, int]) -> None:
    active, busiest, most = plan_summary(plan)
    print(f"Plan: {sum(plan.values())} commit(s) on {active} of {len(plan)} day(s).")
    if busiest is not None:
        print(f"Busiest day: {busiest.isoformat()} ({most} commit(s))")


def create_commits(repo: Path, plan: dict[dt.date, int], *, rng: random.Random, message_template: str) -> int:
    total = 0
    for day in sorted(plan):
        count = plan[day]
        if count <= 0:
            continue
        print(f"- Creating {count} commit(s) for {day:%a %b %d %Y}")
        for _ in range(count):
            create_backdated_commit(repo, day, rng=rng, message_template=message_template)
            total += 1
    return total


def _should_push(options: RunOptions, prompter: Prompter) -> bool:
    if options.push == "yes":
        return True
    if options.push == "no":
        return False
    return prompter.confirm("Push commits to GitHub?", default=options.default_push)


def run_gitaura(*, options: RunOptions, prompter: Prompter, config_path: Path | None = None, config: dict | None = None) -> int:
    config = dict(config or {})
    print(
        format_startup_header(
            options=options,
            config_path=config_path,
            config_missing=config_path is not None and not config_path.exists(),
        )
    )

    repo = resolve_directory(options, prompter)
    rng = random.Random(options.seed)

    if options.dry_run:
        date_range, count = collect_plan_inputs(options, prompter)
        plan = distribute_commits(date_range.start, date_range.end, count, rng=rng)
        print_plan(plan)
        for day in sorted(plan):
            if plan[day] > 0:
                print(f"  [dry-run] {day.isoformat()}: {plan[day]} commit(s)")
        print(f"[dry-run] Would create {count} commit(s) in {repo}")
        return 0

    ensure_directory(repo)
    print(f"Working in directory: {repo}")

    target = setup_repository(repo, prompter, default_private=options.default_private)

    date_range, count = collect_plan_inputs(options, prompter)
    print("Distributing commits across date range...")
    plan = distribute_commits(date_range.start, date_range.end, count, rng=rng)
    print_plan(plan)

    print("Creating backdated commits:")
    created = create_commits(repo, plan, rng=rng, message_template=options.commit_message_template)
    print(f"All commits created successfully! ({created} total)")

    push = _should_push(options, prompter)
    if push:
        print(f"Pushing commits to {target.url}...")
        push_current_branch(repo)
        print("Commits pushed successfully!")
    else:
        print("Skipping push. Run `git push -u origin HEAD` later to publish.")

    if config_path is not None and not options.assume_defaults:
        remember_answers(
            config_path,
            config,
            private=target.private,
            push=push if options.push == "ask" else None,
        )
    return 0
