"""
Progress aggregator - statistics derived from (subjects, completed).

All functions are pure. Only completion IDs that name one of the given
subjects are counted, which keeps every percentage within [0, 100].
"""

import math
from typing import Iterable, Optional

from pensum.config import MILESTONE_THRESHOLD
from pensum.schemas import (
    CategoryStats,
    Milestone,
    OverallStats,
    ProgressReport,
    Subject,
    TermStats,
)

from .resolver import resolve


def percentage(part: int, total: int) -> int:
    """part/total as a whole percentage, rounding halves up. 0 when total is 0."""
    if total <= 0:
        return 0
    return (200 * part + total) // (2 * total)


def category_stats(subjects: list[Subject], completed: Iterable[str]) -> list[CategoryStats]:
    """Per-category completion, in order of first appearance among subjects."""
    done = set(completed)
    counts: dict[str, list[int]] = {}  # category -> [total, completed]
    for subject in subjects:
        entry = counts.setdefault(subject.category, [0, 0])
        entry[0] += 1
        if subject.id in done:
            entry[1] += 1

    return [
        CategoryStats(
            category=category,
            total=total,
            completed=completed_count,
            percentage=percentage(completed_count, total),
        )
        for category, (total, completed_count) in counts.items()
    ]


def term_stats(subjects: list[Subject], completed: Iterable[str]) -> list[TermStats]:
    """
    Per-term completion.

    Groups are keyed by the exact term label and sorted by numeric value;
    labels with the same value keep first-appearance order.
    """
    done = set(completed)
    groups: dict[str, dict] = {}
    for subject in subjects:
        group = groups.setdefault(
            subject.term.label,
            {"term": subject.term, "total": 0, "completed": 0},
        )
        group["total"] += 1
        if subject.id in done:
            group["completed"] += 1

    ordered = sorted(groups.values(), key=lambda g: g["term"].value)
    return [
        TermStats(
            term=g["term"].label,
            value=g["term"].value,
            is_intermediate=g["term"].is_intermediate,
            total=g["total"],
            completed=g["completed"],
            percentage=percentage(g["completed"], g["total"]),
        )
        for g in ordered
    ]


def overall_stats(subjects: list[Subject], completed: Iterable[str]) -> OverallStats:
    done = set(completed)
    total = len(subjects)
    total_completed = sum(1 for s in subjects if s.id in done)
    return OverallStats(
        total_subjects=total,
        total_completed=total_completed,
        overall_percentage=percentage(total_completed, total),
    )


def best_category(categories: list[CategoryStats]) -> Optional[CategoryStats]:
    """Highest percentage; the earliest category wins a tie."""
    best = None
    for stats in categories:
        if best is None or stats.percentage > best.percentage:
            best = stats
    return best


def next_milestone(overall: OverallStats, threshold: float = MILESTONE_THRESHOLD) -> Milestone:
    """Completions still needed to reach `threshold` of all subjects."""
    remaining = math.ceil(overall.total_subjects * threshold) - overall.total_completed
    return Milestone(
        threshold=threshold,
        remaining=max(remaining, 0),
        reached=remaining <= 0,
    )


def build_report(
    subjects: list[Subject],
    completed: Iterable[str],
    threshold: float = MILESTONE_THRESHOLD,
) -> ProgressReport:
    """
    Full progress report for one template.

    Args:
        subjects: Subjects of the template
        completed: Completion set
        threshold: Share of subjects used for the next milestone

    Returns:
        ProgressReport with overall, per-category and per-term stats
    """
    done = set(completed)
    partition = resolve(subjects, done)
    overall = overall_stats(subjects, done)
    categories = category_stats(subjects, done)

    return ProgressReport(
        overall=overall,
        categories=categories,
        terms=term_stats(subjects, done),
        best_category=best_category(categories),
        next_milestone=next_milestone(overall, threshold),
        completed_count=len(partition.completed),
        eligible_count=len(partition.eligible),
        locked_count=len(partition.locked),
    )
