"""
Unlock resolver - splits a template's subjects into completed, eligible and locked.

resolve() is a pure function of (subjects, completed): it keeps no state and
never touches storage, so callers recompute the whole partition after every
change to the completion set.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from pensum.schemas import Subject, SubjectStatus


@dataclass(frozen=True)
class EligibilityPartition:
    """Every subject id lands in exactly one of the three sets."""
    completed: frozenset[str]
    eligible: frozenset[str]
    locked: frozenset[str]
    # locked id -> unmet prerequisite IDs; read-only, left out of the hash
    missing: Mapping[str, tuple[str, ...]] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        frozen = {k: tuple(v) for k, v in self.missing.items()}
        object.__setattr__(self, 'missing', MappingProxyType(frozen))

    @property
    def all_ids(self) -> frozenset[str]:
        return self.completed | self.eligible | self.locked

    def status_of(self, subject_id: str) -> SubjectStatus:
        """
        Status of one subject.

        Raises:
            KeyError: subject_id was not part of the resolved subjects
        """
        if subject_id in self.completed:
            return SubjectStatus.COMPLETED
        if subject_id in self.eligible:
            return SubjectStatus.ELIGIBLE
        if subject_id in self.locked:
            return SubjectStatus.LOCKED
        raise KeyError(subject_id)

    def missing_prerequisites(self, subject_id: str) -> list[str]:
        return list(self.missing.get(subject_id, []))


def resolve(subjects: list[Subject], completed: Iterable[str]) -> EligibilityPartition:
    """
    Compute the eligibility partition.

    1. A subject in the completion set is completed, whatever its
       prerequisites say (completion is never revoked).
    2. Subjects without prerequisites are eligible.
    3. Remaining subjects are scanned repeatedly; one becomes eligible once
       all its prerequisites are completed. Scanning stops when a full pass
       adds nothing.
    4. Whatever is left is locked.

    The repeated full scan is O(V*E), fine for curricula of a few hundred
    subjects. A queue-based propagation would give the same result.

    Args:
        subjects: Subjects of one (validated) template
        completed: Subject IDs marked complete; unknown IDs are ignored

    Returns:
        EligibilityPartition over the given subjects
    """
    completed_set = set(completed)
    done = {s.id for s in subjects if s.id in completed_set}

    eligible = {s.id for s in subjects if s.id not in done and not s.prerequisites}

    changed = True
    while changed:
        changed = False
        for subject in subjects:
            if subject.id in done or subject.id in eligible:
                continue
            if all(prereq in done for prereq in subject.prerequisites):
                eligible.add(subject.id)
                changed = True

    locked = {s.id for s in subjects if s.id not in done and s.id not in eligible}
    missing = {
        s.id: [p for p in s.prerequisites if p not in done]
        for s in subjects
        if s.id in locked
    }

    return EligibilityPartition(
        completed=frozenset(done),
        eligible=frozenset(eligible),
        locked=frozenset(locked),
        missing=missing,
    )
