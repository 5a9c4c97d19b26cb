"""
CurriculumTracker - the calls a presentation layer makes for one template.

Provides:
- Completion toggling and clearing
- Subject add/remove with completion state kept consistent
- Eligibility partition and progress report
- Subjects grouped by term with status indicators
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from pensum.config import MILESTONE_THRESHOLD
from pensum.errors import NotFoundError
from pensum.schemas import ProgressReport, Subject, SubjectStatus, Template, Term
from pensum.store import TemplateStore

from . import editor
from .aggregator import build_report
from .resolver import EligibilityPartition, resolve
from .validation import validate_template

logger = logging.getLogger(__name__)


@dataclass
class SubjectCard:
    """Subject with its current status."""
    subject: Subject
    status: SubjectStatus
    missing_prerequisites: list[str]  # IDs of unmet prerequisites


@dataclass
class TermGroup:
    """Subjects of one term with completion counts."""
    term: Term
    cards: list[SubjectCard]
    completed_count: int
    total_count: int


class CurriculumTracker:
    """
    Track one template's progress.

    Every call reads a fresh (template, completed) snapshot from the store and
    recomputes the partition from scratch; nothing is cached between calls.
    """

    def __init__(self, store: TemplateStore, template_id: str):
        """
        Initialize tracker.

        Args:
            store: TemplateStore holding the template and its completion set
            template_id: Template to track

        Raises:
            NotFoundError: template_id is not in the store
        """
        self.store = store
        self.template_id = template_id
        store.load(template_id)

    # -------------------------------------------------------------------------
    # Snapshot
    # -------------------------------------------------------------------------

    @property
    def template(self) -> Template:
        return self.store.load(self.template_id)

    @property
    def completed(self) -> set[str]:
        return self.store.load_completion_set(self.template_id)

    def partition(self) -> EligibilityPartition:
        """Validate the template, then resolve the eligibility partition."""
        template = validate_template(self.template)
        return resolve(template.subjects, self.completed)

    def report(self, threshold: float = MILESTONE_THRESHOLD) -> ProgressReport:
        template = validate_template(self.template)
        return build_report(template.subjects, self.completed, threshold)

    # -------------------------------------------------------------------------
    # Completion
    # -------------------------------------------------------------------------

    def toggle_completion(self, subject_id: str) -> bool:
        """
        Mark an eligible subject complete, or unmark a completed one.

        Returns False (and changes nothing) for a locked subject.

        Raises:
            NotFoundError: subject_id is not in the template
        """
        template = validate_template(self.template)
        if template.get_subject(subject_id) is None:
            raise NotFoundError("Subject", subject_id)

        completed = self.completed
        status = resolve(template.subjects, completed).status_of(subject_id)
        if status == SubjectStatus.LOCKED:
            return False

        if subject_id in completed:
            completed.discard(subject_id)
        else:
            completed.add(subject_id)
        self.store.save_completion_set(self.template_id, completed)
        logger.debug(f"Toggled {subject_id} in template {self.template_id}")
        return True

    def clear_all(self):
        """Forget every completion; the template itself is untouched."""
        self.store.clear_completion_set(self.template_id)
        logger.info(f"Cleared completion state of template {self.template_id}")

    # -------------------------------------------------------------------------
    # Template editing
    # -------------------------------------------------------------------------

    def add_subject(
        self,
        name: str,
        category: str,
        term: Any,
        prerequisites: Iterable[str] = (),
        subject_id: Optional[str] = None,
    ) -> Subject:
        """Add a subject and persist the template. Returns the new subject."""
        updated = editor.add_subject(
            self.template, name, category, term, prerequisites, subject_id
        )
        self.store.save(updated)
        return updated.subjects[-1]

    def remove_subject(self, subject_id: str):
        """Remove a subject from the template and from the completion set."""
        updated = editor.remove_subject(self.template, subject_id)
        self.store.save(updated)

        completed = self.completed
        if subject_id in completed:
            completed.discard(subject_id)
            self.store.save_completion_set(self.template_id, completed)

    # -------------------------------------------------------------------------
    # Term board
    # -------------------------------------------------------------------------

    def term_board(self) -> list[TermGroup]:
        """
        Subjects grouped by term label, groups sorted by numeric term value.

        Each subject carries its status and the prerequisites it still misses.
        """
        template = validate_template(self.template)
        partition = resolve(template.subjects, self.completed)

        groups: dict[str, TermGroup] = {}
        for subject in template.subjects:
            group = groups.get(subject.term.label)
            if group is None:
                group = TermGroup(term=subject.term, cards=[], completed_count=0, total_count=0)
                groups[subject.term.label] = group

            status = partition.status_of(subject.id)
            group.cards.append(SubjectCard(
                subject=subject,
                status=status,
                missing_prerequisites=partition.missing_prerequisites(subject.id),
            ))
            group.total_count += 1
            if status == SubjectStatus.COMPLETED:
                group.completed_count += 1

        return sorted(groups.values(), key=lambda g: g.term.value)
