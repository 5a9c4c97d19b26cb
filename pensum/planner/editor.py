"""
Template editing operations.

Every function returns a new Template and leaves its input untouched.
Completion state is not handled here; see CurriculumTracker.
"""

import logging
import uuid
from datetime import datetime
from typing import Any, Iterable, Optional

from pensum.config import DEFAULT_PALETTE, DEFAULT_TERM_COUNT
from pensum.errors import NotFoundError
from pensum.schemas import Subject, Template, Term

from .validation import validate_template

logger = logging.getLogger(__name__)


def new_id() -> str:
    return uuid.uuid4().hex[:12]


def create_template(
    user_id: str,
    institution_name: str,
    program_name: str,
    region: str = "",
    term_count: int = DEFAULT_TERM_COUNT,
    intermediate_terms: Iterable[Any] = (),
    palette: str = DEFAULT_PALETTE,
    template_id: Optional[str] = None,
) -> Template:
    """
    Create an empty template.

    Args:
        user_id: Owner of the template
        institution_name: e.g. "Universidad ORT Uruguay"
        program_name: e.g. "Systems Engineering"
        region: Country or region
        term_count: Number of ordinary terms
        intermediate_terms: Extra terms between ordinary ones, e.g. ["5.5"]
        palette: Display palette name
        template_id: Explicit id (generated when omitted)
    """
    now = datetime.now()
    return Template(
        id=template_id or new_id(),
        user_id=user_id,
        institution_name=institution_name,
        program_name=program_name,
        region=region,
        term_count=term_count,
        intermediate_terms=[Term.parse(t) for t in intermediate_terms],
        palette=palette,
        created_at=now,
        updated_at=now,
    )


def add_subject(
    template: Template,
    name: str,
    category: str,
    term: Any,
    prerequisites: Iterable[str] = (),
    subject_id: Optional[str] = None,
) -> Template:
    """
    Append a subject to a template.

    An unseen category is appended to template.categories. The result is
    validated, so a duplicate id or a dangling prerequisite is rejected.

    Raises:
        DuplicateIdError, DanglingReferenceError, CycleError
    """
    subject = Subject(
        id=subject_id or new_id(),
        name=name,
        category=category,
        term=term,
        prerequisites=list(prerequisites),
    )

    categories = list(template.categories)
    if subject.category not in categories:
        categories.append(subject.category)

    updated = template.model_copy(update={
        "subjects": [*template.subjects, subject],
        "categories": categories,
        "updated_at": datetime.now(),
    })
    validate_template(updated)

    logger.info(f"Added subject {subject.id} to template {template.id}")
    return updated


def remove_subject(template: Template, subject_id: str) -> Template:
    """
    Remove a subject and drop it from every other subject's prerequisites.

    Categories stay as they are.

    Raises:
        NotFoundError: no subject with that id
    """
    if template.get_subject(subject_id) is None:
        raise NotFoundError("Subject", subject_id)

    subjects = []
    for subject in template.subjects:
        if subject.id == subject_id:
            continue
        if subject_id in subject.prerequisites:
            subject = subject.model_copy(update={
                "prerequisites": [p for p in subject.prerequisites if p != subject_id],
            })
        subjects.append(subject)

    logger.info(f"Removed subject {subject_id} from template {template.id}")
    return template.model_copy(update={
        "subjects": subjects,
        "updated_at": datetime.now(),
    })
