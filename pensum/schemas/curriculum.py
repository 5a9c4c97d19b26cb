"""
Curriculum schemas for Pensum.

Defines Pydantic models for curriculum structure including:
- Terms (ordinary and intermediate curriculum periods)
- Subjects with prerequisite lists
- Templates (a user's curriculum definition)
"""

import math
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer, model_validator

from pensum.config import DEFAULT_CATEGORY, DEFAULT_PALETTE, DEFAULT_TERM_COUNT, PALETTES

# -----------------------------------------------------------------------------
# Terms
# -----------------------------------------------------------------------------


class Term(BaseModel):
    """
    A curriculum period.

    Keeps the exact label the term was written with ("5", "5.5") next to its
    numeric value. Ordering always uses the value; grouping uses the label.
    Serializes back to the bare label.
    """
    model_config = ConfigDict(frozen=True)

    label: str
    value: float

    @model_validator(mode='before')
    @classmethod
    def coerce_raw(cls, data: Any) -> Any:
        if isinstance(data, dict):
            if 'label' in data:
                return cls._parts(data['label'])
            return data
        return cls._parts(data)

    @staticmethod
    def _parts(raw: Any) -> dict:
        if isinstance(raw, Term):
            return {'label': raw.label, 'value': raw.value}
        if isinstance(raw, bool):
            raise ValueError(f'Invalid term: {raw!r}')
        if isinstance(raw, (int, float)):
            value = float(raw)
            if not math.isfinite(value):
                raise ValueError(f'Invalid term: {raw!r}')
            label = str(int(value)) if value.is_integer() else str(value)
            return {'label': label, 'value': value}
        if isinstance(raw, str):
            label = raw.strip()
            try:
                value = float(label)
            except ValueError:
                raise ValueError(f'Term must be numeric, got {raw!r}') from None
            if not math.isfinite(value):
                raise ValueError(f'Invalid term: {raw!r}')
            return {'label': label, 'value': value}
        raise ValueError(f'Unsupported term type: {type(raw).__name__}')

    @model_serializer
    def serialize(self) -> str:
        return self.label

    @classmethod
    def parse(cls, raw: Any) -> "Term":
        """Build a Term from an int, float, numeric string or Term."""
        if isinstance(raw, Term):
            return raw
        return cls.model_validate(raw)

    @property
    def is_intermediate(self) -> bool:
        """True for terms sitting between two ordinary terms (e.g. 5.5)."""
        return math.modf(self.value)[0] != 0.0

    @property
    def display_name(self) -> str:
        if self.is_intermediate:
            return f"Intermediate term {self.label}"
        return f"Term {self.label}"

    def __lt__(self, other: "Term") -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: "Term") -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: "Term") -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: "Term") -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.value >= other.value

    def __str__(self) -> str:
        return self.label


# -----------------------------------------------------------------------------
# Subjects
# -----------------------------------------------------------------------------


class Subject(BaseModel):
    """A unit of curriculum. Becomes eligible once all prerequisites are completed."""
    id: str = Field(..., min_length=1)
    name: str
    category: str = DEFAULT_CATEGORY  # aggregation tag only
    term: Term
    prerequisites: list[str] = []  # subject IDs

    @field_validator('category')
    @classmethod
    def category_not_blank(cls, v):
        return v.strip() or DEFAULT_CATEGORY

    @field_validator('prerequisites')
    @classmethod
    def prerequisites_unique(cls, v):
        return list(dict.fromkeys(v))


# -----------------------------------------------------------------------------
# Templates
# -----------------------------------------------------------------------------


class Template(BaseModel):
    """
    A curriculum definition owned by one user.

    Completion state is deliberately not stored here; see pensum.store.
    """
    id: str = Field(..., min_length=1)
    user_id: str

    # Descriptive metadata
    institution_name: str = ""
    program_name: str = ""
    region: str = ""
    term_count: int = Field(default=DEFAULT_TERM_COUNT, ge=1)
    intermediate_terms: list[Term] = []
    categories: list[str] = []
    palette: str = Field(default=DEFAULT_PALETTE, pattern=rf"^({'|'.join(PALETTES)})$")
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    subjects: list[Subject] = []

    @model_validator(mode='after')
    def categories_cover_subjects(self):
        """Categories are append-once in order of first appearance."""
        categories = list(dict.fromkeys(self.categories))
        for subject in self.subjects:
            if subject.category not in categories:
                categories.append(subject.category)
        object.__setattr__(self, 'categories', categories)
        return self

    @property
    def subject_ids(self) -> list[str]:
        return [s.id for s in self.subjects]

    def get_subject(self, subject_id: str) -> Optional[Subject]:
        for subject in self.subjects:
            if subject.id == subject_id:
                return subject
        return None

    def available_terms(self) -> list[Term]:
        """Ordinary terms 1..term_count plus intermediate terms, numerically sorted."""
        terms: dict[str, Term] = {}
        for i in range(1, self.term_count + 1):
            term = Term.parse(i)
            terms[term.label] = term
        for term in self.intermediate_terms:
            terms.setdefault(term.label, term)
        return sorted(terms.values(), key=lambda t: t.value)
