"""
Progress schemas for Pensum.

Defines Pydantic models for the statistics derived from a completion set:
- Subject status (completed / eligible / locked)
- Per-category and per-term completion stats
- Overall progress and the next milestone
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SubjectStatus(str, Enum):
    COMPLETED = "completed"
    ELIGIBLE = "eligible"   # prerequisites met, can be taken
    LOCKED = "locked"       # at least one prerequisite missing


class CategoryStats(BaseModel):
    category: str
    total: int = Field(..., ge=1)
    completed: int = Field(..., ge=0)
    percentage: int = Field(..., ge=0, le=100)


class TermStats(BaseModel):
    term: str  # exact term label, used as group key
    value: float
    is_intermediate: bool = False
    total: int = Field(..., ge=1)
    completed: int = Field(..., ge=0)
    percentage: int = Field(..., ge=0, le=100)


class OverallStats(BaseModel):
    total_subjects: int = Field(..., ge=0)
    total_completed: int = Field(..., ge=0)
    overall_percentage: int = Field(..., ge=0, le=100)


class Milestone(BaseModel):
    """Completions still needed to reach a share of the curriculum."""
    threshold: float = Field(..., gt=0.0, le=1.0)
    remaining: int = Field(..., ge=0)
    reached: bool


class ProgressReport(BaseModel):
    """Everything a progress dashboard shows for one template."""
    overall: OverallStats
    categories: list[CategoryStats]
    terms: list[TermStats]
    best_category: Optional[CategoryStats] = None
    next_milestone: Milestone
    completed_count: int = 0
    eligible_count: int = 0
    locked_count: int = 0
