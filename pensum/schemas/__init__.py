"""
Pensum Schemas - Pydantic models for the curriculum tracker.

This module exports all schema classes for:
- Curriculum: terms, subjects, templates
- Progress: subject status and derived statistics
"""

# Curriculum schemas
from .curriculum import (
    Term,
    Subject,
    Template,
)

# Progress schemas
from .progress import (
    SubjectStatus,
    CategoryStats,
    TermStats,
    OverallStats,
    Milestone,
    ProgressReport,
)

__all__ = [
    # Curriculum
    'Term',
    'Subject',
    'Template',
    # Progress
    'SubjectStatus',
    'CategoryStats',
    'TermStats',
    'OverallStats',
    'Milestone',
    'ProgressReport',
]
