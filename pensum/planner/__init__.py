"""
Pensum Planner - The unlock engine and the operations built on it.

This module provides:
- validate_template: structural checks (unique ids, known prerequisites, no cycles)
- resolve: completed / eligible / locked partition
- build_report: per-category, per-term and overall progress
- editor: template editing operations
- CurriculumTracker: per-template facade for the presentation layer
"""

from .validation import (
    build_prerequisite_graph,
    find_integrity_issues,
    validate_template,
    validate,
    topological_order,
)

from .resolver import (
    EligibilityPartition,
    resolve,
)

from .aggregator import (
    percentage,
    category_stats,
    term_stats,
    overall_stats,
    best_category,
    next_milestone,
    build_report,
)

from .editor import (
    create_template,
    add_subject,
    remove_subject,
)

from .tracker import (
    CurriculumTracker,
    SubjectCard,
    TermGroup,
)

__all__ = [
    # Validation
    "build_prerequisite_graph",
    "find_integrity_issues",
    "validate_template",
    "validate",
    "topological_order",
    # Resolver
    "EligibilityPartition",
    "resolve",
    # Aggregator
    "percentage",
    "category_stats",
    "term_stats",
    "overall_stats",
    "best_category",
    "next_milestone",
    "build_report",
    # Editor
    "create_template",
    "add_subject",
    "remove_subject",
    # Tracker
    "CurriculumTracker",
    "SubjectCard",
    "TermGroup",
]
