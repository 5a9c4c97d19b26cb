"""
Pensum - Curriculum progress tracking over a prerequisite graph.

A curriculum template is a DAG of subjects. Given the set of subjects a
student has completed, Pensum tells which subjects are eligible, which are
still locked, and how far along the student is by category and by term.

PACKAGE STRUCTURE
-----------------

pensum/
├── config.py            # Configuration constants
├── errors.py            # CycleError, DanglingReferenceError, DuplicateIdError, NotFoundError
├── schemas/             # Pydantic models (Term, Subject, Template, progress stats)
├── planner/             # validation, resolver, aggregator, editor, tracker
├── store/               # TemplateStore contract + memory and SQLite stores
├── utils/               # YAML template loader
└── data/templates/      # Bundled default curricula

USAGE
-----

    from pensum import CurriculumTracker, SQLiteTemplateStore, create_default_template

    store = SQLiteTemplateStore()
    template = create_default_template("student-1")
    store.save(template)

    tracker = CurriculumTracker(store, template.id)
    tracker.toggle_completion("prog1")
    print(tracker.partition().eligible)
    print(tracker.report().overall.overall_percentage)
"""

__version__ = "1.0.0"

from .errors import (
    CurriculumError,
    CycleError,
    DanglingReferenceError,
    DuplicateIdError,
    NotFoundError,
)

from .schemas import (
    Term,
    Subject,
    Template,
    SubjectStatus,
    CategoryStats,
    TermStats,
    OverallStats,
    Milestone,
    ProgressReport,
)

from .planner import (
    validate_template,
    find_integrity_issues,
    topological_order,
    EligibilityPartition,
    resolve,
    build_report,
    create_template,
    add_subject,
    remove_subject,
    CurriculumTracker,
)

from .store import (
    TemplateStore,
    MemoryTemplateStore,
    SQLiteTemplateStore,
)

from .utils import create_default_template, load_template_file

__all__ = [
    "__version__",
    # Errors
    "CurriculumError",
    "CycleError",
    "DanglingReferenceError",
    "DuplicateIdError",
    "NotFoundError",
    # Schemas
    "Term",
    "Subject",
    "Template",
    "SubjectStatus",
    "CategoryStats",
    "TermStats",
    "OverallStats",
    "Milestone",
    "ProgressReport",
    # Planner
    "validate_template",
    "find_integrity_issues",
    "topological_order",
    "EligibilityPartition",
    "resolve",
    "build_report",
    "create_template",
    "add_subject",
    "remove_subject",
    "CurriculumTracker",
    # Store
    "TemplateStore",
    "MemoryTemplateStore",
    "SQLiteTemplateStore",
    # Utils
    "create_default_template",
    "load_template_file",
]
