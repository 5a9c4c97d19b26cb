"""
Error taxonomy for Pensum.

Structural failures (cycles, dangling references, duplicate ids) are raised
by template validation before the resolver ever runs. NotFoundError comes
from the stores and from editing operations that address a missing entity.
"""


class CurriculumError(Exception):
    """Base class for every error raised by pensum."""


class CycleError(CurriculumError):
    """The prerequisite graph contains a cycle."""

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        path = " -> ".join(cycle + cycle[:1])
        super().__init__(f"Prerequisite cycle detected: {path}")


class DanglingReferenceError(CurriculumError):
    """A subject lists a prerequisite id that is not in the template."""

    def __init__(self, subject_id: str, missing_id: str):
        self.subject_id = subject_id
        self.missing_id = missing_id
        super().__init__(
            f"Subject {subject_id} has missing prerequisite: {missing_id}"
        )


class DuplicateIdError(CurriculumError):
    """Two subjects in one template share an id."""

    def __init__(self, subject_id: str):
        self.subject_id = subject_id
        super().__init__(f"Duplicate subject id: {subject_id}")


class NotFoundError(CurriculumError, LookupError):
    """A template, its completion state or a subject does not exist."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} not found: {key}")
