"""
MemoryTemplateStore - dict-backed TemplateStore.

Useful for tests and for single-session use where nothing has to survive
the process. Values are copied on the way in and out so callers cannot
mutate stored state behind the store's back.
"""

import logging
from typing import Iterable

from pensum.errors import NotFoundError
from pensum.schemas import Template

logger = logging.getLogger(__name__)


class MemoryTemplateStore:
    """In-process key-value store for templates and completion sets."""

    def __init__(self):
        self._templates: dict[str, Template] = {}
        self._completed: dict[str, set[str]] = {}

    def _require(self, template_id: str):
        if template_id not in self._templates:
            raise NotFoundError("Template", template_id)

    # -------------------------------------------------------------------------
    # Templates
    # -------------------------------------------------------------------------

    def load(self, template_id: str) -> Template:
        self._require(template_id)
        return self._templates[template_id].model_copy(deep=True)

    def save(self, template: Template) -> None:
        self._templates[template.id] = template.model_copy(deep=True)
        logger.debug(f"Saved template {template.id}")

    def delete(self, template_id: str) -> None:
        self._require(template_id)
        del self._templates[template_id]
        self._completed.pop(template_id, None)
        logger.info(f"Deleted template {template_id}")

    def list_templates(self, user_id: str) -> list[Template]:
        return [
            t.model_copy(deep=True)
            for t in self._templates.values()
            if t.user_id == user_id
        ]

    # -------------------------------------------------------------------------
    # Completion state
    # -------------------------------------------------------------------------

    def load_completion_set(self, template_id: str) -> set[str]:
        self._require(template_id)
        return set(self._completed.get(template_id, set()))

    def save_completion_set(self, template_id: str, subject_ids: Iterable[str]) -> None:
        self._require(template_id)
        self._completed[template_id] = set(subject_ids)

    def clear_completion_set(self, template_id: str) -> None:
        self._require(template_id)
        self._completed.pop(template_id, None)
