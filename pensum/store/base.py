"""
TemplateStore contract.

The planner never reaches into storage on its own: callers load a template
and its completion set through a store, compute, then write back.
Any key-value capable backend satisfies this protocol.
"""

from typing import Iterable, Protocol

from pensum.schemas import Template


class TemplateStore(Protocol):
    """Durable storage for templates and their completion sets."""

    def load(self, template_id: str) -> Template:
        """Raises NotFoundError if the template does not exist."""
        ...

    def save(self, template: Template) -> None:
        ...

    def delete(self, template_id: str) -> None:
        """Delete a template together with its completion set."""
        ...

    def list_templates(self, user_id: str) -> list[Template]:
        ...

    def load_completion_set(self, template_id: str) -> set[str]:
        """Empty set when nothing has been completed yet."""
        ...

    def save_completion_set(self, template_id: str, subject_ids: Iterable[str]) -> None:
        ...

    def clear_completion_set(self, template_id: str) -> None:
        ...
