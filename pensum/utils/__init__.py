"""Pensum utilities."""

from .template_loader import (
    load_template_data,
    load_template_file,
    get_available_templates,
    create_default_template,
)

__all__ = [
    "load_template_data",
    "load_template_file",
    "get_available_templates",
    "create_default_template",
]
