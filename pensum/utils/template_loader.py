"""
Template loader utility for Pensum.

Loads YAML curriculum templates from the data/templates/ directory.
"""

import uuid
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from pensum.config import DEFAULT_TEMPLATE_NAME, TEMPLATES_DIR
from pensum.schemas import Template


def load_template_data(name: str, templates_dir: Path | None = None) -> dict[str, Any]:
    """
    Load a raw template document by name.

    Args:
        name: Template name without .yaml extension (e.g., "ort_systems_engineering")
        templates_dir: Optional custom templates directory

    Returns:
        Dict with the parsed YAML document

    Raises:
        FileNotFoundError: If template file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    dir_path = templates_dir or TEMPLATES_DIR
    file_path = dir_path / f"{name}.yaml"

    if not file_path.exists():
        raise FileNotFoundError(f"Template file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_template_file(path: Path) -> Template:
    """
    Load and validate a template from a YAML file.

    Only field-level validation runs here; structural checks
    (cycles, dangling prerequisites) are left to validate_template.
    """
    with open(path, "r", encoding="utf-8") as f:
        return Template.model_validate(yaml.safe_load(f))


def get_available_templates(templates_dir: Path | None = None) -> list[str]:
    """
    List all bundled template names.

    Args:
        templates_dir: Optional custom templates directory

    Returns:
        Sorted list of template names (without .yaml extension)
    """
    dir_path = templates_dir or TEMPLATES_DIR
    if not dir_path.exists():
        return []
    return sorted(p.stem for p in dir_path.glob("*.yaml"))


def create_default_template(user_id: str, name: str = DEFAULT_TEMPLATE_NAME) -> Template:
    """
    Build a user's copy of a bundled template.

    The copy gets id "default-<user_id>-<timestamp>-<suffix>" and fresh
    timestamps. The random suffix keeps copies made in the same millisecond apart.
    """
    data = load_template_data(name)
    now = datetime.now()
    data.update(
        id=f"default-{user_id}-{int(now.timestamp() * 1000)}-{uuid.uuid4().hex[:6]}",
        user_id=user_id,
        created_at=now,
        updated_at=now,
    )
    return Template.model_validate(data)
