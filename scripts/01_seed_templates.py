#!/usr/bin/env python3
"""
01_seed_templates.py - Validate curriculum templates and load them into the store.

Bundled templates are copied for a user (fresh id); YAML files passed with
--file are stored under their own id. Every integrity issue is logged and
nothing is saved for a template that has any.

Usage:
  python scripts/01_seed_templates.py --user alice
  python scripts/01_seed_templates.py --user alice --file my_program.yaml --db data/pensum.db
"""

import argparse
import logging
import os
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

load_dotenv(PROJECT_ROOT / ".env")

from pensum.config import DEFAULT_STORE_DB, DEFAULT_TEMPLATE_NAME, STORE_DB_ENV_VAR
from pensum.planner import find_integrity_issues
from pensum.schemas import Template
from pensum.store import SQLiteTemplateStore
from pensum.utils import create_default_template, get_available_templates, load_template_file

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def check_template(template: Template) -> bool:
    """Log every integrity issue of a template. Returns True when it is clean."""
    issues = find_integrity_issues(template)
    if not issues:
        return True

    logger.warning(f"Template {template.id} has {len(issues)} integrity issues:")
    for issue in issues[:10]:
        logger.warning(f"  - {issue}")
    if len(issues) > 10:
        logger.warning(f"  ... and {len(issues) - 10} more")
    return False


def main():
    parser = argparse.ArgumentParser(
        description="Validate curriculum templates and save them into the store",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--user",
        required=True,
        help="Owner of the seeded templates"
    )
    parser.add_argument(
        "--template",
        action="append",
        default=None,
        help=f"Bundled template name (repeatable, default: {DEFAULT_TEMPLATE_NAME})"
    )
    parser.add_argument(
        "--file",
        type=Path,
        action="append",
        default=[],
        help="Path to a template YAML file (repeatable)"
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=Path(os.environ.get(STORE_DB_ENV_VAR, DEFAULT_STORE_DB)),
        help="Store database path"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List bundled templates and exit"
    )

    args = parser.parse_args()

    if args.list:
        for name in get_available_templates():
            print(name)
        return

    templates: list[Template] = []
    names = args.template or ([] if args.file else [DEFAULT_TEMPLATE_NAME])
    for name in names:
        logger.info(f"Loading bundled template {name}...")
        templates.append(create_default_template(args.user, name))
    for path in args.file:
        logger.info(f"Loading {path}...")
        template = load_template_file(path)
        templates.append(template.model_copy(update={"user_id": args.user}))

    store = SQLiteTemplateStore(args.db)
    saved = 0
    seen: set[str] = set()
    for template in templates:
        if template.id in seen:
            logger.error(f"Duplicate template id {template.id}, not saved")
            continue
        seen.add(template.id)
        logger.info(f"Checking {template.id} ({len(template.subjects)} subjects)...")
        if not check_template(template):
            continue
        store.save(template)
        saved += 1
        logger.info(f"  Saved {template.id}")

    logger.info(f"Seeded {saved}/{len(templates)} templates into {args.db}")
    if saved < len(templates):
        sys.exit(1)


if __name__ == "__main__":
    main()
