#!/usr/bin/env python3
"""
02_export_progress.py - Export a template's progress report.

Writes per-term and per-category tables as CSV plus a JSON summary with the
overall numbers and the current eligible/locked subjects.

Usage:
  python scripts/02_export_progress.py --template-id default-alice-1700000000000
  python scripts/02_export_progress.py --template-id abc123 --output-dir data/reports
"""

import argparse
import json
import logging
import os
import sys
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import pandas as pd
from dotenv import load_dotenv

load_dotenv(PROJECT_ROOT / ".env")

from pensum.config import DEFAULT_STORE_DB, STORE_DB_ENV_VAR
from pensum.errors import CurriculumError
from pensum.planner import CurriculumTracker
from pensum.store import SQLiteTemplateStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Export progress statistics for a stored template",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--template-id",
        required=True,
        help="Template to report on"
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=Path(os.environ.get(STORE_DB_ENV_VAR, DEFAULT_STORE_DB)),
        help="Store database path"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=PROJECT_ROOT / "data" / "reports",
        help="Directory for CSV and JSON output"
    )

    args = parser.parse_args()

    store = SQLiteTemplateStore(args.db)
    try:
        tracker = CurriculumTracker(store, args.template_id)
        template = tracker.template
        report = tracker.report()
        partition = tracker.partition()
    except CurriculumError as e:
        logger.error(f"Cannot build report: {e}")
        sys.exit(1)

    args.output_dir.mkdir(parents=True, exist_ok=True)

    terms_df = pd.DataFrame([t.model_dump() for t in report.terms])
    categories_df = pd.DataFrame([c.model_dump() for c in report.categories])

    terms_path = args.output_dir / f"{template.id}_terms.csv"
    categories_path = args.output_dir / f"{template.id}_categories.csv"
    terms_df.to_csv(terms_path, index=False)
    categories_df.to_csv(categories_path, index=False)
    logger.info(f"Saved term stats to: {terms_path}")
    logger.info(f"Saved category stats to: {categories_path}")

    summary = {
        "exported_at": datetime.now().isoformat(),
        "template_id": template.id,
        "program_name": template.program_name,
        "institution_name": template.institution_name,
        **report.model_dump(exclude={"categories", "terms"}),
        "eligible": [sid for sid in template.subject_ids if sid in partition.eligible],
        "locked": [sid for sid in template.subject_ids if sid in partition.locked],
    }
    summary_path = args.output_dir / f"{template.id}_summary.json"
    with open(summary_path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2, ensure_ascii=False)
    logger.info(f"Saved summary to: {summary_path}")

    # Summary
    logger.info("\n" + "=" * 50)
    logger.info("PROGRESS")
    logger.info("=" * 50)
    logger.info(f"Completed: {report.overall.total_completed}/{report.overall.total_subjects} "
                f"({report.overall.overall_percentage}%)")
    logger.info(f"Eligible: {report.eligible_count}  Locked: {report.locked_count}")
    if report.best_category:
        logger.info(f"Best category: {report.best_category.category} "
                    f"({report.best_category.percentage}%)")
    if report.next_milestone.reached:
        logger.info(f"{report.next_milestone.threshold:.0%} milestone reached")
    else:
        logger.info(f"{report.next_milestone.remaining} subjects to the next milestone")


if __name__ == "__main__":
    main()
