"""
SQLiteTemplateStore - Persist templates and completion sets in ~/.pensum/pensum.db.

Templates are stored as JSON documents. Completion state lives in its own
table so clearing it never rewrites the template.
"""

import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from pensum.config import DEFAULT_STORE_DB
from pensum.errors import NotFoundError
from pensum.schemas import Template

logger = logging.getLogger(__name__)


class SQLiteTemplateStore:
    """
    TemplateStore backed by SQLite.

    Each method opens its own connection and commits its own transaction,
    so writes to one template are serialized by SQLite.
    """

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize the store.

        Args:
            db_path: Path to the database (default: ~/.pensum/pensum.db)
        """
        self.db_path = Path(db_path) if db_path else DEFAULT_STORE_DB
        self._ensure_database()

    def _ensure_database(self):
        """Create database and tables if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(self.db_path))
        try:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS templates (
                    id TEXT PRIMARY KEY,
                    user_id TEXT NOT NULL,
                    data JSON NOT NULL,
                    created_at TEXT NOT NULL,
                    saved_at TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS completed_subjects (
                    template_id TEXT NOT NULL,
                    subject_id TEXT NOT NULL,
                    PRIMARY KEY (template_id, subject_id)
                );

                CREATE INDEX IF NOT EXISTS idx_templates_user
                ON templates(user_id);
            """)
            conn.commit()
        finally:
            conn.close()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection."""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def _require(self, conn: sqlite3.Connection, template_id: str):
        row = conn.execute(
            "SELECT 1 FROM templates WHERE id = ?", (template_id,)
        ).fetchone()
        if not row:
            raise NotFoundError("Template", template_id)

    # -------------------------------------------------------------------------
    # Templates
    # -------------------------------------------------------------------------

    def load(self, template_id: str) -> Template:
        conn = self._get_connection()
        try:
            row = conn.execute(
                "SELECT data FROM templates WHERE id = ?", (template_id,)
            ).fetchone()
            if not row:
                raise NotFoundError("Template", template_id)
            return Template.model_validate_json(row["data"])
        finally:
            conn.close()

    def save(self, template: Template) -> None:
        conn = self._get_connection()
        try:
            conn.execute(
                """INSERT INTO templates (id, user_id, data, created_at, saved_at)
                   VALUES (?, ?, ?, ?, ?)
                   ON CONFLICT(id) DO UPDATE SET
                     user_id = excluded.user_id,
                     data = excluded.data,
                     saved_at = excluded.saved_at""",
                (
                    template.id,
                    template.user_id,
                    template.model_dump_json(),
                    template.created_at.isoformat(),
                    datetime.now().isoformat(),
                )
            )
            conn.commit()
        finally:
            conn.close()
        logger.debug(f"Saved template {template.id}")

    def delete(self, template_id: str) -> None:
        conn = self._get_connection()
        try:
            self._require(conn, template_id)
            conn.execute(
                "DELETE FROM completed_subjects WHERE template_id = ?", (template_id,)
            )
            conn.execute("DELETE FROM templates WHERE id = ?", (template_id,))
            conn.commit()
        finally:
            conn.close()
        logger.info(f"Deleted template {template_id}")

    def list_templates(self, user_id: str) -> list[Template]:
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                """SELECT data FROM templates
                   WHERE user_id = ?
                   ORDER BY created_at, id""",
                (user_id,)
            )
            return [Template.model_validate_json(row["data"]) for row in cursor.fetchall()]
        finally:
            conn.close()

    # -------------------------------------------------------------------------
    # Completion state
    # -------------------------------------------------------------------------

    def load_completion_set(self, template_id: str) -> set[str]:
        conn = self._get_connection()
        try:
            self._require(conn, template_id)
            cursor = conn.execute(
                "SELECT subject_id FROM completed_subjects WHERE template_id = ?",
                (template_id,)
            )
            return {row["subject_id"] for row in cursor.fetchall()}
        finally:
            conn.close()

    def save_completion_set(self, template_id: str, subject_ids: Iterable[str]) -> None:
        conn = self._get_connection()
        try:
            self._require(conn, template_id)
            conn.execute(
                "DELETE FROM completed_subjects WHERE template_id = ?", (template_id,)
            )
            conn.executemany(
                "INSERT INTO completed_subjects (template_id, subject_id) VALUES (?, ?)",
                [(template_id, sid) for sid in set(subject_ids)]
            )
            conn.commit()
        finally:
            conn.close()

    def clear_completion_set(self, template_id: str) -> None:
        conn = self._get_connection()
        try:
            self._require(conn, template_id)
            conn.execute(
                "DELETE FROM completed_subjects WHERE template_id = ?", (template_id,)
            )
            conn.commit()
        finally:
            conn.close()
