"""
Pensum Store - Durable storage for templates and completion sets.

This module provides:
- TemplateStore: the storage contract the planner relies on
- MemoryTemplateStore: in-process dict-backed store
- SQLiteTemplateStore: SQLite-backed store
"""

from .base import TemplateStore
from .memory import MemoryTemplateStore
from .sqlite import SQLiteTemplateStore

__all__ = [
    "TemplateStore",
    "MemoryTemplateStore",
    "SQLiteTemplateStore",
]
