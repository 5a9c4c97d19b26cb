"""
Configuration constants for Pensum.

Centralizes the defaults shared by the model, the planner and the stores.
"""

from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

PACKAGE_DIR = Path(__file__).parent
TEMPLATES_DIR = PACKAGE_DIR / "data" / "templates"
DEFAULT_TEMPLATE_NAME = "ort_systems_engineering"

# Completion state and templates live outside the project tree
DEFAULT_STORE_DIR = Path.home() / ".pensum"
DEFAULT_STORE_DB = DEFAULT_STORE_DIR / "pensum.db"

# Scripts read this variable (after loading .env) to point at another store
STORE_DB_ENV_VAR = "PENSUM_STORE_DB"


# =============================================================================
# TEMPLATE DEFAULTS
# =============================================================================

DEFAULT_TERM_COUNT = 8

# Subjects created without a category are grouped here
DEFAULT_CATEGORY = "general"

# Display palettes understood by the presentation layer
PALETTES = ("purpor", "blues", "greens", "warm")
DEFAULT_PALETTE = "purpor"


# =============================================================================
# PROGRESS
# =============================================================================

# "Next milestone" is the number of completions left to reach this share
MILESTONE_THRESHOLD = 0.5
