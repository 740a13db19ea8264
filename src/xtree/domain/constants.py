from __future__ import annotations

"""
Domain Constants.

Provides centralized access to application identity, traversal defaults,
rendering glyphs and the user-facing sentinel messages.
"""

APP_NAME = "xtree"
APP_VERSION = "0.1.0"
APP_DESCRIPTION = "A lightweight directory tree generator."
CURRENT_CONFIG_VERSION = "1.0.0"

DEFAULT_DEPTH = 3
DEFAULT_DIRECTORY = "."

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------
BRANCH_TEE = "├── "
BRANCH_CORNER = "└── "
PREFIX_PIPE = "│   "
PREFIX_BLANK = "    "

HIGHLIGHT_START = "\x1b[91m"
HIGHLIGHT_RESET = "\x1b[0m"

# -----------------------------------------------------------------------------
# MESSAGES
# -----------------------------------------------------------------------------
NO_MATCH_MESSAGE = "No directories match the search term."
