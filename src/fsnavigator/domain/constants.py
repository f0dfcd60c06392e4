from __future__ import annotations

"""
Domain Constants.

Centralizes the reserved symbols of the namespace tree (separator, special
segments, root display name) and application-wide metadata.
"""

APP_NAME = "FSNavigator"
APP_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# PATH GRAMMAR
# -----------------------------------------------------------------------------
PATH_SEPARATOR = "/"
ROOT_NAME = "/"
PARENT_SEGMENT = ".."
CURRENT_SEGMENT = "."

# Suffix appended to directory names in listings
DIRECTORY_MARKER = "/"

DEFAULT_PROMPT_PREFIX = "fs"
