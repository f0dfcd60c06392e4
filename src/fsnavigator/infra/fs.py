from __future__ import annotations

"""
Host FileSystem Infrastructure Layer.

Resolves the OS-specific directory used for application data on the host
machine (diagnostic logs). Unrelated to the simulated namespace tree.
"""

import os

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "FSNavigator"
UNIX_APP_DIR_NAME = ".fsnavigator"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for application data.

    Standards:
    - Windows: %LOCALAPPDATA%/FSNavigator
    - Linux/Mac: ~/.fsnavigator

    The directory is not created here; handlers create parents on demand.

    Returns:
        str: Absolute path to the application data directory.
    """
    path = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)
