from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared namespace fixtures used across unit tests.
3. Logging teardown so queue listeners never outlive a test.
"""

import os
import sys
from typing import Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from fsnavigator.core.services.namespace import Namespace  # noqa: E402
from fsnavigator.core.services.seed import populate_demo  # noqa: E402
from fsnavigator.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def namespace() -> Namespace:
    """Return an empty namespace positioned at the root."""
    return Namespace()


@pytest.fixture
def demo_namespace() -> Namespace:
    """
    Return a namespace populated with the startup sample tree.

    Structure:
    /home
      /user
        /Documents
          report.docx
        /Downloads
        profile.txt
      readme.txt
    """
    ns = Namespace()
    populate_demo(ns)
    return ns


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Detach application log handlers after each test."""
    yield
    shutdown_logging()
