from __future__ import annotations

"""
Operation Result Models.

Defines the discriminated result objects returned by the namespace
operations. Core errors never raise: they are reported to the caller
through these values and rendered by the interface layer.
"""

from dataclasses import dataclass
from enum import Enum

from fsnavigator.domain.constants import DIRECTORY_MARKER

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

class OperationStatus(str, Enum):
    """Outcome taxonomy for mutating and navigation operations."""
    OK = "ok"
    NAME_INVALID = "name_invalid"
    NAME_COLLISION = "name_collision"
    INVALID_PATH = "invalid_path"


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a single namespace operation.

    Attributes:
        status: Discriminant describing success or the failure class.
        subject: The name or path the operation was invoked with.
    """
    status: OperationStatus
    subject: str = ""

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.OK


@dataclass(frozen=True)
class ListingEntry:
    """A direct child of the current directory as reported by a listing."""
    name: str
    is_directory: bool

    def display(self) -> str:
        return f"{self.name}{DIRECTORY_MARKER}" if self.is_directory else self.name

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def success(subject: str = "") -> OperationResult:
    return OperationResult(OperationStatus.OK, subject)


def failure(status: OperationStatus, subject: str) -> OperationResult:
    return OperationResult(status, subject)
