"""Result wrapper returned by calls to external collaborators.

Geocoding providers and the permit office store report what happened as an
``Outcome`` instead of raising, so callers decide on fallbacks by status.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class OutcomeStatus(str, Enum):
    """Status of a call to an external collaborator."""

    FOUND = "found"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Found value, empty answer or absorbed failure."""

    status: OutcomeStatus
    value: T | None = None
    error: str | None = None

    @classmethod
    def found(cls, value: T) -> "Outcome[T]":
        return cls(status=OutcomeStatus.FOUND, value=value)

    @classmethod
    def empty(cls) -> "Outcome[T]":
        return cls(status=OutcomeStatus.EMPTY)

    @classmethod
    def failed(cls, error: str) -> "Outcome[T]":
        return cls(status=OutcomeStatus.FAILED, error=error)

    @property
    def is_found(self) -> bool:
        return self.status is OutcomeStatus.FOUND
