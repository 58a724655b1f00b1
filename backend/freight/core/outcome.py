"""Outcome Envelope — the single result shape every core operation resolves to.

Invariants:
    - Exactly one OutcomeKind per result; data is set only for SUCCESS
    - The core never encodes a transport status (api/responses.py owns that mapping)
    - message is always human-readable and never carries exception detail

Design Decisions:
    - Frozen dataclass over exceptions for expected results: callers branch on .kind,
      nothing to forget to catch
    - to_envelope() keeps the {success, message, data} body the mobile clients already parse
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class OutcomeKind(str, Enum):
    """The closed set of results a core operation can produce."""
    SUCCESS = "success"
    VALIDATION_FAILURE = "validation_failure"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    kind: OutcomeKind
    message: str
    data: T | None = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @classmethod
    def success(cls, data: T, message: str = "OK") -> "Outcome[T]":
        return cls(OutcomeKind.SUCCESS, message, data)

    @classmethod
    def validation_failure(cls, message: str) -> "Outcome[T]":
        return cls(OutcomeKind.VALIDATION_FAILURE, message)

    @classmethod
    def conflict(cls, message: str) -> "Outcome[T]":
        return cls(OutcomeKind.CONFLICT, message)

    @classmethod
    def not_found(cls, message: str) -> "Outcome[T]":
        return cls(OutcomeKind.NOT_FOUND, message)

    @classmethod
    def unauthorized(cls, message: str) -> "Outcome[T]":
        return cls(OutcomeKind.UNAUTHORIZED, message)

    @classmethod
    def internal_error(cls, message: str) -> "Outcome[T]":
        return cls(OutcomeKind.INTERNAL_ERROR, message)

    def to_envelope(self, data: Any = None) -> dict:
        """Render as {success, message, data}.

        `data` is the serialized payload (e.g. a schema dump). self.data is never
        embedded: it may hold ORM rows that are not JSON-safe.
        """
        return {
            "success": self.ok,
            "message": self.message,
            "data": data if self.ok else None,
        }
