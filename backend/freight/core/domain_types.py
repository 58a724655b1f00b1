"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - IdentityId wraps the integer user primary key
    - EntityKind is the closed set of persisted business entities
    - ClaimSet is immutable: its shape is the token payload contract

Design Decisions:
    - NewType over a dataclass wrapper for the id: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log fields without custom encoders
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

IdentityId = NewType("IdentityId", int)


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """Persisted business entities; keys the uniqueness rules."""
    USER = "user"
    COMMODITY = "commodity"
    CARRIER = "carrier"


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class ClaimSet:
    """Named facts about an authenticated identity, carried in the session token."""
    subject_id: IdentityId
    email: str
    display_name: str


@dataclass(frozen=True)
class IdentitySummary:
    """What sign-up hands back; never includes the password hash."""
    id: IdentityId
    full_name: str
    email: str


@dataclass(frozen=True)
class SignInResult:
    claims: ClaimSet
    token: str
    expires_at: datetime
