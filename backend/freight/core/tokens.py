"""Token Issuer — signs stateless HS256 session tokens carrying identity claims.

Invariants:
    - Payload is exactly {sub, email, name, exp}; exp = issuance + 7200 seconds
    - An empty signing secret fails at construction (startup), never per request
    - issue() never looks at passwords: callers authenticate first
    - No revoke/refresh: validity lives entirely in signature + exp

Design Decisions:
    - PyJWT compact serialization: header.payload.signature, interoperable with
      any JWT bearer middleware holding the same secret
    - sub encoded as a string (RFC 7519 StringOrURI); decode() converts it back to int
    - decode() exists for the HTTP auth dependency only
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol

import jwt

from freight.core.domain_types import ClaimSet, IdentityId
from freight.core.errors import ConfigurationError, TokenInvalidError

TOKEN_LIFETIME_SECONDS = 7200
DEFAULT_ALGORITHM = "HS256"


class IdentityLike(Protocol):
    """Structural contract for anything a token can be issued for (ORM User, test stubs)."""
    id: int
    email: str
    full_name: str


@dataclass(frozen=True)
class IssuedToken:
    token: str
    claims: ClaimSet
    expires_at: datetime


def claims_for(identity: IdentityLike) -> ClaimSet:
    """Derive a fresh claim set from an authenticated identity."""
    return ClaimSet(
        subject_id=IdentityId(identity.id),
        email=identity.email,
        display_name=identity.full_name,
    )


class TokenIssuer:
    """Issues and verifies session tokens with a server-held symmetric secret."""

    def __init__(self, secret: str, algorithm: str = DEFAULT_ALGORITHM):
        if not secret:
            raise ConfigurationError("JWT_SECRET")
        self._secret = secret
        self._algorithm = algorithm

    def issue(
        self, identity: IdentityLike, now: datetime | None = None,
    ) -> IssuedToken:
        issued_at = now or datetime.now(timezone.utc)
        exp = int(issued_at.timestamp()) + TOKEN_LIFETIME_SECONDS
        claims = claims_for(identity)
        payload = {
            "sub": str(claims.subject_id),
            "email": claims.email,
            "name": claims.display_name,
            "exp": exp,
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        return IssuedToken(
            token=token,
            claims=claims,
            expires_at=datetime.fromtimestamp(exp, tz=timezone.utc),
        )

    def decode(self, token: str) -> ClaimSet:
        """Verify signature and expiry, then rebuild the claim set."""
        try:
            payload = jwt.decode(
                token, self._secret, algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
            return ClaimSet(
                subject_id=IdentityId(int(payload["sub"])),
                email=payload.get("email", ""),
                display_name=payload.get("name", ""),
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenInvalidError("expired") from e
        except jwt.InvalidTokenError as e:
            raise TokenInvalidError(f"invalid: {e}") from e
        except ValueError as e:
            raise TokenInvalidError("subject is not an integer id") from e
