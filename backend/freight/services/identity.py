"""Identity Service — sign-up and sign-in over the credential store and token issuer.

Invariants:
    - Missing fields are rejected before any store access
    - sign_up: email guard, then bcrypt hash, then guarded audited insert;
      Conflict on reuse
    - sign_in: unknown email and wrong password yield the SAME Unauthorized message
    - sign_in runs exactly one bcrypt check whether or not the email is known
    - A token is issued only after verification succeeded

Design Decisions:
    - Email checked before hashing, so a duplicate sign-up never pays the bcrypt cost;
      create_unique_checked repeats the guard and keeps the unique-constraint backstop
    - Hashing/store failures logged with context, surfaced as InternalError with the
      generic sign-up/sign-in message (no exception text reaches the client)
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from freight.core.domain_types import (
    EntityKind, IdentityId, IdentitySummary, SignInResult,
)
from freight.core.errors import PasswordHashingError
from freight.core.outcome import Outcome
from freight.core.passwords import (
    DEFAULT_ROUNDS, MAX_PASSWORD_BYTES, dummy_hash, hash_password,
    password_too_long, verify_password,
)
from freight.core.tokens import TokenIssuer
from freight.models import User
from freight.services.persistence import create_unique_checked, fail_internal
from freight.services.uniqueness import CONFLICT_MESSAGES, find_conflict

logger = logging.getLogger(__name__)

SIGN_UP_FAILED = "An error occurred during sign-up."
SIGN_IN_FAILED = "An error occurred during sign-in."
INVALID_CREDENTIALS = "Invalid email or password."


def _blank(*values: str | None) -> bool:
    return any(v is None or not v.strip() for v in values)


class IdentityService:
    """Credential lifecycle for user accounts."""

    def __init__(
        self,
        session: AsyncSession,
        issuer: TokenIssuer,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
    ):
        self.session = session
        self.issuer = issuer
        self.bcrypt_rounds = bcrypt_rounds

    async def sign_up(
        self, full_name: str | None, email: str | None, password: str | None,
    ) -> Outcome[IdentitySummary]:
        if _blank(full_name, email, password):
            return Outcome.validation_failure("Invalid sign-up request data.")
        if password_too_long(password):
            return Outcome.validation_failure(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes.",
            )

        try:
            taken = await find_conflict(self.session, EntityKind.USER, {"email": email})
        except SQLAlchemyError:
            return await fail_internal(self.session, "sign_up", SIGN_UP_FAILED)
        if taken is not None:
            logger.info(
                "sign_up: email already registered",
                extra={"operation": "sign_up"},
            )
            return Outcome.conflict(CONFLICT_MESSAGES[EntityKind.USER])

        try:
            password_hash = hash_password(password, rounds=self.bcrypt_rounds)
        except PasswordHashingError:
            logger.exception(
                "sign_up: password hashing failed",
                extra={"operation": "sign_up"},
            )
            return Outcome.internal_error(SIGN_UP_FAILED)

        created = await create_unique_checked(
            self.session,
            EntityKind.USER,
            {"full_name": full_name, "email": email, "password_hash": password_hash},
            failure_message=SIGN_UP_FAILED,
        )
        if not created.ok:
            return Outcome(created.kind, created.message)

        user: User = created.data
        logger.info(
            "User signed up",
            extra={"user_id": user.id, "operation": "sign_up"},
        )
        return Outcome.success(
            IdentitySummary(
                id=IdentityId(user.id), full_name=user.full_name, email=user.email,
            ),
            "User signed up successfully.",
        )

    async def sign_in(
        self, email: str | None, password: str | None,
    ) -> Outcome[SignInResult]:
        if _blank(email, password):
            return Outcome.validation_failure("Invalid sign-in request data.")

        try:
            user = (
                await self.session.scalars(select(User).where(User.email == email))
            ).first()
        except SQLAlchemyError:
            return await fail_internal(self.session, "sign_in", SIGN_IN_FAILED)

        if user is None:
            try:
                verify_password(password, dummy_hash(self.bcrypt_rounds))
            except PasswordHashingError:
                logger.exception(
                    "sign_in: dummy hash unavailable",
                    extra={"operation": "sign_in"},
                )
                return Outcome.internal_error(SIGN_IN_FAILED)
        if user is None or not verify_password(password, user.password_hash):
            logger.info(
                "Sign-in rejected",
                extra={"operation": "sign_in"},
            )
            return Outcome.unauthorized(INVALID_CREDENTIALS)

        issued = self.issuer.issue(user)
        logger.info(
            "User signed in",
            extra={"user_id": user.id, "operation": "sign_in"},
        )
        return Outcome.success(
            SignInResult(
                claims=issued.claims, token=issued.token, expires_at=issued.expires_at,
            ),
            "User signed in successfully.",
        )
