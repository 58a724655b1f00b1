"""User Routes — sign-up, sign-in, and the caller's own claims.

Invariants:
    - signUp/signIn are the only unauthenticated write endpoints
    - Responses never include the password hash
"""

from fastapi import APIRouter, Depends

from freight.api.deps import current_claims, get_identity_service
from freight.api.responses import render
from freight.core.domain_types import ClaimSet
from freight.core.outcome import Outcome
from freight.schemas.user import (
    ClaimsResponse, SignInResponse, UserSignInRequest, UserSignUpRequest,
    UserSignUpResponse,
)
from freight.services.identity import IdentityService

router = APIRouter(prefix="/api/user", tags=["user"])


def _claims_response(claims: ClaimSet) -> ClaimsResponse:
    return ClaimsResponse(
        id=claims.subject_id, email=claims.email, name=claims.display_name,
    )


@router.post("/signUp")
async def sign_up(
    body: UserSignUpRequest,
    service: IdentityService = Depends(get_identity_service),
):
    outcome = await service.sign_up(body.full_name, body.email, body.password)
    data = None
    if outcome.ok:
        summary = outcome.data
        data = UserSignUpResponse(
            id=summary.id, full_name=summary.full_name, email=summary.email,
        ).dump()
    return render(outcome, data)


@router.post("/signIn")
async def sign_in(
    body: UserSignInRequest,
    service: IdentityService = Depends(get_identity_service),
):
    outcome = await service.sign_in(body.email, body.password)
    data = None
    if outcome.ok:
        result = outcome.data
        data = SignInResponse(
            user=_claims_response(result.claims),
            token=result.token,
            expires_at=result.expires_at,
        ).dump()
    return render(outcome, data)


@router.get("/me")
async def me(claims: ClaimSet = Depends(current_claims)):
    """Claims of the authenticated caller."""
    return render(
        Outcome.success(claims, "User retrieved successfully."),
        _claims_response(claims).dump(),
    )
