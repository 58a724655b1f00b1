"""Dependencies — token issuer, service factories, and the bearer-token guard.

Invariants:
    - The token issuer is built once per process from Settings (empty secret → startup failure)
    - current_claims raises TokenInvalidError (→ 401 envelope) for missing/invalid tokens

Design Decisions:
    - HTTPBearer(auto_error=False): the missing-header case goes through the same
      TokenInvalidError path as a bad signature, so every 401 has one shape
"""

from functools import lru_cache

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from freight.config import get_settings
from freight.core.domain_types import ClaimSet
from freight.core.errors import TokenInvalidError
from freight.core.tokens import TokenIssuer
from freight.infrastructure.database import get_db
from freight.services.carriers import CarrierService
from freight.services.commodities import CommodityService
from freight.services.identity import IdentityService

_bearer = HTTPBearer(auto_error=False)


@lru_cache
def get_token_issuer() -> TokenIssuer:
    settings = get_settings()
    return TokenIssuer(settings.jwt_secret, settings.jwt_algorithm)


def get_identity_service(
    db: AsyncSession = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> IdentityService:
    return IdentityService(db, issuer, bcrypt_rounds=get_settings().bcrypt_rounds)


def get_commodity_service(db: AsyncSession = Depends(get_db)) -> CommodityService:
    return CommodityService(db)


def get_carrier_service(db: AsyncSession = Depends(get_db)) -> CarrierService:
    return CarrierService(db)


async def current_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> ClaimSet:
    """Authenticated caller's claims; guards every non-auth route."""
    if credentials is None:
        raise TokenInvalidError("missing bearer token")
    return issuer.decode(credentials.credentials)
