"""Outcome Rendering — maps core Outcome kinds onto HTTP status codes.

Invariants:
    - The mapping is total and 1:1 over OutcomeKind
    - Body is always the {success, message, data} envelope

Design Decisions:
    - Lives in the HTTP layer: the core never knows about status codes
"""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from freight.core.outcome import Outcome, OutcomeKind

STATUS_BY_KIND: dict[OutcomeKind, int] = {
    OutcomeKind.SUCCESS: status.HTTP_200_OK,
    OutcomeKind.VALIDATION_FAILURE: status.HTTP_400_BAD_REQUEST,
    OutcomeKind.CONFLICT: status.HTTP_409_CONFLICT,
    OutcomeKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    OutcomeKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    OutcomeKind.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def render(outcome: Outcome, data: Any = None) -> JSONResponse:
    """`data` is the already-serialized payload; ignored unless the outcome succeeded."""
    return JSONResponse(
        status_code=STATUS_BY_KIND[outcome.kind],
        content=outcome.to_envelope(data if outcome.ok else None),
    )
