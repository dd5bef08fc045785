"""Start-migration endpoints."""

import logging
from typing import Any
from fastapi import APIRouter, Body, Depends, HTTPException, Request

from ..models import (
    CredentialsCheckResponse,
    MigrationStartedResponse,
    RejectionDetail,
    ViolationResponse,
)
from ...engine import MigrationEngine, MigrationEngineError
from ...models.request import MigrationRequest
from ...services.validator import MigrationRequestValidator

logger = logging.getLogger(__name__)

router = APIRouter()
validator = MigrationRequestValidator()


def get_engine(request: Request) -> MigrationEngine:
    """Dependency returning the engine configured on the app."""
    return request.app.state.migration_engine


def require_valid(payload: Any) -> MigrationRequest:
    """Validate a payload, raising a 400 with every violation if it fails."""
    result = validator.validate(payload)
    if not result.is_valid:
        detail = RejectionDetail(
            violations=[ViolationResponse(**v.to_dict()) for v in result.violations],
        )
        raise HTTPException(status_code=400, detail=detail.model_dump())
    return result.request


@router.post("/validate", response_model=CredentialsCheckResponse)
async def validate_credentials(payload: Any = Body(None)):
    """Check credentials structurally without starting a migration."""
    require_valid(payload)
    return CredentialsCheckResponse(valid=True)


@router.post("/start", response_model=MigrationStartedResponse, status_code=202)
async def start_migration(
    payload: Any = Body(None),
    engine: MigrationEngine = Depends(get_engine),
):
    """Validate the credentials and hand them to the migration engine."""
    request = require_valid(payload)

    try:
        ticket = engine.start_migration(request)
    except MigrationEngineError as e:
        logger.warning(f"Engine refused migration for {request.cloud_name}: {e}")
        raise HTTPException(status_code=409, detail=str(e))

    return MigrationStartedResponse(
        migration_id=ticket.migration_id,
        message=ticket.message,
    )
