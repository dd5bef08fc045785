"""Pydantic models for API responses."""

from typing import List
from pydantic import BaseModel, Field


class ViolationResponse(BaseModel):
    field: str
    error_type: str
    message: str


class RejectionDetail(BaseModel):
    """Body of the 400 detail returned for an invalid request."""
    message: str = "Invalid start-migration request"
    violations: List[ViolationResponse]


class MigrationStartedResponse(BaseModel):
    migration_id: str = Field(serialization_alias="migrationId")
    message: str


class CredentialsCheckResponse(BaseModel):
    """Result of a structural credentials check; no provider call is made."""
    valid: bool
