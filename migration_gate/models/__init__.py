"""Data models for the migration gate."""

from .request import (
    MIN_SECRET_LENGTH,
    MigrationRequest,
    ValidationResult,
    Violation,
    ViolationType,
    mask_secret,
)

__all__ = [
    "MIN_SECRET_LENGTH",
    "MigrationRequest",
    "ValidationResult",
    "Violation",
    "ViolationType",
    "mask_secret",
]
