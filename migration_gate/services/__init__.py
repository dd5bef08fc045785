"""Service layer for the migration gate."""

from .validator import FieldRule, MigrationRequestValidator, START_MIGRATION_RULES

__all__ = [
    "FieldRule",
    "MigrationRequestValidator",
    "START_MIGRATION_RULES",
]
