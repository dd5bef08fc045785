"""Validation service for start-migration requests."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..models.request import (
    MIN_SECRET_LENGTH,
    MigrationRequest,
    ValidationResult,
    Violation,
    ViolationType,
)

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class FieldRule:
    """Rules for one required text field of the request."""
    name: str  # Wire name (e.g., "apiSecret")
    attribute: str  # MigrationRequest attribute (e.g., "api_secret")
    min_length: Optional[int] = None


START_MIGRATION_RULES: Tuple[FieldRule, ...] = (
    FieldRule(name="cloudName", attribute="cloud_name"),
    FieldRule(name="apiKey", attribute="api_key"),
    FieldRule(name="apiSecret", attribute="api_secret", min_length=MIN_SECRET_LENGTH),
)


class MigrationRequestValidator:
    """
    Validator for inbound start-migration payloads.

    Every field in the rule table is checked and all violations are
    reported together. Within a single field, checks stop at the first
    failure:
    - Required field validation
    - Type validation (text only)
    - Non-empty validation (no trimming)
    - Min length validation
    """

    def __init__(self, rules: Tuple[FieldRule, ...] = START_MIGRATION_RULES):
        """
        Initialize the validator with a field rule table.

        Custom tables may tighten the rules but not loosen them; a value
        that passes the table yet breaks MigrationRequest's own checks
        raises ValueError from validate.
        """
        self.rules = rules

    def validate(self, raw: Any) -> ValidationResult:
        """
        Validate a raw payload.

        Args:
            raw: Untyped request body; anything that is not a mapping is
                treated as an empty one

        Returns:
            ValidationResult holding either a MigrationRequest or the
            ordered list of violations
        """
        data = raw if isinstance(raw, Mapping) else {}
        if data is not raw:
            logger.debug(f"Payload is {type(raw).__name__}, not an object; treating as empty")

        violations: List[Violation] = []
        values: Dict[str, str] = {}

        for rule in self.rules:
            value = data.get(rule.name, _MISSING)
            violation = self._validate_field(rule, value)
            if violation:
                violations.append(violation)
            else:
                values[rule.attribute] = value

        if violations:
            logger.info(
                "Rejected start-migration request: "
                + ", ".join(f"{v.field}={v.error_type.value}" for v in violations)
            )
            return ValidationResult(violations=violations)

        logger.debug("Start-migration request passed validation")
        return ValidationResult(request=MigrationRequest(**values))

    def is_valid(self, raw: Any) -> bool:
        """Quick check if a payload is valid."""
        return self.validate(raw).is_valid

    def _validate_field(self, rule: FieldRule, value: Any) -> Optional[Violation]:
        """Validate a single field, returning its first failure."""
        if value is _MISSING or value is None:
            return Violation(
                field=rule.name,
                error_type=ViolationType.MISSING_FIELD,
                message=f"{rule.name} is required",
            )

        if not isinstance(value, str):
            return Violation(
                field=rule.name,
                error_type=ViolationType.WRONG_TYPE,
                message=f"{rule.name} must be a string, got {type(value).__name__}",
            )

        if value == "":
            return Violation(
                field=rule.name,
                error_type=ViolationType.EMPTY_VALUE,
                message=f"{rule.name} should not be empty",
            )

        if rule.min_length and len(value) < rule.min_length:
            return Violation(
                field=rule.name,
                error_type=ViolationType.TOO_SHORT,
                message=f"{rule.name} must be at least {rule.min_length} characters long",
            )

        return None
