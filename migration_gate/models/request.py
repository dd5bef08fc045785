"""Request and violation models for the start-migration gate."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from enum import Enum


SECRET_MASK = "****"
MIN_SECRET_LENGTH = 10


def mask_secret(secret: str) -> str:
    """Mask a secret, keeping only its last four characters."""
    if len(secret) <= 4:
        return SECRET_MASK
    return SECRET_MASK + secret[-4:]


class ViolationType(str, Enum):
    """Kinds of rule failures reported by the validator."""
    MISSING_FIELD = "required"
    WRONG_TYPE = "type"
    EMPTY_VALUE = "empty"
    TOO_SHORT = "min_length"


@dataclass
class Violation:
    """A single broken rule on one request field."""
    field: str
    error_type: ViolationType
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "field": self.field,
            "error_type": self.error_type.value,
            "message": self.message,
        }


@dataclass(frozen=True)
class MigrationRequest:
    """
    Validated start-migration credentials.

    Instances are produced by the validator; the secret is excluded from
    repr and only ever serialized in masked form. Construction with values
    that break the field rules raises ValueError.
    """
    cloud_name: str
    api_key: str
    api_secret: str = field(repr=False)

    def __post_init__(self):
        for name, value in (("cloudName", self.cloud_name), ("apiKey", self.api_key),
                            ("apiSecret", self.api_secret)):
            if not isinstance(value, str) or value == "":
                raise ValueError(f"{name} must be a non-empty string")
        if len(self.api_secret) < MIN_SECRET_LENGTH:
            raise ValueError(f"apiSecret must be at least {MIN_SECRET_LENGTH} characters long")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary safe for logs and responses."""
        return {
            "cloudName": self.cloud_name,
            "apiKey": self.api_key,
            "apiSecretMasked": mask_secret(self.api_secret),
        }

    def credentials(self) -> Dict[str, str]:
        """Unmasked credentials, keyed by wire name, for the migration engine."""
        return {
            "cloudName": self.cloud_name,
            "apiKey": self.api_key,
            "apiSecret": self.api_secret,
        }


@dataclass
class ValidationResult:
    """Outcome of validating a start-migration payload."""
    request: Optional[MigrationRequest] = None
    violations: List[Violation] = field(default_factory=list)

    def __post_init__(self):
        if (self.request is None) == (not self.violations):
            raise ValueError("ValidationResult needs either a request or violations, not both")

    @property
    def is_valid(self) -> bool:
        """Check if the payload passed validation."""
        return self.request is not None

    @property
    def failed_fields(self) -> List[str]:
        """Names of fields with at least one violation, in report order."""
        seen = []
        for violation in self.violations:
            if violation.field not in seen:
                seen.append(violation.field)
        return seen

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "valid": self.is_valid,
            "request": self.request.to_dict() if self.request else None,
            "violations": [v.to_dict() for v in self.violations],
        }
