"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

import math
from dataclasses import dataclass, field


# USGS FDSN Event Web Service query endpoint
USGS_API_BASE = "https://earthquake.usgs.gov/fdsnws/event/1/query"

# The FDSN service rejects larger limits
MAX_PAGE_SIZE = 20000


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        base_url: USGS query endpoint
        timeout_seconds: HTTP request timeout
        page_size: Records requested per page
        lookback_hours: Length of the recency window ending "now"
        min_magnitude: Initial filter threshold
    """
    base_url: str = USGS_API_BASE
    timeout_seconds: int = 30
    page_size: int = 20
    lookback_hours: int = 24
    min_magnitude: float = 0.0


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    if not config.base_url.startswith(("http://", "https://")):
        errors.append(ValidationError(
            field="base_url",
            message=f"Base URL must be http(s), got {config.base_url!r}",
        ))
    elif config.base_url.startswith("http://"):
        errors.append(ValidationError(
            field="base_url",
            message="Base URL is not using HTTPS",
            severity="warning",
        ))

    if config.timeout_seconds <= 0:
        errors.append(ValidationError(
            field="timeout_seconds",
            message=f"Timeout must be positive, got {config.timeout_seconds}",
        ))

    if config.page_size <= 0:
        errors.append(ValidationError(
            field="page_size",
            message=f"Page size must be positive, got {config.page_size}",
        ))
    elif config.page_size > MAX_PAGE_SIZE:
        errors.append(ValidationError(
            field="page_size",
            message=f"Page size {config.page_size} exceeds service maximum {MAX_PAGE_SIZE}",
        ))

    if config.lookback_hours <= 0:
        errors.append(ValidationError(
            field="lookback_hours",
            message=f"Lookback must be positive, got {config.lookback_hours}",
        ))

    if math.isnan(config.min_magnitude):
        errors.append(ValidationError(
            field="min_magnitude",
            message="Minimum magnitude is not a number",
        ))
    elif config.min_magnitude < 0:
        # Negative magnitudes are real but rarely useful as a threshold
        errors.append(ValidationError(
            field="min_magnitude",
            message=f"Minimum magnitude {config.min_magnitude} is below 0",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
