"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field
from datetime import date
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from soonami.core.query import USGSQueryParams


# Timeouts for the USGS request (seconds)
DEFAULT_CONNECT_TIMEOUT = 15.0
DEFAULT_READ_TIMEOUT = 10.0


@dataclass(frozen=True)
class AlertStrings:
    """Localized display strings for tsunami alert status.

    Attributes:
        alert_no: Shown when no tsunami alert was issued
        alert_yes: Shown when a tsunami alert was issued
        alert_not_available: Shown when the status is unknown
    """
    alert_no: str = "No"
    alert_yes: str = "Yes"
    alert_not_available: str = "Not available"


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        query: USGS query parameters
        connect_timeout: Seconds to wait for the connection
        read_timeout: Seconds to wait between bytes of the response
        display_timezone: IANA timezone name for the date field
        strings: Localized alert strings
    """
    query: USGSQueryParams = field(default_factory=USGSQueryParams)
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    display_timezone: str = "UTC"
    strings: AlertStrings = field(default_factory=AlertStrings)


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


def _parse_date(value: str, field_name: str) -> tuple[date | None, list[ValidationError]]:
    try:
        return date.fromisoformat(value), []
    except (TypeError, ValueError):
        return None, [ValidationError(
            field=field_name,
            message=f"Date '{value}' is not in YYYY-MM-DD format",
        )]


def validate_query(query: USGSQueryParams) -> list[ValidationError]:
    """Validate USGS query parameters.

    Pure function.

    Args:
        query: Query parameters to validate

    Returns:
        List of validation errors (empty if valid)
    """
    start, errors = _parse_date(query.start_date, "query.start_date")
    end, end_errors = _parse_date(query.end_date, "query.end_date")
    errors.extend(end_errors)

    if start is not None and end is not None and start > end:
        errors.append(ValidationError(
            field="query",
            message=f"start_date ({query.start_date}) > end_date ({query.end_date})",
        ))

    if query.min_magnitude < 0:
        errors.append(ValidationError(
            field="query.min_magnitude",
            message=f"Magnitude must not be negative, got {query.min_magnitude}",
        ))

    return errors


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors = validate_query(config.query)

    for name in ("connect_timeout", "read_timeout"):
        value = getattr(config, name)
        if value <= 0:
            errors.append(ValidationError(
                field=name,
                message=f"Timeout must be positive, got {value}",
            ))

    if config.display_timezone.upper() != "UTC":
        try:
            ZoneInfo(config.display_timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(ValidationError(
                field="display_timezone",
                message=f"Unknown timezone '{config.display_timezone}'",
            ))

    for name in ("alert_no", "alert_yes", "alert_not_available"):
        if not getattr(config.strings, name):
            errors.append(ValidationError(
                field=f"strings.{name}",
                message="Display string is empty",
                severity="warning",
            ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
