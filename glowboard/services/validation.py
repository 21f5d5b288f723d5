"""Input validation and sanitization for raw form values.

Validators never raise on bad input. Each returns a ``ValidationResult``
listing every problem found, so a form can show all field errors together.
"""
import math
import re
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

from glowboard.core.constants import LOCATIONS, NOTE_PRIORITIES
from glowboard.services.analytics.date_ranges import local_today, shift_years

SALES_AMOUNT_MIN = 0
SALES_AMOUNT_MAX = 1_000_000
TREATMENTS_COUNT_MIN = 0
TREATMENTS_COUNT_MAX = 1000
TITLE_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 2000
NOTES_MAX_LENGTH = 500

_SCRIPT_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_JAVASCRIPT_URI_RE = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(r"on\w+\s*=", re.IGNORECASE)
_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ValidationIssue(BaseModel):
    field: str
    message: str
    code: str


class ValidationResult(BaseModel):
    is_valid: bool
    errors: List[ValidationIssue] = Field(default_factory=list)
    sanitized_value: Any = None

    @property
    def codes(self) -> List[str]:
        return [error.code for error in self.errors]


def _result(errors: List[ValidationIssue], sanitized_value: Any = None) -> ValidationResult:
    return ValidationResult(is_valid=not errors, errors=errors, sanitized_value=sanitized_value)


def sanitize_text(value: Any) -> str:
    """Remove script blocks, javascript: URIs and inline event handlers."""
    if not isinstance(value, str):
        return ""
    text = value.strip()
    text = _SCRIPT_RE.sub("", text)
    text = _JAVASCRIPT_URI_RE.sub("", text)
    text = _EVENT_HANDLER_RE.sub("", text)
    return text.strip()


def sanitize_number(value: Any) -> float:
    """Read the leading number of a value; anything unreadable or non-finite becomes 0."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER_RE.match(value)
        if not match:
            return 0.0
        number = float(match.group(1))
    else:
        return 0.0
    # NaN and overflowed values such as "1e400" are unreadable too
    return number if math.isfinite(number) else 0.0


def sanitize_email(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def parse_calendar_day(value: Any) -> Optional[date]:
    """Parse a date, datetime or ISO-8601 string into a calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    s = value.strip()
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        return None


def sales_amount(value: Any) -> ValidationResult:
    errors = []
    amount = sanitize_number(value)

    if amount < SALES_AMOUNT_MIN:
        errors.append(ValidationIssue(
            field="daily_sales",
            message="Sales amount cannot be negative",
            code="SALES_AMOUNT_TOO_LOW",
        ))
    if amount > SALES_AMOUNT_MAX:
        errors.append(ValidationIssue(
            field="daily_sales",
            message=f"Sales amount cannot exceed ${SALES_AMOUNT_MAX:,}",
            code="SALES_AMOUNT_TOO_HIGH",
        ))

    return _result(errors, amount)


def treatments_count(value: Any) -> ValidationResult:
    errors = []
    count = sanitize_number(value)

    if count < TREATMENTS_COUNT_MIN:
        errors.append(ValidationIssue(
            field="treatments_count",
            message="Treatments count cannot be negative",
            code="TREATMENTS_COUNT_TOO_LOW",
        ))
    if count > TREATMENTS_COUNT_MAX:
        errors.append(ValidationIssue(
            field="treatments_count",
            message=f"Treatments count cannot exceed {TREATMENTS_COUNT_MAX}",
            code="TREATMENTS_COUNT_TOO_HIGH",
        ))

    return _result(errors, math.floor(count))


def location(value: Any) -> ValidationResult:
    if not value or not isinstance(value, str):
        return _result([ValidationIssue(
            field="location",
            message="Location is required",
            code="LOCATION_REQUIRED",
        )])

    errors = []
    if value not in LOCATIONS:
        errors.append(ValidationIssue(
            field="location",
            message="Invalid location selected",
            code="LOCATION_INVALID",
        ))
    return _result(errors, value)


def date_value(value: Any, field: str = "date", today: Optional[date] = None) -> ValidationResult:
    if not value:
        return _result([ValidationIssue(
            field=field,
            message="Date is required",
            code="DATE_REQUIRED",
        )])

    day = parse_calendar_day(value)
    if day is None:
        return _result([ValidationIssue(
            field=field,
            message="Invalid date format",
            code="DATE_INVALID",
        )])

    errors = []
    one_year_from_now = shift_years(today or local_today(), 1)
    if day > one_year_from_now:
        errors.append(ValidationIssue(
            field=field,
            message="Date cannot be more than 1 year in the future",
            code="DATE_TOO_FUTURE",
        ))
    return _result(errors, day.isoformat())


def text(value: Any, max_length: int = CONTENT_MAX_LENGTH, field: str = "text") -> ValidationResult:
    """
    Sanitize free text. Text longer than max_length is truncated and flagged
    with TEXT_TOO_LONG; the caller decides whether that blocks submission.
    """
    if not isinstance(value, str):
        return _result([], "")

    sanitized = sanitize_text(value)
    errors = []
    if len(sanitized) > max_length:
        errors.append(ValidationIssue(
            field=field,
            message=f"Text cannot exceed {max_length} characters",
            code="TEXT_TOO_LONG",
        ))
    return _result(errors, sanitized[:max_length])


def email(value: Any) -> ValidationResult:
    if not value or not isinstance(value, str):
        return _result([ValidationIssue(
            field="email",
            message="Email is required",
            code="EMAIL_REQUIRED",
        )])

    sanitized = sanitize_email(value)
    errors = []
    if not _EMAIL_RE.match(sanitized):
        errors.append(ValidationIssue(
            field="email",
            message="Invalid email format",
            code="EMAIL_INVALID",
        ))
    return _result(errors, sanitized)


def validate_sales_record(data: Mapping[str, Any], today: Optional[date] = None) -> ValidationResult:
    """
    Validate a sales form. The sanitized dict holds only the fields that
    passed on their own; check is_valid before trusting it.
    """
    errors: List[ValidationIssue] = []
    sanitized: Dict[str, Any] = {}

    checks = [
        ("location", location(data.get("location"))),
        ("date", date_value(data.get("date"), today=today)),
        ("daily_sales", sales_amount(data.get("daily_sales"))),
    ]
    if data.get("treatments_count") not in (None, ""):
        checks.append(("treatments_count", treatments_count(data.get("treatments_count"))))
    if data.get("notes"):
        checks.append(("notes", text(data.get("notes"), NOTES_MAX_LENGTH, field="notes")))

    for name, result in checks:
        if result.is_valid:
            sanitized[name] = result.sanitized_value
        else:
            errors.extend(result.errors)

    return _result(errors, sanitized)


def validate_note(data: Mapping[str, Any], today: Optional[date] = None) -> ValidationResult:
    errors: List[ValidationIssue] = []
    sanitized: Dict[str, Any] = {}

    location_result = location(data.get("location"))
    if location_result.is_valid:
        sanitized["location"] = location_result.sanitized_value
    else:
        errors.extend(location_result.errors)

    for name, max_length, code in (
        ("title", TITLE_MAX_LENGTH, "TITLE_REQUIRED"),
        ("content", CONTENT_MAX_LENGTH, "CONTENT_REQUIRED"),
    ):
        result = text(data.get(name), max_length, field=name)
        if not result.is_valid:
            errors.extend(result.errors)
        elif not result.sanitized_value.strip():
            errors.append(ValidationIssue(
                field=name,
                message=f"{name.capitalize()} is required",
                code=code,
            ))
        else:
            sanitized[name] = result.sanitized_value

    if data.get("priority") not in NOTE_PRIORITIES:
        errors.append(ValidationIssue(
            field="priority",
            message="Invalid priority level",
            code="PRIORITY_INVALID",
        ))
    else:
        sanitized["priority"] = data.get("priority")

    if data.get("visible_until"):
        result = date_value(data.get("visible_until"), field="visible_until", today=today)
        if result.is_valid:
            sanitized["visible_until"] = result.sanitized_value
        else:
            errors.extend(result.errors)

    return _result(errors, sanitized)
