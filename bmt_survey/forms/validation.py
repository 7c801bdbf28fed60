"""Validation and normalization of raw survey form input."""
from __future__ import annotations

import logging
import math
import re
from dataclasses import replace
from decimal import Decimal
from typing import Any, Dict, List, Optional

from bmt_survey.core.models import FieldError, Number, RawSubmission, SurveyRecord, ValidationResult
from bmt_survey.core.schema import EMAIL, INTEGER, SELECT, SURVEY_FIELDS, FieldSpec

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^\S+@\S+$", re.IGNORECASE)
# Plain decimal notation only: no digit separators, nan or infinity.
NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")


def _decimal(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    if not NUMBER_PATTERN.match(text):
        return None
    return Decimal(text)


def parse_number(value: Any) -> Optional[float]:
    """Parse user input into a finite float, returning ``None`` when it is not a number."""

    exact = _decimal(value)
    if exact is None:
        return None
    number = float(exact)
    if math.isinf(number):
        return None
    return number


def parse_integer(value: Any) -> Optional[int]:
    """Parse a whole number exactly; fractional or non-numeric input gives ``None``."""

    exact = _decimal(value)
    if exact is None or exact != exact.to_integral_value():
        return None
    return int(exact)


def normalize_number(value: Any, kind: str) -> Optional[Number]:
    """Coerce a numeric field for storage; anything unparseable becomes ``None``."""

    if kind == INTEGER:
        return parse_integer(value)
    number = parse_number(value)
    if number is not None and number.is_integer():
        return parse_integer(value)
    return number


def validate_field(spec: FieldSpec, raw_value: str) -> Optional[str]:
    """Return the message for an invalid value, or ``None`` when the value is acceptable."""

    if not raw_value:
        return f"{spec.label} is required" if spec.required else None

    if spec.kind == EMAIL and not EMAIL_PATTERN.match(raw_value):
        return "Invalid email address"

    if spec.kind == SELECT:
        allowed = {value for value, _ in spec.options or ()}
        if raw_value not in allowed:
            return f"Select a valid {spec.label.lower()}"

    if spec.is_numeric:
        number = parse_number(raw_value)
        if number is None:
            return "Must be a number"
        if number < 0:
            return "Must be a positive number"
        if spec.kind == INTEGER and parse_integer(raw_value) is None:
            return "Must be a whole number"

    return None


def collect_errors(raw: RawSubmission) -> List[FieldError]:
    """Return every field-level problem in form order."""

    errors: List[FieldError] = []
    for spec in SURVEY_FIELDS:
        message = validate_field(spec, raw.get(spec.name))
        if message:
            errors.append(FieldError(spec.name, message))
    return errors


def normalize_submission(raw: RawSubmission) -> Dict[str, Any]:
    """Map raw input onto typed column values; blanks and bad numbers become ``None``."""

    normalized: Dict[str, Any] = {}
    for spec in SURVEY_FIELDS:
        value = raw.get(spec.name)
        if spec.is_numeric:
            normalized[spec.name] = normalize_number(value, spec.kind)
        else:
            normalized[spec.name] = value or None
    return normalized


def validate_submission(raw: RawSubmission) -> ValidationResult:
    """Convert raw form input into a ``SurveyRecord`` or a non-empty list of field errors.

    Input is rejected early: any non-numeric text in a numeric field is reported
    as a field error. Normalization still coerces unparseable numbers to ``None``
    so nothing but numbers or ``None`` can reach the store.
    """

    errors = collect_errors(raw)
    if errors:
        logger.info("Survey input rejected with %d field error(s)", len(errors))
        return ValidationResult(errors=errors)

    normalized = normalize_submission(raw)
    return ValidationResult(record=SurveyRecord(**normalized))


def stamp_record(record: SurveyRecord, timestamp: str) -> SurveyRecord:
    """Return a copy carrying the submission and creation timestamps."""

    return replace(record, submission_date=timestamp, created_at=timestamp)
