"""Employee Field Enforcement: validates and normalizes candidate records.

Invariants:
    - All check_* functions are PURE: no IO, no state, no side effects
    - check_* return an error dict on violation, None on success
    - find_validation_error chains the checks in a fixed order; first error wins:
      presence, name, department, email, gender, age
    - A missing field always reports the generic presence error, never a field error
    - Strings are trimmed before pattern checks; age is coerced to int before the range check
    - Emails are ASCII only and at most EMAIL_MAX_LENGTH characters, so every store
      folds their case the same way and every column can hold them
    - No payload makes a check raise; oversized digit strings are simply out of range

Design Decisions:
    - Error dicts over exceptions inside the chain: each rule is testable alone,
      validate_employee raises once at the edge
"""

import re
from collections.abc import Mapping
from typing import Any

from app.core.domain_types import EmployeeField, EmployeeRecord, Gender
from app.core.errors import EmployeeValidationError


NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z .'-]{1,48}")
# printable ASCII except space and "@"
_EMAIL_CHAR = r"[!-?A-~]"
EMAIL_PATTERN = re.compile(rf"{_EMAIL_CHAR}+@{_EMAIL_CHAR}+\.{_EMAIL_CHAR}+")
INTEGER_PATTERN = re.compile(r"[+-]?\d+")

AGE_MIN: int = 18
AGE_MAX: int = 65
EMAIL_MAX_LENGTH: int = 254
AGE_MAX_DIGITS: int = 9
REQUIRED_FIELDS: tuple[EmployeeField, ...] = tuple(EmployeeField)


def _error(error_code: str, field: str | None, message: str) -> dict:
    return {
        "status": "error",
        "error_code": error_code,
        "field": field,
        "message": message,
    }


def _clean(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _significant_digits(text: str) -> str:
    return text.lstrip("+-").lstrip("0") or "0"


def _is_oversized_integer(value: Any) -> bool:
    """A numeric string too long to be any age, or to hand to int() safely."""
    if not isinstance(value, str):
        return False
    text = value.strip()
    return (
        INTEGER_PATTERN.fullmatch(text) is not None
        and len(_significant_digits(text)) > AGE_MAX_DIGITS
    )


def coerce_age(value: Any) -> int | None:
    """Return value as an int, or None if it is not a whole number.

    Accepts ints, integral floats and numeric strings. Booleans are rejected,
    as are numeric strings with more than AGE_MAX_DIGITS significant digits.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and INTEGER_PATTERN.fullmatch(value.strip()):
        if _is_oversized_integer(value):
            return None
        text = value.strip()
        sign = "-" if text.startswith("-") else ""
        return int(sign + _significant_digits(text))
    return None


# ─── Individual rules ───────────────────────────────────────────

def check_required_fields(candidate: Mapping[str, Any]) -> dict | None:
    """All five fields present and non-empty."""
    if any(_is_blank(candidate.get(f.value)) for f in REQUIRED_FIELDS):
        return _error("FIELDS_REQUIRED", None, "All fields are required.")
    return None


def check_name(value: Any) -> dict | None:
    if not isinstance(value, str) or not NAME_PATTERN.fullmatch(value.strip()):
        return _error(
            "INVALID_NAME", EmployeeField.NAME.value,
            "Name must contain letters only (2-50).",
        )
    return None


def check_department(value: Any) -> dict | None:
    if not isinstance(value, str) or not NAME_PATTERN.fullmatch(value.strip()):
        return _error(
            "INVALID_DEPARTMENT", EmployeeField.DEPARTMENT.value,
            "Department: letters only (2-50).",
        )
    return None


def check_email(value: Any) -> dict | None:
    if (
        not isinstance(value, str)
        or len(value.strip()) > EMAIL_MAX_LENGTH
        or not EMAIL_PATTERN.fullmatch(value.strip())
    ):
        return _error(
            "INVALID_EMAIL", EmployeeField.EMAIL.value, "Invalid e-mail address.",
        )
    return None


def check_gender(value: Any) -> dict | None:
    if not isinstance(value, str) or value.strip() not in {g.value for g in Gender}:
        return _error(
            "INVALID_GENDER", EmployeeField.GENDER.value,
            "Gender must be Male or Female.",
        )
    return None


def _out_of_range() -> dict:
    return _error(
        "AGE_OUT_OF_RANGE", EmployeeField.AGE.value,
        f"Age must be between {AGE_MIN} and {AGE_MAX}.",
    )


def check_age(value: Any) -> dict | None:
    if _is_oversized_integer(value):
        return _out_of_range()
    age = coerce_age(value)
    if age is None:
        return _error(
            "INVALID_AGE", EmployeeField.AGE.value, "Age must be a whole number.",
        )
    if age < AGE_MIN or age > AGE_MAX:
        return _out_of_range()
    return None


# ─── Chain ───────────────────────────────────────────────────────

def find_validation_error(candidate: Mapping[str, Any]) -> dict | None:
    """Run every rule in order. Returns the first error, or None."""
    missing = check_required_fields(candidate)
    if missing:
        return missing

    checks = (
        (check_name, EmployeeField.NAME),
        (check_department, EmployeeField.DEPARTMENT),
        (check_email, EmployeeField.EMAIL),
        (check_gender, EmployeeField.GENDER),
        (check_age, EmployeeField.AGE),
    )
    for check, employee_field in checks:
        error = check(candidate[employee_field.value])
        if error:
            return error
    return None


def normalize_employee(candidate: Mapping[str, Any]) -> EmployeeRecord:
    """Build the normalized record. Caller guarantees the candidate is valid."""
    return EmployeeRecord(
        name=_clean(candidate["name"]),
        email=_clean(candidate["email"]),
        gender=Gender(_clean(candidate["gender"])),
        age=coerce_age(candidate["age"]),
        department=_clean(candidate["department"]),
    )


def validate_employee(candidate: Mapping[str, Any]) -> EmployeeRecord:
    """Validate a raw field mapping and return the normalized record.

    Raises:
        EmployeeValidationError: with the message of the first failed rule.
    """
    error = find_validation_error(candidate)
    if error:
        raise EmployeeValidationError(error["message"], error["field"])
    return normalize_employee(candidate)
