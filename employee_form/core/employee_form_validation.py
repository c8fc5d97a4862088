from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Union

from employee_form.core.fields import (
    FIELD_ERROR_KINDS,
    ErrorKind,
    FieldKind,
    error_message,
    field_label,
)
from employee_form.core.validator import is_valid_email, is_valid_id, is_valid_name


ErrorMap = dict[FieldKind, ErrorKind]

_FIELD_VALIDATORS: dict[FieldKind, Callable[[str | None], bool]] = {
    FieldKind.FIRST_NAME: is_valid_name,
    FieldKind.LAST_NAME: is_valid_name,
    FieldKind.EMPLOYEE_ID: is_valid_id,
    FieldKind.EMAIL: is_valid_email,
}


@dataclass(frozen=True)
class Accepted:
    first_name: str
    last_name: str
    employee_id: str
    email: str


@dataclass(frozen=True)
class Rejected:
    errors: ErrorMap = field(default_factory=dict)


SubmissionResult = Union[Accepted, Rejected]


@dataclass(frozen=True)
class DialogContent:
    title: str
    message: str


def validate_field(kind: FieldKind, value: str | None) -> ErrorKind | None:
    """
    Returns the error kind for a failing value, None when it passes.
    """
    if _FIELD_VALIDATORS[kind](value):
        return None
    return FIELD_ERROR_KINDS[kind]


def build_errors(
    first_name: str | None,
    last_name: str | None,
    employee_id: str | None,
    email: str | None,
) -> ErrorMap:
    """
    Every field is checked on its own; the map holds only the failing ones.
    An empty map means the whole form is valid.
    """
    values = {
        FieldKind.FIRST_NAME: first_name,
        FieldKind.LAST_NAME: last_name,
        FieldKind.EMPLOYEE_ID: employee_id,
        FieldKind.EMAIL: email,
    }

    errors: ErrorMap = {}
    for kind, value in values.items():
        err = validate_field(kind, value)
        if err is not None:
            errors[kind] = err
    return errors


def derive_result(
    errors: ErrorMap,
    first_name: str,
    last_name: str,
    employee_id: str,
    email: str,
) -> SubmissionResult:
    """
    Accepted carries the raw values untouched (no trimming, the ID stays text).
    Rejected carries a copy of every error in the map.
    """
    if errors:
        return Rejected(errors=dict(errors))
    return Accepted(
        first_name=first_name,
        last_name=last_name,
        employee_id=employee_id,
        email=email,
    )


def submit_employee_form(
    first_name: str,
    last_name: str,
    employee_id: str,
    email: str,
) -> SubmissionResult:
    errors = build_errors(first_name, last_name, employee_id, email)
    return derive_result(errors, first_name, last_name, employee_id, email)


def ordered_errors(errors: ErrorMap) -> list[tuple[FieldKind, ErrorKind]]:
    # form order, independent of how the map was filled
    return [(kind, errors[kind]) for kind in FieldKind if kind in errors]


def render_dialog(result: SubmissionResult) -> DialogContent:
    if isinstance(result, Accepted):
        message = (
            "Employee created with the following details:\n"
            f"First Name: {result.first_name}\n"
            f"Last Name: {result.last_name}\n"
            f"ID: {result.employee_id}\n"
            f"email: {result.email}"
        )
        return DialogContent(title="Submitted", message=message)

    parts = ["The following errors were found:\n\n"]
    for kind, err in ordered_errors(result.errors):
        parts.append(f"{field_label(kind)}: {error_message(err)}\n\n")
    return DialogContent(title="Oops!", message="".join(parts))
