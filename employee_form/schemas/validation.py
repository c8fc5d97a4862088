from pydantic import BaseModel

from employee_form.core.fields import ErrorKind, FieldKind
from employee_form.schemas.employee import EmployeeOut


class ValidationError(BaseModel):
    """Individual validation error"""
    field: FieldKind
    code: ErrorKind
    message: str


class FieldDescriptorOut(BaseModel):
    """One form field with the error it raises when invalid"""
    field: FieldKind
    label: str
    error_code: ErrorKind
    error_message: str


class SubmissionOut(BaseModel):
    """Outcome of a submit: confirmation or error summary"""
    accepted: bool
    title: str
    message: str
    employee: EmployeeOut | None
    errors: list[ValidationError]


class FieldCheckIn(BaseModel):
    field: FieldKind
    value: str | None = None


class FieldCheckOut(BaseModel):
    field: FieldKind
    valid: bool
    error: ValidationError | None
