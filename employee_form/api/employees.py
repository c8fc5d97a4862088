import logging

from fastapi import APIRouter

from employee_form.core.employee_form_validation import (
    Accepted,
    SubmissionResult,
    ordered_errors,
    render_dialog,
    submit_employee_form,
    validate_field,
)
from employee_form.core.fields import (
    FIELD_ERROR_KINDS,
    ErrorKind,
    FieldKind,
    error_message,
    field_label,
)
from employee_form.schemas.employee import EmployeeFormIn, EmployeeOut
from employee_form.schemas.validation import (
    FieldCheckIn,
    FieldCheckOut,
    FieldDescriptorOut,
    SubmissionOut,
    ValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


def _error_out(kind: FieldKind, err: ErrorKind) -> ValidationError:
    return ValidationError(field=kind, code=err, message=error_message(err))


def submission_to_out(result: SubmissionResult) -> SubmissionOut:
    dialog = render_dialog(result)
    if isinstance(result, Accepted):
        return SubmissionOut(
            accepted=True,
            title=dialog.title,
            message=dialog.message,
            employee=EmployeeOut(
                first_name=result.first_name,
                last_name=result.last_name,
                employee_id=result.employee_id,
                email=result.email,
            ),
            errors=[],
        )
    return SubmissionOut(
        accepted=False,
        title=dialog.title,
        message=dialog.message,
        employee=None,
        errors=[_error_out(k, e) for k, e in ordered_errors(result.errors)],
    )


@router.get("/form", response_model=list[FieldDescriptorOut])
def get_form():
    """Describe the form fields and the message each one shows when flagged"""
    return [
        FieldDescriptorOut(
            field=kind,
            label=field_label(kind),
            error_code=FIELD_ERROR_KINDS[kind],
            error_message=error_message(FIELD_ERROR_KINDS[kind]),
        )
        for kind in FieldKind
    ]


@router.post("/submit", response_model=SubmissionOut)
def submit_employee(payload: EmployeeFormIn):
    """
    Validate an employee record and return the dialog to show.

    Nothing is stored: a rejected form is still a 200 with the error summary.
    """
    result = submit_employee_form(
        payload.first_name,
        payload.last_name,
        payload.employee_id,
        payload.email,
    )
    out = submission_to_out(result)

    if out.accepted:
        logger.info("Employee form accepted")
    else:
        logger.info(
            "Employee form rejected: %s",
            ", ".join(f"{e.field.value}={e.code.value}" for e in out.errors),
        )
    return out


@router.post("/validate-field", response_model=FieldCheckOut)
def validate_single_field(payload: FieldCheckIn):
    """Check one field against the same rule submit uses"""
    err = validate_field(payload.field, payload.value)
    return FieldCheckOut(
        field=payload.field,
        valid=err is None,
        error=_error_out(payload.field, err) if err is not None else None,
    )
