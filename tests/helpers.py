from employee_form.core.fields import FieldKind
from employee_form.core.form_controller import FormController

VALID_EMPLOYEE = {
    "first_name": "John",
    "last_name": "Doe",
    "employee_id": "0123456",
    "email": "john@doe.com",
}


def employee_payload(**overrides) -> dict:
    """
    Valid submit payload with selected fields replaced.
    Example: employee_payload(email="not-an-email")
    """
    payload = dict(VALID_EMPLOYEE)
    payload.update(overrides)
    return payload


def fill_form(form: FormController, **overrides) -> FormController:
    for key, value in employee_payload(**overrides).items():
        form.set_field(FieldKind(key), value)
    return form
