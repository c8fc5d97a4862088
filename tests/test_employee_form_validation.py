from employee_form.core.employee_form_validation import (
    Accepted,
    DialogContent,
    Rejected,
    build_errors,
    derive_result,
    ordered_errors,
    render_dialog,
    submit_employee_form,
    validate_field,
)
from employee_form.core.fields import (
    ERROR_MESSAGES,
    FIELD_ERROR_KINDS,
    FIELD_LABELS,
    ErrorKind,
    FieldKind,
)


def test_build_errors_all_valid():
    assert build_errors("John", "Doe", "0123456", "john@doe.com") == {}


def test_build_errors_all_empty_flags_every_field():
    errors = build_errors("", "", "", "")
    assert errors == {
        FieldKind.FIRST_NAME: ErrorKind.INVALID_NAME,
        FieldKind.LAST_NAME: ErrorKind.INVALID_NAME,
        FieldKind.EMPLOYEE_ID: ErrorKind.INVALID_ID,
        FieldKind.EMAIL: ErrorKind.INVALID_EMAIL,
    }


def test_build_errors_only_failing_field():
    errors = build_errors("John123", "Doe", "0123456", "john@doe.com")
    assert errors == {FieldKind.FIRST_NAME: ErrorKind.INVALID_NAME}


def test_build_errors_last_name_uses_name_error():
    errors = build_errors("John", "D0e", "0123456", "john@doe.com")
    assert errors == {FieldKind.LAST_NAME: ErrorKind.INVALID_NAME}


def test_build_errors_does_not_short_circuit():
    """Every field is evaluated even when an earlier one fails"""
    errors = build_errors("John1", "Doe", "123", "bad")
    assert set(errors) == {FieldKind.FIRST_NAME, FieldKind.EMPLOYEE_ID, FieldKind.EMAIL}


def test_build_errors_none_values_are_invalid():
    errors = build_errors(None, None, None, None)
    assert set(errors) == set(FieldKind)


def test_build_errors_is_idempotent():
    args = ("John", "", "1234567", "john@doe.com")
    assert build_errors(*args) == build_errors(*args)


def test_validate_field():
    assert validate_field(FieldKind.EMPLOYEE_ID, "0123456") is None
    assert validate_field(FieldKind.EMPLOYEE_ID, "1234567") == ErrorKind.INVALID_ID
    assert validate_field(FieldKind.EMAIL, None) == ErrorKind.INVALID_EMAIL


def test_derive_result_accepted_keeps_raw_values():
    result = derive_result({}, " John", "Doe ", "0123456", "john@doe.com")
    assert result == Accepted(
        first_name=" John",
        last_name="Doe ",
        employee_id="0123456",
        email="john@doe.com",
    )
    assert isinstance(result.employee_id, str)


def test_derive_result_rejected_carries_every_error():
    errors = {
        FieldKind.EMAIL: ErrorKind.INVALID_EMAIL,
        FieldKind.FIRST_NAME: ErrorKind.INVALID_NAME,
    }
    result = derive_result(errors, "", "Doe", "0123456", "x")
    assert isinstance(result, Rejected)
    assert result.errors == errors


def test_derive_result_does_not_share_error_map():
    errors = {FieldKind.EMAIL: ErrorKind.INVALID_EMAIL}
    result = derive_result(errors, "John", "Doe", "0123456", "x")
    errors.clear()
    assert result.errors == {FieldKind.EMAIL: ErrorKind.INVALID_EMAIL}


def test_derive_result_is_idempotent():
    errors = build_errors("", "Doe", "0123456", "john@doe.com")
    first = derive_result(errors, "", "Doe", "0123456", "john@doe.com")
    second = derive_result(errors, "", "Doe", "0123456", "john@doe.com")
    assert first == second


def test_submit_employee_form():
    assert isinstance(submit_employee_form("John", "Doe", "0123456", "john@doe.com"), Accepted)
    rejected = submit_employee_form("John", "Doe", "0123456", "john@doe1.com")
    assert rejected == Rejected(errors={FieldKind.EMAIL: ErrorKind.INVALID_EMAIL})


def test_ordered_errors_follow_form_order():
    errors = {
        FieldKind.EMAIL: ErrorKind.INVALID_EMAIL,
        FieldKind.FIRST_NAME: ErrorKind.INVALID_NAME,
    }
    assert ordered_errors(errors) == [
        (FieldKind.FIRST_NAME, ErrorKind.INVALID_NAME),
        (FieldKind.EMAIL, ErrorKind.INVALID_EMAIL),
    ]


def test_render_dialog_accepted():
    dialog = render_dialog(Accepted("John", "Doe", "0123456", "john@doe.com"))
    assert dialog == DialogContent(
        title="Submitted",
        message=(
            "Employee created with the following details:\n"
            "First Name: John\n"
            "Last Name: Doe\n"
            "ID: 0123456\n"
            "email: john@doe.com"
        ),
    )


def test_render_dialog_rejected_lists_every_error():
    dialog = render_dialog(Rejected(errors=build_errors("", "", "", "")))
    assert dialog.title == "Oops!"
    assert dialog.message == (
        "The following errors were found:\n\n"
        "First Name: must contain only letters, spaces, periods or hyphens\n\n"
        "Last Name: must contain only letters, spaces, periods or hyphens\n\n"
        "Employee ID: must be 7 digits starting with 0\n\n"
        "Email: must be a valid email address\n\n"
    )


def test_label_and_message_maps_are_total():
    assert set(FIELD_LABELS) == set(FieldKind)
    assert set(FIELD_ERROR_KINDS) == set(FieldKind)
    assert set(ERROR_MESSAGES) == set(ErrorKind)
    assert all(ERROR_MESSAGES.values())
