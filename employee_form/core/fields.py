from enum import Enum


class FieldKind(str, Enum):
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    EMPLOYEE_ID = "employee_id"
    EMAIL = "email"


class ErrorKind(str, Enum):
    INVALID_NAME = "invalid_name"
    INVALID_ID = "invalid_id"
    INVALID_EMAIL = "invalid_email"


FIELD_LABELS: dict[FieldKind, str] = {
    FieldKind.FIRST_NAME: "First Name",
    FieldKind.LAST_NAME: "Last Name",
    FieldKind.EMPLOYEE_ID: "Employee ID",
    FieldKind.EMAIL: "Email",
}

# first and last name share one rule
FIELD_ERROR_KINDS: dict[FieldKind, ErrorKind] = {
    FieldKind.FIRST_NAME: ErrorKind.INVALID_NAME,
    FieldKind.LAST_NAME: ErrorKind.INVALID_NAME,
    FieldKind.EMPLOYEE_ID: ErrorKind.INVALID_ID,
    FieldKind.EMAIL: ErrorKind.INVALID_EMAIL,
}

ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_NAME: "must contain only letters, spaces, periods or hyphens",
    ErrorKind.INVALID_ID: "must be 7 digits starting with 0",
    ErrorKind.INVALID_EMAIL: "must be a valid email address",
}


def field_label(kind: FieldKind) -> str:
    return FIELD_LABELS[kind]


def error_message(kind: ErrorKind) -> str:
    return ERROR_MESSAGES[kind]
