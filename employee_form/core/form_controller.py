from __future__ import annotations

from employee_form.core.employee_form_validation import (
    DialogContent,
    ErrorMap,
    SubmissionResult,
    build_errors,
    derive_result,
    render_dialog,
)
from employee_form.core.fields import FieldKind, error_message


class FormController:
    """
    State behind the employee form screen.

    - Owns the four field values, the current error map and the dialog flag.
    - Fields are only (re)validated on submit(); editing a value never changes
      the flags by itself.
    - reset() clears values and flags together.
    """

    def __init__(self) -> None:
        self._values: dict[FieldKind, str] = {kind: "" for kind in FieldKind}
        self.errors: ErrorMap = {}
        self.dialog_open: bool = False
        self.last_result: SubmissionResult | None = None

    @property
    def first_name(self) -> str:
        return self._values[FieldKind.FIRST_NAME]

    @property
    def last_name(self) -> str:
        return self._values[FieldKind.LAST_NAME]

    @property
    def employee_id(self) -> str:
        return self._values[FieldKind.EMPLOYEE_ID]

    @property
    def email(self) -> str:
        return self._values[FieldKind.EMAIL]

    def values(self) -> dict[FieldKind, str]:
        return dict(self._values)

    def set_field(self, kind: FieldKind | str, value: str) -> None:
        # raises ValueError for an unknown field name
        self._values[FieldKind(kind)] = value

    def submit(self) -> SubmissionResult:
        self.errors = build_errors(
            self.first_name, self.last_name, self.employee_id, self.email
        )
        self.last_result = derive_result(
            self.errors, self.first_name, self.last_name, self.employee_id, self.email
        )
        self.dialog_open = True
        return self.last_result

    def is_flagged(self, kind: FieldKind) -> bool:
        return kind in self.errors

    def field_error(self, kind: FieldKind) -> str | None:
        err = self.errors.get(kind)
        if err is None:
            return None
        return error_message(err)

    def dialog(self) -> DialogContent | None:
        if not self.dialog_open or self.last_result is None:
            return None
        return render_dialog(self.last_result)

    def close_dialog(self) -> None:
        self.dialog_open = False

    def reset(self) -> None:
        """
        Clears the four values, the error map and the last result.

        dialog_open is left as it is: an open dialog stays open until
        close_dialog(), but dialog() returns None once there is no result.
        """
        for kind in FieldKind:
            self._values[kind] = ""
        self.errors = {}
        self.last_result = None
