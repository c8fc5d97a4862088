#!/usr/bin/env python3
"""
Fill in and submit the employee form from a terminal.

Nothing is saved: submitting only shows the confirmation or the error summary.

Usage:
    python -m scripts.employee_form_cli
    python -m scripts.employee_form_cli --first-name John --last-name Doe \
        --employee-id 0123456 --email john@doe.com --submit
"""

import argparse
import sys
from typing import Callable, Optional, Sequence

from employee_form.core.fields import FieldKind, field_label
from employee_form.core.form_controller import FormController

MENU = {
    "1": FieldKind.FIRST_NAME,
    "2": FieldKind.LAST_NAME,
    "3": FieldKind.EMPLOYEE_ID,
    "4": FieldKind.EMAIL,
}


def render_form(form: FormController) -> str:
    lines = ["", "=== Employee Details ==="]
    for key, kind in MENU.items():
        lines.append(f"[{key}] {field_label(kind)}: {form.values()[kind]}")
        err = form.field_error(kind)
        if err:
            lines.append(f"      ! {err}")
    lines.append("[s] Submit   [r] Reset   [q] Quit")
    return "\n".join(lines)


def show_dialog(form: FormController, write: Callable[[str], None]) -> None:
    dialog = form.dialog()
    if dialog is None:
        return
    write(f"\n--- {dialog.title} ---")
    write(dialog.message.rstrip("\n"))
    write("--- Ok ---")
    form.close_dialog()


def run_interactive(
    form: FormController,
    read: Optional[Callable[[str], str]] = None,
    write: Callable[[str], None] = print,
) -> int:
    """
    Menu loop. Returns 0 if the last submit was accepted, 1 otherwise.
    Reads from input() unless another reader is given.
    """
    if read is None:
        read = input

    while True:
        write(render_form(form))
        try:
            choice = read("> ").strip().lower()
        except EOFError:
            break

        if choice in MENU:
            kind = MENU[choice]
            try:
                value = read(f"{field_label(kind)}: ")
            except EOFError:
                break
            form.set_field(kind, value)
        elif choice == "s":
            form.submit()
            show_dialog(form, write)
        elif choice == "r":
            form.reset()
        elif choice == "q":
            break
        else:
            write(f"Unknown option: {choice!r}")

    return 0 if form.last_result is not None and not form.errors else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Enter and validate an employee record")
    parser.add_argument("--first-name", default="", help="First name")
    parser.add_argument("--last-name", default="", help="Last name")
    parser.add_argument("--employee-id", default="", help="Employee ID (7 digits starting with 0)")
    parser.add_argument("--email", default="", help="Email address")
    parser.add_argument("--submit", action="store_true", help="Submit the given values once and exit")
    args = parser.parse_args(argv)

    form = FormController()
    form.set_field(FieldKind.FIRST_NAME, args.first_name)
    form.set_field(FieldKind.LAST_NAME, args.last_name)
    form.set_field(FieldKind.EMPLOYEE_ID, args.employee_id)
    form.set_field(FieldKind.EMAIL, args.email)

    if args.submit:
        form.submit()
        show_dialog(form, print)
        return 0 if not form.errors else 1

    return run_interactive(form)


if __name__ == "__main__":
    sys.exit(main())
