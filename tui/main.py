"""
Student registration form - Textual front end over the validated-insert workflow.
"""

import sys

from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal
from textual.logging import TextualHandler
from textual.widgets import Header, Footer, Static, Button, Label, Input, Log

from src.core.config import get_db_path, load_environment
from src.core.db import ensure_schema
from src.core.errors import StoreUnavailable
from util.logging import logger
from .form import FORM_FIELDS, INITIAL_STATUS, submit_registration, view_all_students


class RegistrationApp(App):
    """Single-window student registration form."""

    CSS = """
    .title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
        color: blue;
    }

    .label {
        width: 16;
        padding-top: 1;
    }

    .form-row {
        height: auto;
        margin-bottom: 1;
    }

    .form-row Input {
        width: 1fr;
    }

    #button-row {
        height: auto;
        align: center middle;
        margin-bottom: 1;
    }

    #button-row Button {
        margin: 0 1;
    }

    #status {
        text-align: center;
        padding: 0 1;
    }

    #status.status-error {
        color: red;
    }

    #status.status-success {
        color: green;
    }

    #students-log {
        height: 1fr;
        border: solid white;
    }
    """

    TITLE = "Student Registration Form"

    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def compose(self) -> ComposeResult:
        yield Header()
        yield Container(
            Static("Student Registration", classes="title"),
            *[
                Horizontal(
                    Label(label, classes="label"),
                    Input(id=input_id),
                    classes="form-row",
                )
                for input_id, label in FORM_FIELDS
            ],
            Horizontal(
                Button("Register Student", id="register-button", variant="primary"),
                Button("View All Students", id="view-all-button"),
                id="button-row",
            ),
            Static(INITIAL_STATUS, id="status"),
            Log(id="students-log"),
            id="form-container",
        )
        yield Footer()

    def on_mount(self) -> None:
        logger.info("Student registration form started")
        self._first_input().focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "register-button":
            self.submit_form()
        elif event.button.id == "view-all-button":
            self.view_all()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        input_ids = [input_id for input_id, _ in FORM_FIELDS]
        position = input_ids.index(event.input.id)
        if position == len(input_ids) - 1:
            self.submit_form()
        else:
            self.query_one(f"#{input_ids[position + 1]}", Input).focus()

    def submit_form(self) -> None:
        values = [self.query_one(f"#{input_id}", Input).value for input_id, _ in FORM_FIELDS]
        result = submit_registration(*values)
        self.set_status(result["message"], result["is_error"])
        if result["clear_fields"]:
            self.clear_fields()

    def view_all(self) -> None:
        result = view_all_students(sink="log panel")
        students_log = self.query_one("#students-log", Log)
        for line in result["lines"]:
            students_log.write_line(line)
        self.set_status(result["message"], result["is_error"])

    def clear_fields(self) -> None:
        for input_id, _ in FORM_FIELDS:
            self.query_one(f"#{input_id}", Input).value = ""
        self._first_input().focus()

    def set_status(self, message: str, is_error: bool) -> None:
        status = self.query_one("#status", Static)
        status.update(message)
        status.set_class(is_error, "status-error")
        status.set_class(not is_error, "status-success")

    def _first_input(self) -> Input:
        return self.query_one(f"#{FORM_FIELDS[0][0]}", Input)


def main():
    """Form entry point: bootstrap the table, then present the form."""
    load_environment()
    logger.refresh_level()

    try:
        ensure_schema()
    except StoreUnavailable as e:
        print(f"❌ Database Connection Error: {e}", file=sys.stderr)
        logger.error(f"Form startup aborted, database unavailable at {get_db_path()}")
        sys.exit(1)

    print(f"🚀 Starting student registration form (database: {get_db_path()})")
    try:
        # Log lines would otherwise be drawn over the form
        with logger.handlers_replaced(TextualHandler()):
            RegistrationApp().run()
    except KeyboardInterrupt:
        print("\nℹ️  Form interrupted by user")
        logger.info("Form exited via keyboard interrupt")


if __name__ == "__main__":
    main()
