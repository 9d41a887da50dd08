"""Add-task dialog.

Two states: closed, or open with the text typed so far. Confirming hands
the text to the submit callback exactly once and clears the buffer, so
the next time the dialog opens the field is empty again.

    Closed --open()--> Open("")
    Open(t) --edit(s)--> Open(s)
    Open(t) --confirm()--> Closed   (submit(t))
    Open(t) --cancel()--> Closed
"""
from __future__ import annotations
import logging
from typing import Callable, Optional
from events import Observable
from widgets import Widget, alert_dialog, text, text_button, text_field

logger = logging.getLogger(__name__)

TITLE = 'Add a new todo item'
HINT = 'Type your new todo'
CONFIRM_LABEL = 'Add'


class DialogClosedError(RuntimeError):
    """Input was sent to the dialog while it was not open."""


class AddTaskDialog(Observable):
    def __init__(self, on_submit: Callable[[str], object]):
        super().__init__()
        self._on_submit = on_submit
        self._open = False
        self._text = ''

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def pending_text(self) -> str:
        return self._text

    def open(self) -> None:
        if self._open:
            return
        self._open = True
        self._text = ''
        logger.debug("dialog opened")
        self._notify()

    def edit(self, value: str) -> None:
        self._require_open('edit')
        self._text = value
        self._notify()

    def confirm(self) -> str:
        """Close the dialog and submit the pending text. Returns the submitted text."""
        self._require_open('confirm')
        value = self._text
        self._open = False
        logger.debug("dialog confirmed with %r", value)
        self._on_submit(value)
        self._text = ''
        self._notify()
        return value

    def cancel(self) -> None:
        if not self._open:
            return
        self._open = False
        self._text = ''
        logger.debug("dialog cancelled")
        self._notify()

    def _require_open(self, action: str) -> None:
        if not self._open:
            raise DialogClosedError(f'Cannot {action}: the add dialog is closed.')

    # -------------------- view --------------------
    def build(self) -> Optional[Widget]:
        if not self._open:
            return None
        return alert_dialog(
            title=text(TITLE),
            content=text_field(self._text, HINT, on_changed=self.edit),
            actions=[text_button(CONFIRM_LABEL, on_pressed=self.confirm)],
            dismissible=False,
        )
