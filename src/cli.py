"""Interactive terminal runtime for the todo list.

Mounts the app, repaints whenever the list or the dialog reports a change,
and turns typed commands into taps on the widgets of the current tree.
Row numbers typed by the user are the 1-based positions painted on screen.
"""
import logging
import os
from typing import Callable, List, Optional
from app import TodoApp
from add_dialog import HINT
from renderer import Renderer
from widgets import Widget, interactive_root

logger = logging.getLogger(__name__)

# --- terminal control helpers ---
# ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home); 3J first for older terminals.
def _clear_screen() -> None:
    print("\033[3J\033[H\033[2J\033[H", end="", flush=True)


def _truthy_env(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def _enter_alt_screen() -> None:
    print("\033[?1049h", end="", flush=True)


def _leave_alt_screen() -> None:
    print("\033[?1049l", end="", flush=True)


def _set_window_title(title: str) -> None:
    print(f"\033]0;{title}\007", end="", flush=True)


def _parse_row(raw: str) -> Optional[int]:
    raw = raw.rstrip('.')
    if not raw.isdigit():
        return None
    return int(raw)


class CLI:
    def __init__(self, app: TodoApp, renderer: Optional[Renderer] = None):
        self.app: TodoApp = app
        self.renderer: Renderer = renderer if renderer is not None else Renderer()
        # Alt screen default ON; disable with TODO_ALT_SCREEN=0 (or false/no/off)
        self.alt_screen: bool = _truthy_env(os.getenv("TODO_ALT_SCREEN"), True)
        self.tree: Widget = app.build()
        self._unsubscribe: Optional[Callable[[], None]] = None

    # -------------------- mounting / painting --------------------
    def mount(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self.app.home.subscribe(self._on_change)
        self.repaint()

    def unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_change(self, source: object) -> None:
        self.repaint()

    def repaint(self) -> None:
        """Rebuild the tree from current state and draw it."""
        self.tree = self.app.build()
        _clear_screen()
        for line in self.renderer.paint(self.tree):
            print(line)

    def run(self) -> None:
        """Main loop; the screen is redrawn on every change, before the next prompt."""
        exit_message: Optional[str] = None
        if self.alt_screen:
            _enter_alt_screen()
        _set_window_title(self.app.title)
        self.mount()
        try:
            while True:
                if self.app.home.dialog.is_open:
                    self._dialog_input()
                    continue
                line = input("\n: ").strip()
                if not line:
                    continue
                if line.lower() == 'help':
                    _clear_screen()
                    self._help()
                    input("\nPress Enter to return to the list...")
                    self.repaint()
                    continue
                if line.lower() == 'exit':
                    exit_message = "Goodbye."
                    break
                self.handle_command(line)
        except (KeyboardInterrupt, EOFError):
            exit_message = "Interrupted. Goodbye."
        finally:
            self.unmount()
            if self.alt_screen:
                _leave_alt_screen()
            if exit_message:
                print(exit_message)

    # -------------------- targets in the current tree --------------------
    def _targets(self) -> Widget:
        return interactive_root(self.tree)

    def _rows(self) -> List[Widget]:
        return self._targets().find_all('list_tile')

    def _row(self, raw: str) -> Optional[Widget]:
        number = _parse_row(raw)
        if number is None:
            print("Invalid row.")
            return None
        rows = self._rows()
        if number < 1 or number > len(rows):
            print(f"No task #{number}.")
            return None
        return rows[number - 1]

    def tap_add_button(self) -> bool:
        fab = self._targets().find('floating_action_button')
        if fab is None:
            return False
        fab['on_pressed']()
        return True

    def type_text(self, value: str) -> None:
        field = self._targets().find('text_field')
        if field is not None:
            field['on_changed'](value)

    def press_confirm(self) -> None:
        button = self._targets().find('text_button')
        if button is not None:
            button['on_pressed']()

    # -------------------- command dispatch --------------------
    def handle_command(self, line: str) -> None:
        tokens = line.split()
        if not tokens:
            return
        cmd = tokens[0].lower()
        logger.debug("command %r", line)
        if cmd == 'add':
            self._cmd_add(line)
        elif cmd in ('t', 'tap'):
            self._cmd_tap(tokens)
        elif cmd in ('rm', 'del'):
            self._cmd_rm(tokens)
        else:
            # Refresh immediately, then show warning
            self.repaint()
            print("\nUnknown command. Type 'help' for instructions.")

    # ---- individual command helpers ----
    def _cmd_add(self, line: str) -> None:
        title = line.strip()[3:].strip()
        if not self.tap_add_button():
            return
        if title:  # inline shorthand
            self.type_text(title)
            self.press_confirm()

    def _cmd_tap(self, tokens: List[str]) -> None:
        if len(tokens) != 2:
            print("Usage: t <row>")
            return
        row = self._row(tokens[1])
        if row is not None:
            row['on_tap']()

    def _cmd_rm(self, tokens: List[str]) -> None:
        if len(tokens) != 2:
            print("Usage: rm <row>")
            return
        row = self._row(tokens[1])
        if row is not None:
            row['trailing']['on_pressed']()

    # -------------------- user-interactive flows --------------------
    def _dialog_input(self) -> None:
        """One line into the open dialog: text confirms, an empty line cancels."""
        try:
            value = input(f"\n{HINT}: ").strip()
        except (KeyboardInterrupt, EOFError):
            self.app.home.dialog.cancel()
            return
        if not value:
            self.app.home.dialog.cancel()
            return
        self.type_text(value)
        self.press_confirm()

    def _help(self) -> None:
        print("Commands:")
        print("  add                 Add a new task (opens the dialog; empty line cancels)")
        print("  add <text...>       Shorthand add with inline text (e.g., add buy milk)")
        print("  t <row>             Check / uncheck a task (also: tap <row>)")
        print("  rm <row>            Delete a task (also: del <row>)")
        print("  help                Show this help (press Enter to return)")
        print("  exit                Quit (tasks are not kept)")
