"""One row of the todo list: avatar, name, delete icon."""
from typing import Callable, Optional
from models import Task
from widgets import Widget, TextStyle, avatar, icon, icon_button, list_tile, text

PLACEHOLDER_GLYPH = '?'
CHECKED_STYLE = TextStyle(color='muted', strikethrough=True)


def text_style(checked: bool) -> Optional[TextStyle]:
    """Strike through and mute checked tasks; unchecked ones use the default style."""
    if not checked:
        return None
    return CHECKED_STYLE


def glyph(name: str) -> str:
    return name[0] if name else PLACEHOLDER_GLYPH


def todo_item(task: Task, index: int,
              on_toggle: Callable[[Task], None],
              on_delete: Callable[[int], None]) -> Widget:
    return list_tile(
        key=task,
        on_tap=lambda: on_toggle(task),
        leading=avatar(text(glyph(task.name))),
        title=text(task.name, text_style(task.checked)),
        trailing=icon_button(
            icon('delete', color='delete'),
            on_pressed=lambda: on_delete(index),
            tooltip='Delete comment',
        ),
    )
