"""Application shell: the title and the single screen."""
from typing import Optional
from todo_view import TodoListView
from widgets import Widget, material_app

APP_TITLE = 'Todo List'


class TodoApp:
    def __init__(self, home: Optional[TodoListView] = None):
        self.title: str = APP_TITLE
        self.home: TodoListView = home if home is not None else TodoListView()

    def build(self) -> Widget:
        return material_app(self.title, self.home.build())
