"""Root interactive view: owns the task list and the add dialog.

Every mutation goes through the methods here. The widget tree is rebuilt
from scratch on each ``build()``; row indices are the current positions in
the store, never remembered between builds.
"""
from typing import Callable, List, Optional
from add_dialog import AddTaskDialog
from models import Task
from todo_item import todo_item
from todo_list import TodoList
from widgets import (Widget, TextStyle, app_bar, floating_action_button, icon,
                     list_view, scaffold, text)

TITLE = 'Todo List'
LIST_PADDING = 8.0


class TodoListView:
    def __init__(self, store: Optional[TodoList] = None):
        self.store: TodoList = store if store is not None else TodoList()
        self.dialog = AddTaskDialog(on_submit=self.add_task)

    # -------------------- mutation entry points --------------------
    def add_task(self, name: str) -> Task:
        return self.store.add_task(name)

    def toggle_task(self, task: Task) -> None:
        self.store.toggle_task(task)

    def delete_task(self, index: int) -> Task:
        return self.store.delete_task(index)

    def open_dialog(self) -> None:
        self.dialog.open()

    def subscribe(self, listener: Callable[[object], None]) -> Callable[[], None]:
        """Listen to the list and the dialog at once; returns a single unsubscribe."""
        unsubscribers = [self.store.subscribe(listener), self.dialog.subscribe(listener)]

        def unsubscribe() -> None:
            for fn in unsubscribers:
                fn()

        return unsubscribe

    # -------------------- view --------------------
    def build_items(self) -> List[Widget]:
        return [todo_item(task, idx, self.toggle_task, self.delete_task)
                for idx, task in self.store.entries()]

    def build(self) -> Widget:
        return scaffold(
            app_bar=app_bar(text(TITLE, TextStyle(color='primary', bold=True))),
            body=list_view(self.build_items(), padding=LIST_PADDING),
            floating_action=floating_action_button(
                icon('add'), on_pressed=self.open_dialog, tooltip='Add Item'),
            overlay=self.dialog.build(),
        )
