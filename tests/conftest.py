# tests/conftest.py

from __future__ import annotations

import builtins
from typing import Callable, Iterable, List

import pytest

from app import TodoApp
from cli import CLI
from renderer import Renderer
from todo_list import TodoList
from todo_view import TodoListView


@pytest.fixture()
def store() -> TodoList:
    return TodoList()


@pytest.fixture()
def view(store: TodoList) -> TodoListView:
    return TodoListView(store)


@pytest.fixture()
def app(view: TodoListView) -> TodoApp:
    return TodoApp(view)


@pytest.fixture()
def cli(app: TodoApp, monkeypatch: pytest.MonkeyPatch) -> CLI:
    """Mounted runtime with a fixed width and no alternate screen."""
    monkeypatch.setenv("TODO_ALT_SCREEN", "0")
    runtime = CLI(app, renderer=Renderer(width=60))
    runtime.mount()
    return runtime


@pytest.fixture()
def feed_input(monkeypatch: pytest.MonkeyPatch) -> Callable[[Iterable[str]], List[str]]:
    """
    Replace input() with a scripted sequence of lines.

    Once the script runs out, input() raises EOFError, the same as a
    closed stdin. Returns the list of prompts that were shown.
    """

    def install(lines: Iterable[str]) -> List[str]:
        remaining = list(lines)
        prompts: List[str] = []

        def fake_input(prompt: str = "") -> str:
            prompts.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr(builtins, "input", fake_input)
        return prompts

    return install
