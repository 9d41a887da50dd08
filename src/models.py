"""Data models for the terminal todo list.

Only exposes the Task dataclass. Tasks are compared by identity: two
entries with the same name are still two different rows, and the store
locates the task to toggle by reference rather than by value.
"""
from __future__ import annotations
from dataclasses import dataclass

@dataclass(eq=False)
class Task:
    """A single todo entry.

    Fields:
        name: Short, single-line text shown in the row; not reassigned after creation.
        checked: True once the row has been tapped an odd number of times.
    """
    name: str
    checked: bool = False

    def toggle(self) -> None:
        self.checked = not self.checked

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(name={self.name!r}, checked={self.checked})"
