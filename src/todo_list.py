"""Task-list store: the ordered, in-memory list of tasks behind the screen.

Insertion order is display order. Toggling works on the Task object handed
out by the row; deleting works on the row position computed at build time.
"""
import logging
from typing import Iterator, List, Tuple
from events import Observable
from models import Task

logger = logging.getLogger(__name__)


class TodoList(Observable):
    def __init__(self) -> None:
        super().__init__()
        self._tasks: List[Task] = []

    # -------------------- queries --------------------
    @property
    def tasks(self) -> List[Task]:
        """Snapshot of the current tasks, in display order."""
        return list(self._tasks)

    def entries(self) -> Iterator[Tuple[int, Task]]:
        return enumerate(list(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    def __contains__(self, task: object) -> bool:
        return any(t is task for t in self._tasks)

    # -------------------- task operations --------------------
    def add_task(self, name: str) -> Task:
        """Append a new unchecked task. The name is stored as given."""
        task = Task(name=name, checked=False)
        self._tasks.append(task)
        logger.debug("added task #%d %r", len(self._tasks), name)
        self._notify()
        return task

    def toggle_task(self, task: Task) -> None:
        if task not in self:
            raise ValueError(f'Task "{task.name}" is not in this list.')
        task.toggle()
        logger.debug("toggled %r -> checked=%s", task.name, task.checked)
        self._notify()

    def delete_task(self, index: int) -> Task:
        """Remove and return the task at ``index``.

        Rows are numbered fresh on every build, so an index outside
        ``0 <= index < len(self)`` means a caller kept a stale one.
        """
        if index < 0 or index >= len(self._tasks):
            raise IndexError(f'No task at index {index} (list has {len(self._tasks)}).')
        task = self._tasks.pop(index)
        logger.debug("deleted task at %d %r", index, task.name)
        self._notify()
        return task

    def __str__(self) -> str:
        done = sum(1 for t in self._tasks if t.checked)
        return f'Todo: {len(self._tasks)} tasks, Done: {done} tasks'
