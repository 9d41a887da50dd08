# tests/test_renderer.py

from __future__ import annotations

import pytest

import renderer
import theme
from renderer import ANSI_RE, Renderer, visible_len, wrap_words
from todo_view import TodoListView


def _plain(lines: list[str]) -> list[str]:
    return [ANSI_RE.sub("", line) for line in lines]


def test_empty_list_shows_placeholder(view: TodoListView) -> None:
    lines = _plain(Renderer(width=40).paint(view.build()))

    assert lines[0].strip() == "Todo List"
    assert any(line.strip() == "(empty)" for line in lines)
    assert lines[-1].rstrip().endswith("[+] Add Item")


def test_rows_are_numbered_with_avatar_and_delete_icon(view: TodoListView) -> None:
    view.add_task("Buy milk")
    view.add_task("Walk dog")

    lines = _plain(Renderer(width=40).paint(view.build()))
    rows = [line for line in lines if line.startswith(" 1.") or line.startswith(" 2.")]

    assert rows[0].startswith(" 1. [ ] (B) Buy milk")
    assert rows[1].startswith(" 2. [ ] (W) Walk dog")
    assert all(len(row) == 40 and row.endswith("✗") for row in rows)


def test_long_names_wrap_under_the_title(view: TodoListView) -> None:
    view.add_task("one two three four five six seven eight nine ten")

    lines = _plain(Renderer(width=32).paint(view.build()))
    start = next(i for i, line in enumerate(lines) if line.startswith(" 1."))

    # continuation lines sit under the title, past number, box and avatar
    assert lines[start + 1].startswith(" " * 12)
    assert any(line.strip().endswith("ten") for line in lines[start + 1:])


def test_open_dialog_replaces_add_button(view: TodoListView) -> None:
    view.open_dialog()

    lines = _plain(Renderer(width=60).paint(view.build()))
    text = "\n".join(lines)

    assert "Add a new todo item" in text
    assert "Type your new todo" in text
    assert "[Add]" in text
    assert "[+] Add Item" not in text
    # box edges line up
    box = [line for line in lines if line.strip()[:1] in ("┌", "│", "└")]
    assert len({len(line) for line in box}) == 1


def test_dialog_shows_typed_text(view: TodoListView) -> None:
    view.open_dialog()
    view.dialog.edit("Read book")

    text = "\n".join(_plain(Renderer(width=60).paint(view.build())))

    assert "Read book_" in text
    assert "Type your new todo" not in text


def test_wrap_words() -> None:
    assert wrap_words("", 10) == [""]
    assert wrap_words("a bb ccc", 4) == ["a bb", "ccc"]
    assert wrap_words("averyveryverylongword x", 5) == ["avery", "veryv", "erylo", "ngwor", "d x"]


def _row(view: TodoListView) -> str:
    lines = Renderer(width=40).paint(view.build())
    return next(line for line in lines if ANSI_RE.sub("", line).startswith(" 1."))


@pytest.mark.parametrize("enabled", [True, False])
def test_checked_row_paints_differently(view: TodoListView, monkeypatch: pytest.MonkeyPatch, enabled: bool) -> None:
    monkeypatch.setattr(theme, "_ENABLE", enabled)
    monkeypatch.setattr(renderer, "STRIKE", "\033[9m" if enabled else "")
    monkeypatch.setitem(theme.NAMED_COLORS, "muted", "\033[38;5;244m" if enabled else "")
    task = view.add_task("Buy milk")

    before = _row(view)
    view.toggle_task(task)
    after = _row(view)

    assert before != after
    assert ANSI_RE.sub("", before).startswith(" 1. [ ] (B) Buy milk")
    assert ANSI_RE.sub("", after).startswith(" 1. [x] (B) Buy milk")
    if enabled:
        assert "\033[9m" in after and "\033[9m" not in before
    else:
        assert after == ANSI_RE.sub("", after)


def test_long_word_in_dialog_keeps_box_edges(view: TodoListView) -> None:
    view.open_dialog()
    view.dialog.edit("x" * 100)

    lines = _plain(Renderer(width=60).paint(view.build()))
    box = [line for line in lines if line.strip()[:1] in ("┌", "│", "└")]

    assert len(box) > 4
    assert len({visible_len(line) for line in box}) == 1


def test_long_word_in_row_stays_within_width(view: TodoListView) -> None:
    view.add_task("y" * 80)

    lines = _plain(Renderer(width=40).paint(view.build()))

    assert all(visible_len(line) <= 40 for line in lines)


def test_wide_characters_keep_delete_column_aligned(view: TodoListView) -> None:
    view.add_task("牛乳を買う")
    view.add_task("Walk dog")

    rows = [line for line in _plain(Renderer(width=40).paint(view.build())) if line.endswith("✗")]

    assert [visible_len(r) for r in rows] == [40, 40]
    # six double-width characters (the avatar glyph too): six fewer code points
    assert len(rows[0]) == len(rows[1]) - 6
