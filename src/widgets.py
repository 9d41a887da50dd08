"""Declarative widget tree.

Views never draw anything themselves: they return a tree of ``Widget``
nodes. The terminal runtime paints the tree and routes taps and text
input to the callbacks stored in ``props`` (``on_tap``, ``on_pressed``,
``on_changed``).

Colors in ``TextStyle`` are theme names ("primary", "muted", "delete"),
resolved to escape codes only when painting.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence

@dataclass(frozen=True)
class TextStyle:
    color: Optional[str] = None
    strikethrough: bool = False
    bold: bool = False


@dataclass
class Widget:
    kind: str
    props: Dict[str, Any] = field(default_factory=dict)
    children: List["Widget"] = field(default_factory=list)
    key: Any = None

    def walk(self) -> Iterator["Widget"]:
        """Depth-first, pre-order; slot widgets stored in props are included."""
        yield self
        for value in self.props.values():
            if isinstance(value, Widget):
                yield from value.walk()
        for child in self.children:
            yield from child.walk()

    def find_all(self, kind: str) -> List["Widget"]:
        return [w for w in self.walk() if w.kind == kind]

    def find(self, kind: str) -> Optional["Widget"]:
        for w in self.walk():
            if w.kind == kind:
                return w
        return None

    def __getitem__(self, name: str) -> Any:
        return self.props[name]


# -------------------- leaf widgets --------------------
def text(value: str, style: Optional[TextStyle] = None) -> Widget:
    return Widget('text', {'value': value, 'style': style})


def icon(name: str, color: Optional[str] = None) -> Widget:
    return Widget('icon', {'name': name, 'color': color})


def avatar(child: Widget) -> Widget:
    return Widget('avatar', {'child': child})


def text_field(value: str, hint: str, on_changed: Callable[[str], None]) -> Widget:
    return Widget('text_field', {'value': value, 'hint': hint, 'on_changed': on_changed, 'autofocus': True})


# -------------------- buttons --------------------
def icon_button(child: Widget, on_pressed: Callable[[], None], tooltip: str = '') -> Widget:
    return Widget('icon_button', {'icon': child, 'on_pressed': on_pressed, 'tooltip': tooltip})


def text_button(label: str, on_pressed: Callable[[], None]) -> Widget:
    return Widget('text_button', {'label': label, 'on_pressed': on_pressed})


def floating_action_button(child: Widget, on_pressed: Callable[[], None], tooltip: str = '') -> Widget:
    return Widget('floating_action_button', {'icon': child, 'on_pressed': on_pressed, 'tooltip': tooltip})


# -------------------- layout --------------------
def list_tile(title: Widget, on_tap: Callable[[], None], leading: Optional[Widget] = None,
              trailing: Optional[Widget] = None, key: Any = None) -> Widget:
    return Widget('list_tile', {'leading': leading, 'title': title, 'trailing': trailing, 'on_tap': on_tap}, key=key)


def list_view(children: Sequence[Widget], padding: float = 0.0) -> Widget:
    return Widget('list_view', {'padding': padding}, list(children))


def app_bar(title: Widget) -> Widget:
    return Widget('app_bar', {'title': title})


def alert_dialog(title: Widget, content: Widget, actions: Sequence[Widget], dismissible: bool = False) -> Widget:
    return Widget('alert_dialog', {'title': title, 'content': content, 'dismissible': dismissible}, list(actions))


def scaffold(app_bar: Widget, body: Widget, floating_action: Optional[Widget] = None,
             overlay: Optional[Widget] = None) -> Widget:
    return Widget('scaffold', {'app_bar': app_bar, 'body': body,
                               'floating_action': floating_action, 'overlay': overlay})


def material_app(title: str, home: Widget) -> Widget:
    return Widget('material_app', {'title': title, 'home': home})


# -------------------- event routing --------------------
def interactive_root(tree: Widget) -> Widget:
    """Subtree that may receive input right now.

    An open modal overlay captures all input; the widgets underneath stay
    visible but cannot be tapped until it closes.
    """
    for w in tree.walk():
        if w.kind == 'scaffold' and w['overlay'] is not None:
            return w['overlay']
    return tree
