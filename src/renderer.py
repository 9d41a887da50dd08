"""Paint a widget tree as terminal lines.

Rows of the list are numbered from 1; those numbers are what the user
types to tap a row, so the painter and the command loop must agree on
them (both walk ``list_tile`` widgets in tree order).
"""
import re, shutil, unicodedata
from typing import Callable, Dict, List, Optional
from theme import color, named, AVATAR_COLOR, BOLD, EMPTY_COLOR, HEADER_COLOR, STRIKE
from widgets import Widget, TextStyle

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
ICONS: Dict[str, str] = {'delete': '✗', 'add': '+'}
CHECKED_BOX = '[x]'
UNCHECKED_BOX = '[ ]'
MIN_WIDTH = 32
MAX_DIALOG_WIDTH = 48
PADDING_UNIT = 8.0  # one blank line per 8 logical pixels


def char_width(ch: str) -> int:
    """Terminal cells taken by one character: wide CJK/emoji 2, combining marks 0."""
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ('W', 'F') else 1


def cell_width(s: str) -> int:
    return sum(char_width(ch) for ch in s)


def visible_len(s: str) -> int:
    return cell_width(ANSI_RE.sub('', s))


def pad_to(s: str, width: int) -> str:
    pad = width - visible_len(s)
    return s + ' ' * pad if pad > 0 else s


def _break_word(word: str, limit: int) -> List[str]:
    pieces: List[str] = []
    current = ''
    for ch in word:
        if current and cell_width(current + ch) > limit:
            pieces.append(current)
            current = ''
        current += ch
    pieces.append(current)
    return pieces


def wrap_words(value: str, limit: int) -> List[str]:
    """Greedy word wrap by terminal cells; words longer than the limit are hard-broken."""
    limit = max(1, limit)
    lines: List[str] = []
    current = ''
    for w in value.split():
        candidate = w if not current else current + ' ' + w
        if cell_width(candidate) <= limit:
            current = candidate
            continue
        if current:
            lines.append(current)
        *full, current = _break_word(w, limit)
        lines.extend(full)
    if current:
        lines.append(current)
    return lines or ['']


def styled(value: str, style: Optional[TextStyle]) -> str:
    if style is None:
        return value
    codes = [named(style.color)]
    if style.bold:
        codes.append(BOLD)
    if style.strikethrough:
        codes.append(STRIKE)
    return color(value, *codes)


class Renderer:
    def __init__(self, width: Optional[int] = None):
        if width is None:
            width = shutil.get_terminal_size((80, 24)).columns
        self.width: int = max(MIN_WIDTH, width)
        self._painters: Dict[str, Callable[[Widget], List[str]]] = {
            'material_app': self._paint_material_app,
            'scaffold': self._paint_scaffold,
            'app_bar': self._paint_app_bar,
            'list_view': self._paint_list_view,
            'alert_dialog': self._paint_alert_dialog,
            'floating_action_button': self._paint_floating_action_button,
            'text': lambda w: [styled(w['value'], w['style'])],
        }

    def paint(self, widget: Widget) -> List[str]:
        painter = self._painters.get(widget.kind)
        if painter is None:
            raise ValueError(f'No painter for widget kind "{widget.kind}".')
        return painter(widget)

    # ---- containers ----
    def _paint_material_app(self, widget: Widget) -> List[str]:
        return self.paint(widget['home'])

    def _paint_scaffold(self, widget: Widget) -> List[str]:
        lines = self.paint(widget['app_bar'])
        lines.extend(self.paint(widget['body']))
        if widget['overlay'] is not None:
            lines.extend(self.paint(widget['overlay']))
        elif widget['floating_action'] is not None:
            lines.extend(self.paint(widget['floating_action']))
        return lines

    def _paint_app_bar(self, widget: Widget) -> List[str]:
        title = self.paint(widget['title'])[0]
        return [' ' + title, color('━' * self.width, HEADER_COLOR)]

    def _paint_list_view(self, widget: Widget) -> List[str]:
        gap = [''] * int(widget['padding'] // PADDING_UNIT)
        tiles = [c for c in widget.children if c.kind == 'list_tile']
        if not tiles:
            return gap + [' ' + color('(empty)', EMPTY_COLOR)] + gap
        lines: List[str] = []
        for number, tile in enumerate(tiles, start=1):
            lines.extend(self._paint_list_tile(tile, number))
        return gap + lines + gap

    # ---- rows ----
    def _paint_list_tile(self, tile: Widget, number: int) -> List[str]:
        title: Widget = tile['title']
        style: Optional[TextStyle] = title['style']
        # the box carries the checked state even when escape codes are disabled
        struck = style is not None and style.strikethrough
        prefix = f' {number}. ' + (CHECKED_BOX if struck else UNCHECKED_BOX) + ' '
        leading = ''
        if tile['leading'] is not None:
            glyph = tile['leading']['child']['value']
            leading = color(f'({glyph})', AVATAR_COLOR) + ' '
        trailing = ''
        if tile['trailing'] is not None:
            trailing = ' ' + self._icon(tile['trailing']['icon'])
        indent = len(prefix) + visible_len(leading)
        limit = self.width - indent - visible_len(trailing) - 1
        raw_lines = wrap_words(title['value'], limit)
        lines: List[str] = []
        for i, raw in enumerate(raw_lines):
            body = styled(raw, style)
            if i == 0:
                head = prefix + leading + body
                lines.append(pad_to(head, self.width - visible_len(trailing)) + trailing)
            else:
                lines.append(' ' * indent + body)
        return lines

    def _icon(self, widget: Widget) -> str:
        glyph = ICONS.get(widget['name'], '?')
        return color(glyph, named(widget['color']))

    # ---- overlays / actions ----
    def _paint_floating_action_button(self, widget: Widget) -> List[str]:
        label = f"[{self._icon(widget['icon'])}] {widget['tooltip']}"
        return [' ' * max(0, self.width - visible_len(label) - 1) + label]

    def _paint_alert_dialog(self, widget: Widget) -> List[str]:
        inner = min(self.width, MAX_DIALOG_WIDTH) - 4
        title = self.paint(widget['title'])[0]
        field: Widget = widget['content']
        if field['value']:
            entry = field['value'] + '_'
        else:
            entry = color(field['hint'], EMPTY_COLOR)
        actions = ' '.join(f"[{b['label']}]" for b in widget.children if b.kind == 'text_button')
        top_label = f' {title} '
        top = '┌─' + top_label + '─' * max(0, inner + 1 - visible_len(top_label)) + '┐'
        rows = [pad_to(line, inner) for line in wrap_words(entry, inner)] if field['value'] else [pad_to(entry, inner)]
        rows.append(' ' * max(0, inner - len(actions)) + actions)
        body = ['│ ' + r + ' │' for r in rows]
        bottom = '└' + '─' * (inner + 2) + '┘'
        return [''] + [' ' + line for line in [top] + body + [bottom]]
