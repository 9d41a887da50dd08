"""Color & style helpers.

Decisions:
- Widgets carry theme color names ("primary", "muted", "delete"); this
  module maps them to escape codes at paint time.
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Supports palette overrides via environment or project .env file.
"""
from __future__ import annotations
import logging
import os, sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _code(part: str) -> str:
    return f"\033[{part}m" if _ENABLE else ''

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    return f"\033[38;5;{16 + 36 * r6 + 6 * g6 + b6}m"

def _from_hex(hex_code: str) -> str:
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)

def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')
STRIKE = _code('9')

# Default palette: material blue bar, black54-ish muted text, red delete icon
HEX_PRIMARY_DEFAULT = '#2196F3'
HEX_MUTED_DEFAULT = '#757575'
HEX_DELETE_DEFAULT = '#F44336'

_PALETTE_KEYS = ('TODO_PRIMARY', 'TODO_MUTED', 'TODO_DELETE')

def _read_env_file(path: Path) -> dict[str, str]:
    """Palette overrides from a KEY=#RRGGBB file; unknown keys and bad values are skipped."""
    overrides: dict[str, str] = {}
    try:
        lines = path.read_text().splitlines()
    except OSError as exc:
        logger.warning("could not read %s: %s", path, exc)
        return overrides
    for line in lines:
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k, v = k.strip(), v.strip()
        if k in _PALETTE_KEYS and _is_hex(v):
            overrides[k] = '#' + v.lstrip('#')
    return overrides

_env_path = Path(__file__).resolve().parent.parent / '.env'
_ENV_OVERRIDES: dict[str, str] = _read_env_file(_env_path) if _env_path.exists() else {}

def _resolve(key: str, default: str) -> str:
    # priority: real env var > .env override > default
    value = os.environ.get(key)
    if value and _is_hex(value):
        return '#' + value.lstrip('#')
    return _ENV_OVERRIDES.get(key, default)

HEX_PRIMARY = _resolve('TODO_PRIMARY', HEX_PRIMARY_DEFAULT)
HEX_MUTED = _resolve('TODO_MUTED', HEX_MUTED_DEFAULT)
HEX_DELETE = _resolve('TODO_DELETE', HEX_DELETE_DEFAULT)

PRIMARY = _from_hex(HEX_PRIMARY)
MUTED = _from_hex(HEX_MUTED)
DELETE = _from_hex(HEX_DELETE)

NAMED_COLORS = {
    'primary': PRIMARY,
    'muted': MUTED,
    'delete': DELETE,
}

HEADER_COLOR = PRIMARY
AVATAR_COLOR = PRIMARY + BOLD
EMPTY_COLOR = DIM + PRIMARY

def named(name: Optional[str]) -> str:
    """Escape code for a theme color name; unknown or missing names map to ''."""
    if not name:
        return ''
    return NAMED_COLORS.get(name, '')

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE or not any(styles):
        return text
    return ''.join(styles) + text + RESET

__all__ = [
    'color','named','RESET','BOLD','DIM','STRIKE','NAMED_COLORS','HEADER_COLOR','AVATAR_COLOR',
    'EMPTY_COLOR','HEX_PRIMARY','HEX_MUTED','HEX_DELETE','_ENABLE','_USE_TRUECOLOR','_FORCE'
]
