"""Recognizers for task lines, section headers, comments and focus markup."""

import re


FOCUS_MARKER = '**'

TASK_LINE_RE = re.compile(r'^\s*[-*]\s+\[(x|\s*|>)\]\s+(.+?)$')
SECTION_LINE_RE = re.compile(r'^(#{1,6})\s+(.+?)\s*$')

# First "//" that is not part of a URL scheme ("https://") and has text on both sides.
_COMMENT_RE = re.compile(r'^(.*?\S.*?)(?<!:)//(.+)$')
_FOCUSED_RE = re.compile(r'\*\*(.+)\*\*')


def is_check_symbol(symbol: str) -> bool:
    return symbol == 'x'


def get_comment(name: str) -> tuple[str, str | None]:
    """Split a task name into (name without comment, comment or None)."""
    m = _COMMENT_RE.match(name)
    if m is None or not m.group(2).strip():
        return name, None
    return m.group(1).strip(), m.group(2).strip()


def is_focused(name: str) -> bool:
    return len(name) > 2 * len(FOCUS_MARKER) and _FOCUSED_RE.fullmatch(name) is not None


def add_focus(name: str) -> str:
    return f'{FOCUS_MARKER}{name}{FOCUS_MARKER}'


def remove_focus(name: str) -> str:
    width = len(FOCUS_MARKER)
    return name[width:-width]


def plain_name_of(name: str) -> tuple[str, bool]:
    """Return (name with focus markup removed, whether it was focused)."""
    if is_focused(name):
        return remove_focus(name), True
    return name, False
