"""Line-oriented edits on raw taxfile text. Line numbers are 1-based."""

from typing import Iterable


def split_lines(text: str) -> list[str]:
    """Split text on '\\n' only; a trailing newline does not add an empty line."""
    if not text:
        return []
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def join_lines(lines: list[str]) -> str:
    return ''.join(f'{line}\n' for line in lines)


def insert_line(text: str, at_line: int, new_line: str) -> str:
    """Insert new_line before line at_line, or append it when at_line is past the end."""
    lines = split_lines(text)
    if at_line < 1:
        at_line = 1
    lines.insert(min(at_line, len(lines) + 1) - 1, new_line)
    return join_lines(lines)


def replace_line(text: str, at_line: int, new_line: str) -> str:
    lines = split_lines(text)
    if 1 <= at_line <= len(lines):
        lines[at_line - 1] = new_line
    return join_lines(lines)


def remove_lines(text: str, at_lines: Iterable[int]) -> str:
    to_remove = set(at_lines)
    return join_lines([
        line for line_num, line in enumerate(split_lines(text), 1)
        if line_num not in to_remove
    ])
