"""Exclusive section focus: at most one section carries focus markup."""

from tax.taxfile_domain.document import TaskDocument
from tax.taxfile_domain.section import Section


def section_focus_edits(document: TaskDocument, section: Section, focus: bool) -> list[tuple[int, str]]:
    """Return (line_num, new_line) replacements that apply the focus change.

    Focusing a section also blurs every other focused section.
    """
    edits = [(section.line_num, section.with_focus(focus).line)]
    if focus:
        edits.extend(
            (other.line_num, other.with_focus(False).line)
            for other in document.sections
            if other.number != section.number and other.is_focused
        )
    return edits
