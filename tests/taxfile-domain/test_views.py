"""Unit tests for task list views and current task selection."""

from tax.taxfile_domain.parser import parse
from tax.taxfile_domain.views import (
    closed_tasks,
    current_task,
    focused_tasks,
    open_tasks,
    tasks_in_section,
    visible_tasks,
)


STD_CONTENTS = """\
# Not a task
- [ ] Standard unchecked
- [] Collapsed unchecked
- [ ] **Standard unchecked focused**
* [ ] Star unchecked
Also not a task
- [x] Checked
- [x] **Focused checked**
"""


FOCUSED_SECTION = """\
# Work
- [ ] Write report
- [ ] **Review PR**
# **Home**
- [ ] Water plants
- [x] Take out trash
- [ ] Fix sink
"""


def _numbers(tasks):
    return [t.number for t in tasks]


class TestFilters:

    def test_open(self):
        assert _numbers(open_tasks(parse(STD_CONTENTS).tasks)) == [1, 2, 3, 4]

    def test_closed(self):
        assert _numbers(closed_tasks(parse(STD_CONTENTS).tasks)) == [5, 6]

    def test_focused(self):
        assert _numbers(focused_tasks(parse(STD_CONTENTS).tasks)) == [3, 6]

    def test_not_focused(self):
        assert _numbers(focused_tasks(parse(STD_CONTENTS).tasks, False)) == [1, 2, 4, 5]

    def test_focused_open_composes(self):
        assert _numbers(focused_tasks(open_tasks(parse(STD_CONTENTS).tasks))) == [3]

    def test_in_section(self):
        document = parse(FOCUSED_SECTION)
        assert _numbers(tasks_in_section(document.tasks, document.sections[1])) == [3, 4, 5]

    def test_filters_keep_task_fields(self):
        document = parse(STD_CONTENTS)
        assert open_tasks(document.tasks)[2] == document.tasks[2]

    def test_empty(self):
        assert open_tasks([]) == []


class TestVisibleTasks:

    def test_restricted_to_focused_section(self):
        assert _numbers(visible_tasks(parse(FOCUSED_SECTION))) == [3, 5]

    def test_show_all_ignores_section_focus(self):
        assert _numbers(visible_tasks(parse(FOCUSED_SECTION), show_all=True)) == [1, 2, 3, 5]


class TestCurrentTask:

    def test_empty_document(self):
        assert current_task(parse("")) is None

    def test_focused_open_task_first(self):
        assert current_task(parse(STD_CONTENTS)).number == 3

    def test_first_open_task_without_focus(self):
        assert current_task(parse("- [x] a\n- [ ] b\n- [ ] c\n")).number == 2

    def test_only_closed_tasks(self):
        assert current_task(parse("- [x] a\n")) is None

    def test_focused_section_limits_candidates(self):
        # Task 2 is focused but lives outside the focused section.
        assert current_task(parse(FOCUSED_SECTION)).number == 3

    def test_cycle_rotates_by_minute(self):
        document = parse("- [ ] a\n- [ ] b\n- [ ] c\n")
        assert current_task(document, cycle=True, minute=0).number == 1
        assert current_task(document, cycle=True, minute=4).number == 2
        assert current_task(document, cycle=True, minute=5).number == 3

    def test_cycle_prefers_focused(self):
        document = parse("- [ ] a\n- [ ] **b**\n- [ ] c\n")
        assert current_task(document, cycle=True, minute=2).number == 2
