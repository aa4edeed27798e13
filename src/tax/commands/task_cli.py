"""Click handlers for commands that modify the taxfile."""

import click

from tax.commands.list_cli import echo_task_list
from tax.commands.services import pass_services
from tax.commands.taxfile_io import with_error_handling, with_taxfile_update
from tax.taxfile_domain.focus import section_focus_edits
from tax.taxfile_domain.line_edits import insert_line, remove_lines, replace_line
from tax.taxfile_domain.parser import parse
from tax.taxfile_domain.placement import Position, place_task
from tax.taxfile_domain.task import Task
from tax.taxfile_domain.views import closed_tasks


def _set_checked(services, task_number, checked):
    fmt = services.formatter
    with with_error_handling():
        with with_taxfile_update(services.store) as update:
            task = update.document.get_task(task_number)
            use_sections = update.document.use_sections
            if task.is_checked == checked:
                state = "checked" if checked else "unchecked"
                click.echo(f"Already {state}: {fmt.numbered_task(task, use_sections)}")
                return
            updated = task.with_checked(checked)
            update.text = replace_line(update.text, task.line_num, updated.line)

        click.echo(f"{'Checked' if checked else 'Unchecked'}: {fmt.numbered_task(updated, use_sections)}")
        services.hook.notify(
            "check",
            "CHECK" if checked else "UNCHECK",
            f'Marked "{task.plain_name}" as {"done" if checked else "not done"}',
            updated,
        )


def _set_task_focus(services, task_number, focus):
    fmt = services.formatter
    with with_error_handling():
        with with_taxfile_update(services.store) as update:
            task = update.document.get_task(task_number)
            use_sections = update.document.use_sections
            if task.is_checked:
                click.echo(f"Task is completed, cannot proceed: {fmt.numbered_task(task, use_sections)}")
                return
            if task.is_focused == focus:
                state = "focused" if focus else "blurred"
                click.echo(f"Already {state}: {fmt.numbered_task(task, use_sections)}")
                return
            updated = task.with_focus(focus)
            update.text = replace_line(update.text, task.line_num, updated.line)

        action = "Focused" if focus else "Blurred"
        click.echo(f"{action}: {fmt.numbered_task(updated, use_sections)}")
        services.hook.notify("focus", "FOCUS" if focus else "BLUR", f'{action} "{task.plain_name}"', updated)


def _set_section_focus(services, section_name, focus):
    with with_error_handling():
        with with_taxfile_update(services.store) as update:
            section = update.document.find_section(section_name)
            if section.is_focused == focus:
                click.echo(f"Already {'focused' if focus else 'blurred'}: {section.plain_name}")
                return
            for line_num, line in section_focus_edits(update.document, section, focus):
                update.text = replace_line(update.text, line_num, line)

        action = "Focused" if focus else "Blurred"
        click.echo(f"{action}: {section.plain_name}")
        services.hook.notify("focus", "FOCUS" if focus else "BLUR", f'{action} section "{section.plain_name}"')


def _set_focus(services, target, focus):
    if target.isdigit():
        _set_task_focus(services, int(target), focus)
    else:
        _set_section_focus(services, target, focus)


def _add(services, name_parts, section, position):
    name = " ".join(name_parts)
    with with_error_handling():
        if not name.strip():
            raise ValueError("Task name cannot be empty")
        with with_taxfile_update(services.store) as update:
            placement = place_task(update.document, position, section)
            task = Task.create(name, placement.task_number, placement.task_line_num)
            update.text = insert_line(update.text, placement.line_num, placement.text_for(task.line))

        services.hook.notify("add", position.value, f'Added "{task.plain_name}"', task)
    echo_task_list(services.formatter, parse(update.text))


@click.command("check")
@click.argument("task_number", type=int)
@pass_services
def check_cmd(services, task_number):
    """Mark the given task as completed."""
    _set_checked(services, task_number, True)


@click.command("uncheck")
@click.argument("task_number", type=int)
@pass_services
def uncheck_cmd(services, task_number):
    """Mark the given task as not completed."""
    _set_checked(services, task_number, False)


@click.command("focus")
@click.argument("target")
@pass_services
def focus_cmd(services, target):
    """Focus the given task number or section name."""
    _set_focus(services, target, True)


@click.command("blur")
@click.argument("target")
@pass_services
def blur_cmd(services, target):
    """Blur the given task number or section name."""
    _set_focus(services, target, False)


@click.command("add")
@click.option("-s", "--section", default=None, help="Section where to add task")
@click.argument("task_name", nargs=-1, required=True)
@pass_services
def add_cmd(services, section, task_name):
    """Add the given task at the top of the task list."""
    _add(services, task_name, section, Position.PREPEND)


@click.command("append")
@click.option("-s", "--section", default=None, help="Section where to add task")
@click.argument("task_name", nargs=-1, required=True)
@pass_services
def append_cmd(services, section, task_name):
    """Add the given task at the bottom of the task list."""
    _add(services, task_name, section, Position.APPEND)


@click.command("prune")
@pass_services
def prune_cmd(services):
    """Remove all completed tasks from the task list."""
    with with_error_handling():
        with with_taxfile_update(services.store) as update:
            pruned = closed_tasks(update.document.tasks)
            if pruned:
                update.text = remove_lines(update.text, [t.line_num for t in pruned])

        if not pruned:
            click.echo("No task to prune")
            return

        message = f"Pruned {len(pruned)} task{'s' if len(pruned) > 1 else ''}"
        click.echo(message)
        for task in pruned:
            click.echo(services.formatter.numbered_task(task))
        services.hook.notify("prune", "PRUNE", message)


def register(group):
    """Register taxfile-modifying commands with the given Click group."""
    group.add_command(check_cmd)
    group.add_command(uncheck_cmd)
    group.add_command(focus_cmd)
    group.add_command(blur_cmd)
    group.add_command(blur_cmd, name="unfocus")
    group.add_command(add_cmd)
    group.add_command(add_cmd, name="push")
    group.add_command(add_cmd, name="prepend")
    group.add_command(append_cmd)
    group.add_command(prune_cmd)
    group.add_command(prune_cmd, name="purge")
