"""Click handlers for read-only commands."""

import shlex

import click

from tax.commands.services import pass_services
from tax.commands.taxfile_io import TaxfileError, with_error_handling
from tax.taxfile_domain.document import TaskDocument
from tax.taxfile_domain.line_edits import split_lines
from tax.taxfile_domain.parser import parse
from tax.taxfile_domain.views import current_task, visible_tasks


def read_document_or_empty(store) -> TaskDocument:
    """Parse the taxfile; a missing or unreadable file lists as no tasks."""
    try:
        return parse(store.read())
    except TaxfileError:
        return TaskDocument()


def echo_task_list(formatter, document: TaskDocument, show_all: bool = False) -> None:
    """Print open tasks, grouped under their section headers when sections are in use."""
    section_number = None
    for task in visible_tasks(document, show_all):
        if document.use_sections and task.section is not None and task.section.number != section_number:
            if section_number is not None:
                click.echo()
            click.echo(f"# {formatter.section_name(task.section)}")
            section_number = task.section.number
        click.echo(formatter.numbered_task(task))


@click.command("list")
@click.option("-a", "--all", "show_all", is_flag=True, help="Print all open tasks regardless of section focus")
@pass_services
def list_cmd(services, show_all):
    """Print all open tasks of the list, or of the focused section if any."""
    show_all = show_all or click.get_current_context().find_root().params.get("show_all", False)
    echo_task_list(services.formatter, read_document_or_empty(services.store), show_all)


def _echo_current(services, cycle):
    document = read_document_or_empty(services.store)
    task = current_task(document, cycle=cycle)
    if task is not None:
        click.echo(services.formatter.numbered_task(task, document.use_sections))


@click.command("current")
@pass_services
def current_cmd(services):
    """Print the first open (focused if any) task of the list."""
    _echo_current(services, cycle=False)


@click.command("cycle")
@pass_services
def cycle_cmd(services):
    """Like current, but changes task every minute if no task is focused."""
    _echo_current(services, cycle=True)


@click.command("cat")
@pass_services
def cat_cmd(services):
    """Print the content of the task file without any processing."""
    with with_error_handling():
        content = services.store.read()
    for line in split_lines(content):
        click.echo(line)


@click.command("which")
@pass_services
def which_cmd(services):
    """Print the path of the current task list file."""
    click.echo(services.config.taxfile_path)


@click.command("edit")
@pass_services
def edit_cmd(services):
    """Edit the current task list in $EDITOR."""
    with with_error_handling():
        if services.config.editor is None:
            raise ValueError('Please set $EDITOR in environment to use "edit".')
        services.run_editor(shlex.split(services.config.editor) + [services.config.taxfile_path])


def register(group):
    """Register read-only commands with the given Click group."""
    group.add_command(list_cmd)
    group.add_command(list_cmd, name="ls")
    group.add_command(current_cmd)
    group.add_command(cycle_cmd)
    group.add_command(cat_cmd)
    group.add_command(cat_cmd, name="view")
    group.add_command(which_cmd)
    group.add_command(edit_cmd)
