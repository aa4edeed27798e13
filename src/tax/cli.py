"""Top-level Click group for the tax CLI."""

import click

from tax.commands.list_cli import list_cmd
from tax.commands.list_cli import register as register_list_commands
from tax.commands.services import create_services
from tax.commands.task_cli import register as register_task_commands
from tax.commands.taxfile_io import with_error_handling

_ALL_COMMANDS = (None, "list", "ls")


@click.group(invoke_without_command=True)
@click.option("-a", "--all", "show_all", is_flag=True, help="Print all open tasks regardless of section focus")
@click.pass_context
def main(ctx, show_all):
    """tax - CLI task list manager for a markdown file."""
    if show_all and ctx.invoked_subcommand not in _ALL_COMMANDS:
        raise click.UsageError("-a, --all not implemented on this command")
    if ctx.obj is None:
        with with_error_handling():
            ctx.obj = create_services()
    if ctx.invoked_subcommand is None:
        ctx.invoke(list_cmd, show_all=show_all)


register_list_commands(main)
register_task_commands(main)
