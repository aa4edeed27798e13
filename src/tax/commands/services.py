"""Collaborators shared by the tax commands, carried on the click context."""

import subprocess
from dataclasses import dataclass
from typing import Callable

import click

from tax.commands.change_hook import ChangeHook
from tax.commands.config import TaxConfig, load_config
from tax.commands.formatting import TaskFormatter
from tax.commands.taxfile_io import TaxfileStore


def run_editor(cmd: list[str]) -> None:
    try:
        subprocess.run(cmd, check=False)
    except OSError as e:
        raise ValueError("Could not run $EDITOR") from e


@dataclass
class TaxServices:
    """Bundle of dependencies for the tax commands."""

    config: TaxConfig
    store: TaxfileStore
    hook: ChangeHook
    formatter: TaskFormatter
    run_editor: Callable = run_editor


def create_services(config: TaxConfig | None = None) -> TaxServices:
    if config is None:
        config = load_config()
    return TaxServices(
        config=config,
        store=TaxfileStore(config.taxfile_path),
        hook=ChangeHook(config),
        formatter=TaskFormatter(config.supports_colors),
    )


pass_services = click.make_pass_decorator(TaxServices)
