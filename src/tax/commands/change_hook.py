"""Run the user's $TAX_CHANGE_CMD after the taxfile has been modified."""

import os
import shutil
import subprocess

from tax.commands.config import TaxConfig
from tax.taxfile_domain.task import Task


def _flag(value: bool) -> str:
    return "1" if value else "0"


def task_env(task: Task) -> dict[str, str]:
    return {
        "TAX_TASK_NUM": str(task.number),
        "TAX_TASK_NAME": task.name,
        "TAX_TASK_PLAIN_NAME": task.plain_name,
        "TAX_TASK_LINE": task.line,
        "TAX_TASK_LINE_NUM": str(task.line_num),
        "TAX_TASK_CHECKED": _flag(task.is_checked),
        "TAX_TASK_FOCUSED": _flag(task.is_focused),
    }


def change_env(config: TaxConfig, cmd: str, operation: str, message: str,
               task: Task | None = None) -> dict[str, str]:
    """Environment variables describing a change, passed to the hook command."""
    env = {
        "TAX_FILE": config.taxfile_path,
        "TAX_FILE_FOLDER": config.taxfile_dir,
        "TAX_CMD": cmd,
        "TAX_OPERATION": operation,
        "TAX_MESSAGE": message,
    }
    if task is not None:
        env.update(task_env(task))
    return env


class ChangeHook:
    """Runs $TAX_CHANGE_CMD through sh; does nothing when it is not configured."""

    def __init__(self, config: TaxConfig, run=subprocess.run):
        self._config = config
        self._run = run

    def notify(self, cmd: str, operation: str, message: str, task: Task | None = None) -> None:
        if self._config.change_cmd is None:
            return
        sh_path = shutil.which("sh")
        if sh_path is None:
            raise ValueError("Could not find sh")
        env = dict(os.environ)
        env.update(change_env(self._config, cmd, operation, message, task))
        self._run([sh_path, "-c", self._config.change_cmd], env=env, check=False)
