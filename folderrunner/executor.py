# folderrunner/executor.py
"""Run a location's command against a file in the processing folder."""

import os
import shlex
import subprocess
from dataclasses import dataclass

from folderrunner.errors import CommandSpawnError
from folderrunner.locations import Location


@dataclass(frozen=True)
class CommandResult:
    returncode: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


_WINDOWS = os.name == "nt"


def build_command(location: Location, file_path: str):
    """
    Return what is handed to ``subprocess``.

    Shell mode runs ``<process> <path>`` through ``sh -c``. On Windows it is
    one ``cmd /C "..."`` string, since cmd does not understand the backslash
    escaping ``subprocess`` applies to list arguments. Direct mode runs
    ``process`` as the executable with the path as its only argument.
    """
    if not location.shell_command:
        return [location.process, file_path]
    if _WINDOWS:
        return f'cmd /C "{location.process} "{file_path}""'
    return ["sh", "-c", f"{location.process} {shlex.quote(file_path)}"]


def run_command(location: Location, file_path: str, logger=None) -> CommandResult:
    """
    Run the command synchronously and capture its output.

    Raises:
        CommandSpawnError: the process could not be started at all.
    """
    args = build_command(location, file_path)
    if logger:
        logger.log_command(file_path, args, location.shell_command, location.current_dir)

    try:
        completed = subprocess.run(
            args,
            cwd=location.current_dir,
            capture_output=True,
            text=True,
            errors="replace",
        )
    except OSError as e:
        raise CommandSpawnError(args, e) from e

    result = CommandResult(
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
    if logger:
        logger.log_command_result(
            file_path, result.returncode, result.stdout, result.stderr
        )
    return result
