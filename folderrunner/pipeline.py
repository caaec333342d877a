# folderrunner/pipeline.py
"""Per-file handlers: intake (input -> processing) and execution (run -> route)."""

import os

from folderrunner.errors import UnexpectedDirectoryError
from folderrunner.executor import run_command
from folderrunner.locations import Location
from folderrunner.readiness import wait_until_ready
from folderrunner.router import move_into, route_outcome


def intake_file(file_path: str, location: Location, logger=None) -> dict:
    """
    Wait for a file in the input folder to settle, then move it into the
    processing folder. Directories are left alone.

    Returns:
        {
            "decision": "skipped" | "moved",
            "destination": str | None
        }
    """
    if os.path.isdir(file_path):
        return {"decision": "skipped", "destination": None}

    wait_until_ready(
        file_path,
        location.readiness_delay,
        logger,
        timeout_ms=location.readiness_timeout,
    )

    target = move_into(
        file_path, location.file.processing, location.processing_timestamp
    )
    if logger:
        logger.log_move(file_path, target, "intake")
    return {"decision": "moved", "destination": target}


def execute_file(file_path: str, location: Location, logger=None) -> dict:
    """
    Run the location's command against a file in the processing folder and
    route it by exit status.

    Returns:
        {
            "returncode": int,
            "decision": "completed" | "failed" | "deleted" | "gone",
            "destination": str | None
        }

    Raises:
        UnexpectedDirectoryError: the entry is a directory; nothing is touched.
        CommandSpawnError: the command could not be started; the file stays put.
    """
    if os.path.isdir(file_path):
        raise UnexpectedDirectoryError(file_path)

    result = run_command(location, file_path, logger)

    # The command may have moved or removed the file itself
    if not os.path.exists(file_path):
        return {
            "returncode": result.returncode,
            "decision": "gone",
            "destination": None,
        }

    routing = route_outcome(file_path, result.succeeded, location, logger)
    return {"returncode": result.returncode, **routing}
