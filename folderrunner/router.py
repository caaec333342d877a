# folderrunner/router.py
"""Move files between folders and route them once their command has run."""

import os
import pathlib
from datetime import datetime

from folderrunner.locations import Location
from folderrunner.namer import destination_name


def move_into(
    file_path: str,
    dest_dir: str,
    timestamped: bool,
    now: datetime | None = None,
) -> str:
    """
    Rename a file into ``dest_dir`` and return its new path.

    This is a plain rename: no directories are created and an existing
    file of the same name is handled however the platform's rename does.
    """
    name = destination_name(pathlib.Path(file_path).name, timestamped, now)
    target = os.path.join(dest_dir, name)
    os.rename(file_path, target)
    return target


def route_outcome(
    file_path: str,
    succeeded: bool,
    location: Location,
    logger=None,
    now: datetime | None = None,
) -> dict:
    """
    Move a processed file to completed/failed, or delete it when the
    folder for that outcome is not configured.

    Returns:
        {
            "decision": "completed" | "failed" | "deleted",
            "destination": str | None
        }
    """
    dest_dir = location.file.completed if succeeded else location.file.failed

    if dest_dir is None:
        os.remove(file_path)
        if logger:
            logger.log_delete(file_path, succeeded)
        return {"decision": "deleted", "destination": None}

    target = move_into(file_path, dest_dir, location.complete_timestamp, now)
    decision = "completed" if succeeded else "failed"
    if logger:
        logger.log_move(file_path, target, decision)
    return {"decision": decision, "destination": target}
