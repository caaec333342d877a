# folderrunner/scanner.py
"""Two-phase folder scan for each location, with per-item isolation."""

import os

from folderrunner.locations import Location, Locations
from folderrunner.pipeline import execute_file, intake_file
from folderrunner.verifier import location_available

INTAKE = "intake"
EXECUTION = "execution"

_HANDLERS = {
    INTAKE: intake_file,
    EXECUTION: execute_file,
}


def list_entries(folder: str) -> list[str]:
    """Return the full paths of a folder's entries, sorted by name."""
    with os.scandir(folder) as it:
        names = sorted(entry.name for entry in it)
    return [os.path.join(folder, name) for name in names]


def scan_folder(folder: str, phase: str, location: Location, logger=None) -> bool:
    """
    Hand every entry of ``folder`` to the phase's handler.

    A failing entry is logged and skipped; its siblings still run.
    Returns False if the folder itself could not be listed.
    """
    handler = _HANDLERS[phase]
    if logger:
        logger.log_folder(phase, folder)

    try:
        entries = list_entries(folder)
    except OSError as e:
        if logger:
            logger.log_location_error(location.name, f"cannot list {folder}: {e}")
        return False

    for path in entries:
        try:
            handler(path, location, logger)
        except Exception as e:
            if logger:
                logger.log_item_error(path, phase, f"{type(e).__name__}: {e}")
    return True


def process_location(location: Location, logger=None) -> bool:
    """Run the intake pass then the execution pass for one location."""
    if not location_available(location):
        if logger:
            logger.log_location_error(
                location.name, "input or processing folder is missing"
            )
        return False

    scan_folder(location.file.input, INTAKE, location, logger)
    return scan_folder(location.file.processing, EXECUTION, location, logger)


def run_cycle(config: Locations, logger=None):
    """One full pass over every location, in configuration order."""
    for location in config.locations:
        try:
            process_location(location, logger)
        except Exception as e:
            if logger:
                logger.log_location_error(location.name, f"{type(e).__name__}: {e}")
