# folderrunner/verifier.py
"""Startup and per-cycle checks that configured folders exist."""

import os

from folderrunner.locations import Location, Locations


def missing_paths(location: Location) -> list[tuple[str, str]]:
    """Return (role, path) for every configured folder that does not exist."""
    pairs = location.file.paths()
    if location.current_dir is not None:
        pairs.append(("current_dir", location.current_dir))
    return [(role, path) for role, path in pairs if not os.path.isdir(path)]


def verify_paths(config: Locations, logger=None) -> bool:
    """
    Check every folder of every location before the poll loop starts.

    All locations are checked even after the first miss, so each missing
    folder gets its own error line. Returns True only if nothing is missing.
    """
    ok = True
    for location in config.locations:
        for role, path in missing_paths(location):
            ok = False
            if logger:
                logger.log_missing_path(location.name, role, path)
    return ok


def location_available(location: Location) -> bool:
    """Input and processing folders must still exist for a pass to run."""
    return (
        os.path.isdir(location.file.input)
        and os.path.isdir(location.file.processing)
    )
