# folderrunner/namer.py
"""Destination filenames, optionally with a timestamp suffix."""

import pathlib
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def timestamp_suffix(now: datetime | None = None) -> str:
    """Return ``_YYYY-MM-DD_HH-MM-SS`` for the given (or current) time."""
    return "_" + (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def destination_name(
    filename: str, timestamped: bool, now: datetime | None = None
) -> str:
    """
    Return the name a file takes in its next folder.

    With ``timestamped`` the suffix goes before the last extension:
    ``a.txt`` -> ``a_2024-01-31_13-05-09.txt``. Names without an
    extension get the suffix at the end.
    """
    if not timestamped:
        return filename
    p = pathlib.PurePath(filename)
    return f"{p.stem}{timestamp_suffix(now)}{p.suffix}"
