# folderrunner/readiness.py
"""Wait until a newly arrived file has stopped changing."""

import os
import time
from typing import NamedTuple

from folderrunner.errors import ReadinessTimeout


class FileSample(NamedTuple):
    size: int
    mtime_ns: int


def sample_file(file_path: str) -> FileSample:
    """Return the current size and modification time of a file."""
    stat = os.stat(file_path)
    return FileSample(stat.st_size, stat.st_mtime_ns)


def wait_until_ready(
    file_path: str,
    delay_ms: int,
    logger=None,
    timeout_ms: int | None = None,
) -> FileSample:
    """
    Block until two consecutive samples of a file are identical.

    The file is sampled, then re-sampled after every ``delay_ms`` sleep;
    each changed sample becomes the new baseline. With no ``timeout_ms``
    the wait is unbounded. Returns the final (stable) sample.

    Raises:
        OSError: the file vanished or could not be stat'ed.
        ReadinessTimeout: the file was still changing after ``timeout_ms``.
    """
    started = time.monotonic()
    previous = sample_file(file_path)
    samples = 1
    if logger:
        logger.log_readiness_sample(file_path, previous.size, previous.mtime_ns)

    while True:
        time.sleep(delay_ms / 1000)
        current = sample_file(file_path)
        samples += 1
        if logger:
            logger.log_readiness_sample(file_path, current.size, current.mtime_ns)

        if current == previous:
            if logger:
                logger.log_ready(file_path, samples)
            return current

        if timeout_ms is not None:
            waited_ms = (time.monotonic() - started) * 1000
            if waited_ms >= timeout_ms:
                raise ReadinessTimeout(file_path, waited_ms)
        previous = current
