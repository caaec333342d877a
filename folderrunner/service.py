# folderrunner/service.py
"""The poll loop that drives every location."""

import time

from folderrunner.locations import Locations
from folderrunner.scanner import run_cycle


def run_forever(
    config: Locations,
    logger=None,
    watcher=None,
    max_cycles: int | None = None,
) -> int:
    """
    Scan all locations, sleep ``polling_delay`` ms, repeat.

    With a ``watcher`` the sleep ends early when a file arrives. The loop
    only ends after ``max_cycles`` passes (when given) or when the process
    is interrupted. Returns the number of completed passes.
    """
    cycle = 0
    while max_cycles is None or cycle < max_cycles:
        cycle += 1
        if logger:
            logger.log_cycle(cycle, len(config.locations))
        run_cycle(config, logger)

        if max_cycles is not None and cycle >= max_cycles:
            break
        delay = config.polling_delay / 1000
        if watcher is not None:
            watcher.wait(delay)
        else:
            time.sleep(delay)
    return cycle
