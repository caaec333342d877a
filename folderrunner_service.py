# folderrunner_service.py
"""Entry point to start the folder runner service."""

import argparse
import sys

from folderrunner.config_loader import ConfigLoader
from folderrunner.errors import ConfigError
from folderrunner.logger import RunnerLogger
from folderrunner.service import run_forever
from folderrunner.verifier import verify_paths
from folderrunner.watcher import ArrivalWatcher

EXIT_OK = 0
EXIT_MISSING_PATHS = 1
EXIT_CONFIG_ERROR = 2


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Watch input folders, run a command on each settled file, "
                    "and route it by exit status."
    )
    parser.add_argument(
        "--config", default="config",
        help="Directory holding locations.json and settings.json (default: ./config)",
    )
    parser.add_argument(
        "--check", action="store_true",
        help="Verify configured folders and exit",
    )
    parser.add_argument(
        "--once", action="store_true",
        help="Run a single pass over all locations and exit",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = ConfigLoader(args.config)

    try:
        settings = config.settings
        locations = config.locations
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logger = RunnerLogger(settings["log_path"], settings["log_level"])

    if not verify_paths(locations, logger):
        print("Configured folders are missing; not starting.", file=sys.stderr)
        return EXIT_MISSING_PATHS
    if args.check:
        print(f"All folders present for {len(locations.locations)} location(s).")
        return EXIT_OK

    if args.once:
        run_forever(locations, logger, max_cycles=1)
        return EXIT_OK

    watcher = None
    if settings["wake_on_events"]:
        watcher = ArrivalWatcher(locations)
        watcher.start()

    print(f"Folder runner watching {len(locations.locations)} location(s)")
    print(f"Poll interval: {locations.polling_delay} ms")
    if settings["log_path"]:
        print(f"Log: {settings['log_path']}")
    print("Press Ctrl+C to stop.\n")

    try:
        run_forever(locations, logger, watcher=watcher)
    except KeyboardInterrupt:
        pass
    finally:
        if watcher is not None:
            watcher.stop()
    print("\nFolder runner stopped.")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
