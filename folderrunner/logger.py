# folderrunner/logger.py
"""Structured JSON-line logger for all folder runner actions."""

import json
import pathlib
import logging
from datetime import datetime

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class RunnerLogger:
    """Writes console log lines and, optionally, JSON-line activity entries."""

    def __init__(self, log_path: str | None = None, level: str | int = "INFO"):
        self._log_path = pathlib.Path(log_path) if log_path else None
        if self._log_path is not None:
            self._log_path.parent.mkdir(parents=True, exist_ok=True)

        # Also configure Python's logging for console output
        self._py_logger = logging.getLogger("folderrunner")
        self._py_logger.setLevel(_resolve_level(level))
        if not self._py_logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter("[%(levelname)s] %(message)s")
            )
            self._py_logger.addHandler(handler)

    @property
    def log_path(self) -> pathlib.Path | None:
        return self._log_path

    def _write(self, entry: dict):
        """Append a JSON-line entry to the log file."""
        if self._log_path is None:
            return
        entry["timestamp"] = datetime.now().isoformat()
        with open(self._log_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_cycle(self, cycle: int, location_count: int):
        self._py_logger.log(
            TRACE, f"Poll cycle {cycle} over {location_count} location(s)"
        )

    def log_folder(self, phase: str, folder: str):
        self._py_logger.log(TRACE, f"Scanning {phase} folder: {folder}")

    def log_readiness_sample(self, file_path: str, size: int, mtime_ns: int):
        self._py_logger.log(
            TRACE, f"Sampled {file_path}: size={size}, mtime_ns={mtime_ns}"
        )

    def log_ready(self, file_path: str, samples: int):
        """Log a file that has stopped changing."""
        self._py_logger.debug(f"Ready: {file_path} after {samples} samples")

    def log_move(self, source: str, destination: str, phase: str):
        """Log a file moved between folders."""
        entry = {
            "action": "move",
            "phase": phase,
            "file": source,
            "destination": destination,
        }
        self._write(entry)
        self._py_logger.info(f"Moved ({phase}): {source} -> {destination}")

    def log_delete(self, file_path: str, succeeded: bool):
        """Log a file deleted because no destination is configured."""
        entry = {"action": "delete", "file": file_path, "succeeded": succeeded}
        self._write(entry)
        outcome = "completed" if succeeded else "failed"
        self._py_logger.info(
            f"Deleted: {file_path} (command {outcome}, no destination)"
        )

    def log_command(self, file_path: str, command, shell: bool, cwd: str | None):
        """Log a command about to be run against a file."""
        entry = {
            "action": "command_start",
            "file": file_path,
            "command": command,
            "shell": shell,
            "cwd": cwd,
        }
        self._write(entry)
        self._py_logger.info(
            f"Running: {command} (shell={shell}, cwd={cwd or '.'})"
        )

    def log_command_result(
        self, file_path: str, returncode: int, stdout: str, stderr: str
    ):
        """Log a finished command with its exit status and captured output."""
        entry = {
            "action": "command_exit",
            "file": file_path,
            "returncode": returncode,
            "stdout": stdout,
            "stderr": stderr,
        }
        self._write(entry)
        self._py_logger.info(f"Exited {returncode}: {file_path}")
        if stdout:
            self._py_logger.debug(f"stdout for {file_path}:\n{stdout.rstrip()}")
        if stderr:
            self._py_logger.debug(f"stderr for {file_path}:\n{stderr.rstrip()}")

    def log_missing_path(self, location: str, role: str, path: str):
        """Log a configured folder that does not exist."""
        entry = {
            "action": "missing_path",
            "location": location,
            "role": role,
            "path": path,
        }
        self._write(entry)
        self._py_logger.error(
            f"Missing {role} folder for location {location}: {path}"
        )

    def log_location_error(self, location: str, error: str):
        """Log a failure that skips a whole location for this cycle."""
        entry = {"action": "location_error", "location": location, "error": error}
        self._write(entry)
        self._py_logger.error(f"Location error: {location} -- {error}")

    def log_item_error(self, file_path: str, phase: str, error: str):
        """Log a failure while handling a single folder entry."""
        entry = {
            "action": "error",
            "phase": phase,
            "file": file_path,
            "error": error,
        }
        self._write(entry)
        self._py_logger.error(f"Error ({phase}): {file_path} -- {error}")


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO
