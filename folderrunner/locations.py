# folderrunner/locations.py
"""In-memory model of the watched locations and the poll interval."""

import json
import os
from dataclasses import dataclass

from folderrunner.errors import ConfigError


def _normalize(path: str) -> str:
    return os.path.normpath(path)


@dataclass(frozen=True)
class FileTask:
    """The four folders a file moves through for one location."""

    input: str
    processing: str
    completed: str | None = None
    failed: str | None = None

    @classmethod
    def from_root(cls, root: str) -> "FileTask":
        """
        Expand the shorthand form: a single root folder holding
        ``input`` and ``processing`` subfolders. Completed and failed
        stay unset, so both outcomes delete the file.
        """
        base = _normalize(root)
        return cls(
            input=os.path.join(base, "input"),
            processing=os.path.join(base, "processing"),
        )

    @classmethod
    def from_config(cls, value, where: str = "file") -> "FileTask":
        """Build a task from either the object form or the shorthand string."""
        if isinstance(value, str):
            if not value.strip():
                raise ConfigError(f"{where}: shorthand root path is empty")
            return cls.from_root(value)
        if not isinstance(value, dict):
            raise ConfigError(
                f"{where}: expected an object or a root path string, "
                f"got {type(value).__name__}"
            )

        def _path(key: str, required: bool) -> str | None:
            raw = value.get(key)
            if raw is None:
                if required:
                    raise ConfigError(f"{where}.{key} is required")
                return None
            if not isinstance(raw, str) or not raw.strip():
                raise ConfigError(f"{where}.{key} must be a non-empty string")
            return _normalize(raw)

        return cls(
            input=_path("input", True),
            processing=_path("processing", True),
            completed=_path("completed", False),
            failed=_path("failed", False),
        )

    def to_dict(self) -> dict:
        return {
            "input": self.input,
            "processing": self.processing,
            "completed": self.completed,
            "failed": self.failed,
        }

    def paths(self) -> list[tuple[str, str]]:
        """Return (role, path) pairs for every configured folder."""
        pairs = [("input", self.input), ("processing", self.processing)]
        if self.completed is not None:
            pairs.append(("completed", self.completed))
        if self.failed is not None:
            pairs.append(("failed", self.failed))
        return pairs


@dataclass(frozen=True)
class Location:
    """One watched pipeline: folders, command and behaviour flags."""

    file: FileTask
    readiness_delay: int
    process: str
    shell_command: bool
    processing_timestamp: bool = False
    complete_timestamp: bool = False
    current_dir: str | None = None
    readiness_timeout: int | None = None

    @property
    def name(self) -> str:
        """Short label used in log lines."""
        return self.file.input

    @classmethod
    def from_dict(cls, data: dict, where: str = "location") -> "Location":
        if not isinstance(data, dict):
            raise ConfigError(f"{where}: expected an object")
        if "file" not in data:
            raise ConfigError(f"{where}.file is required")

        process = data.get("process")
        if not isinstance(process, str) or not process.strip():
            raise ConfigError(f"{where}.process must be a non-empty string")

        current_dir = data.get("current_dir")
        if current_dir is not None and not isinstance(current_dir, str):
            raise ConfigError(f"{where}.current_dir must be a string or null")

        timeout = data.get("readiness_timeout")
        if timeout is not None:
            timeout = _millis(timeout, f"{where}.readiness_timeout")

        return cls(
            file=FileTask.from_config(data["file"], f"{where}.file"),
            readiness_delay=_millis(
                data.get("readinessDelay"), f"{where}.readinessDelay"
            ),
            process=process,
            shell_command=_flag(data, "shell_command", where, required=True),
            processing_timestamp=_flag(data, "processing_timestamp", where),
            complete_timestamp=_flag(data, "complete_timestamp", where),
            current_dir=current_dir,
            readiness_timeout=timeout,
        )

    def to_dict(self) -> dict:
        return {
            "file": self.file.to_dict(),
            "readinessDelay": self.readiness_delay,
            "process": self.process,
            "shell_command": self.shell_command,
            "processing_timestamp": self.processing_timestamp,
            "complete_timestamp": self.complete_timestamp,
            "current_dir": self.current_dir,
            "readiness_timeout": self.readiness_timeout,
        }


@dataclass(frozen=True)
class Locations:
    """The configuration root: every location plus the shared poll interval."""

    locations: tuple[Location, ...]
    polling_delay: int

    @classmethod
    def from_dict(cls, data: dict) -> "Locations":
        if not isinstance(data, dict):
            raise ConfigError("locations document must be a JSON object")
        raw = data.get("locations")
        if not isinstance(raw, list):
            raise ConfigError("'locations' must be a list")
        locations = tuple(
            Location.from_dict(entry, f"locations[{i}]")
            for i, entry in enumerate(raw)
        )
        return cls(
            locations=locations,
            polling_delay=_millis(data.get("polling_delay"), "polling_delay"),
        )

    @classmethod
    def from_string(cls, text: str) -> "Locations":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigError(f"invalid JSON: {e}") from e
        return cls.from_dict(data)

    def to_dict(self) -> dict:
        return {
            "locations": [loc.to_dict() for loc in self.locations],
            "polling_delay": self.polling_delay,
        }

    def to_string(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


def _millis(value, key: str) -> int:
    """Validate a non-negative whole number of milliseconds."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key} must be a whole number of milliseconds")
    if value < 0:
        raise ConfigError(f"{key} must not be negative")
    return value


def _flag(data: dict, key: str, where: str, required: bool = False) -> bool:
    if key not in data:
        if required:
            raise ConfigError(f"{where}.{key} is required")
        return False
    value = data[key]
    if not isinstance(value, bool):
        raise ConfigError(f"{where}.{key} must be true or false")
    return value
