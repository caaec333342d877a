"""Pytest configuration for the folder runner."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_repo_on_path() -> None:
    """Make the repository importable without an editable install."""
    repo_root = Path(__file__).resolve().parent.parent
    if repo_root.exists():
        path_str = str(repo_root)
        if path_str not in sys.path:
            sys.path.insert(0, path_str)


_ensure_repo_on_path()

from folderrunner.locations import FileTask, Location  # noqa: E402


class RecordingLogger:
    """Stands in for RunnerLogger and remembers every log_* call."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if not name.startswith("log_"):
            raise AttributeError(name)

        def record(*args, **kwargs):
            self.calls.append((name, args))

        return record

    def named(self, name):
        return [args for called, args in self.calls if called == name]


@pytest.fixture
def recorder():
    return RecordingLogger()


@pytest.fixture
def folders(tmp_path):
    """Create input/processing/completed/failed under tmp_path."""
    paths = {}
    for role in ("input", "processing", "completed", "failed"):
        p = tmp_path / role
        p.mkdir()
        paths[role] = p
    return paths


@pytest.fixture
def make_location(folders):
    def _make(process="true", shell=True, completed=True, failed=True, **kw):
        task = FileTask(
            input=str(folders["input"]),
            processing=str(folders["processing"]),
            completed=str(folders["completed"]) if completed else None,
            failed=str(folders["failed"]) if failed else None,
        )
        kw.setdefault("readiness_delay", 10)
        return Location(file=task, process=process, shell_command=shell, **kw)

    return _make
