# folderrunner/errors.py
"""Exception types raised by the folder runner."""


class FolderRunnerError(Exception):
    """Base class for folder runner errors."""
    pass


class ConfigError(FolderRunnerError):
    """Raised when a configuration document is malformed."""
    pass


class ReadinessTimeout(FolderRunnerError):
    """Raised when a file keeps changing past its readiness timeout."""

    def __init__(self, path: str, waited_ms: float):
        super().__init__(f"{path} still changing after {waited_ms:.0f} ms")
        self.path = path
        self.waited_ms = waited_ms


class CommandSpawnError(FolderRunnerError):
    """Raised when the configured command cannot be started."""

    def __init__(self, command, error: OSError):
        super().__init__(f"could not start {command!r}: {error}")
        self.command = command
        self.error = error


class UnexpectedDirectoryError(FolderRunnerError):
    """Raised when a directory turns up in a processing folder."""

    def __init__(self, path: str):
        super().__init__(f"directory found in processing folder: {path}")
        self.path = path
