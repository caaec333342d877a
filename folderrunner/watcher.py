# folderrunner/watcher.py
"""Cut the inter-cycle sleep short when files land in an input folder."""

import threading

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from folderrunner.locations import Locations


class ArrivalHandler(FileSystemEventHandler):
    """Set a wake-up flag when a file is created in or moved into a folder."""

    def __init__(self, wake: threading.Event):
        self.wake = wake

    def on_created(self, event):
        if event.is_directory:
            return
        self.wake.set()

    def on_moved(self, event):
        if event.is_directory:
            return
        self.wake.set()


class ArrivalWatcher:
    """Watches every location's input folder and wakes the poll loop."""

    def __init__(self, config: Locations):
        self.wake = threading.Event()
        self._handler = ArrivalHandler(self.wake)
        self._observer = Observer()
        for folder in sorted({loc.file.input for loc in config.locations}):
            self._observer.schedule(self._handler, folder, recursive=False)

    def start(self):
        self._observer.start()

    def stop(self):
        self._observer.stop()
        self._observer.join()

    def wait(self, seconds: float) -> bool:
        """Sleep up to ``seconds``; True if an arrival ended it early."""
        woke = self.wake.wait(seconds)
        if woke:
            self.wake.clear()
        return woke
