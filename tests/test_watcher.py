import threading

from watchdog.events import DirCreatedEvent, FileCreatedEvent, FileMovedEvent

from folderrunner.locations import Locations
from folderrunner.watcher import ArrivalHandler, ArrivalWatcher


def test_file_events_set_wake_flag():
    wake = threading.Event()
    handler = ArrivalHandler(wake)

    handler.on_created(FileCreatedEvent("/in/a.txt"))
    assert wake.is_set()

    wake.clear()
    handler.on_moved(FileMovedEvent("/elsewhere/b.txt", "/in/b.txt"))
    assert wake.is_set()


def test_directory_events_are_ignored():
    wake = threading.Event()

    ArrivalHandler(wake).on_created(DirCreatedEvent("/in/sub"))

    assert not wake.is_set()


def test_wait_times_out_without_arrivals(make_location):
    watcher = ArrivalWatcher(Locations(locations=(make_location(),), polling_delay=10))

    assert watcher.wait(0.01) is False


def test_wait_returns_early_and_clears_flag(make_location):
    watcher = ArrivalWatcher(Locations(locations=(make_location(),), polling_delay=10))
    watcher.wake.set()

    assert watcher.wait(5) is True
    assert not watcher.wake.is_set()


def test_arrival_at_timeout_is_kept_for_next_wait(make_location):
    class LateEvent(threading.Event):
        def wait(self, timeout=None):
            # A file lands just as the wait times out
            self.set()
            return False

    watcher = ArrivalWatcher(Locations(locations=(make_location(),), polling_delay=10))
    watcher.wake = LateEvent()

    assert watcher.wait(0.01) is False
    assert watcher.wake.is_set()


def test_observer_sees_new_file(make_location, folders):
    watcher = ArrivalWatcher(Locations(locations=(make_location(),), polling_delay=10))
    watcher.start()
    try:
        (folders["input"] / "arrived.txt").write_text("x")
        assert watcher.wait(5) is True
    finally:
        watcher.stop()
