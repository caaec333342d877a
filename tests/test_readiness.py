import pytest

from folderrunner import readiness
from folderrunner.errors import ReadinessTimeout


def test_stable_file_ready_after_one_sleep(tmp_path, monkeypatch, recorder):
    target = tmp_path / "done.bin"
    target.write_bytes(b"abc")
    sleeps = []
    monkeypatch.setattr(readiness.time, "sleep", lambda s: sleeps.append(s))

    sample = readiness.wait_until_ready(str(target), 250, recorder)

    assert sleeps == [0.25]
    assert sample.size == 3
    assert recorder.named("log_ready") == [(str(target), 2)]


def test_growing_file_waits_for_matching_samples(tmp_path, monkeypatch):
    target = tmp_path / "growing.bin"
    target.write_bytes(b"x")
    sleeps = []

    def fake_sleep(seconds):
        sleeps.append(seconds)
        # The writer appends during the first three sleeps, then stops
        if len(sleeps) <= 3:
            with open(target, "ab") as f:
                f.write(b"more")

    monkeypatch.setattr(readiness.time, "sleep", fake_sleep)

    sample = readiness.wait_until_ready(str(target), 10)

    assert len(sleeps) == 4
    assert sample.size == 1 + 3 * 4


def test_vanished_file_raises_os_error(tmp_path, monkeypatch):
    target = tmp_path / "gone.bin"
    target.write_bytes(b"abc")
    monkeypatch.setattr(readiness.time, "sleep", lambda s: target.unlink())

    with pytest.raises(FileNotFoundError):
        readiness.wait_until_ready(str(target), 10)


def test_timeout_stops_waiting_on_changing_file(tmp_path, monkeypatch):
    target = tmp_path / "busy.bin"
    target.write_bytes(b"")

    def fake_sleep(seconds):
        with open(target, "ab") as f:
            f.write(b"!")

    monkeypatch.setattr(readiness.time, "sleep", fake_sleep)

    with pytest.raises(ReadinessTimeout) as info:
        readiness.wait_until_ready(str(target), 10, timeout_ms=0)
    assert info.value.path == str(target)
