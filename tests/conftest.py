from dataclasses import replace
from datetime import datetime

import numpy as np
import pytest

from face_attendance.config import load_config
from face_attendance.ledger import AttendanceLedger
from face_attendance.session import AttendanceSession


class FakeClock:
    """Manually advanced clock usable as monotonic() or now()."""

    def __init__(self, value):
        self.value = value

    def __call__(self):
        return self.value

    def advance(self, delta):
        self.value += delta


class WholeImageDetector:
    """Reports the whole image as a single face."""

    def __init__(self):
        self.calls = []

    def detect(self, gray, min_neighbors):
        self.calls.append(min_neighbors)
        h, w = gray.shape[:2]
        return [(0, 0, w, h)]


class FixedBoxesDetector:
    """Reports the same boxes for every image."""

    def __init__(self, boxes):
        self.boxes = list(boxes)

    def detect(self, gray, min_neighbors):
        return list(self.boxes)


@pytest.fixture
def config(monkeypatch, tmp_path):
    for var in ('PHOTOS_DIR', 'ATTENDANCE_FILE', 'CASCADE_PATH', 'MATCH_THRESHOLD',
                'FACE_SIZE', 'MARK_COOLDOWN', 'ZERO_PAD_DATES', 'DEBUG'):
        monkeypatch.delenv(var, raising=False)
    return replace(
        load_config(),
        photos_dir=str(tmp_path / 'photos'),
        attendance_file=str(tmp_path / 'attendance.csv'),
        face_size=50,
    )


@pytest.fixture
def ledger_path(tmp_path):
    return tmp_path / 'attendance.csv'


@pytest.fixture
def wall_clock():
    return FakeClock(datetime(2025, 8, 20, 9, 30))


@pytest.fixture
def mono_clock():
    return FakeClock(1000.0)


@pytest.fixture
def make_session(ledger_path, wall_clock, mono_clock):
    def _make(cooldown_seconds=10.0, zero_pad_dates=True):
        session = AttendanceSession(
            AttendanceLedger(ledger_path),
            cooldown_seconds=cooldown_seconds,
            zero_pad_dates=zero_pad_dates,
            now=wall_clock,
            monotonic=mono_clock,
        )
        session.load_today()
        return session
    return _make


@pytest.fixture
def rng():
    return np.random.default_rng(7)
