import math

import numpy as np

from face_attendance.recognition.matching import (
    UNKNOWN,
    MatchResult,
    mean_squared_error,
    recognize,
)
from face_attendance.registry import FaceRegistry

SIZE = 50


def _face(rng):
    return rng.integers(0, 256, size=(SIZE, SIZE), dtype=np.uint8)


def test_mean_squared_error_does_not_saturate():
    a = np.zeros((4, 4), dtype=np.uint8)
    b = np.full((4, 4), 200, dtype=np.uint8)

    assert mean_squared_error(a, b) == 40000.0
    assert mean_squared_error(b, a) == 40000.0


def test_identical_probe_has_zero_error_and_wins(rng):
    alice, bob = _face(rng), _face(rng)
    registry = FaceRegistry({'Alice': alice, 'Bob': bob})

    result = recognize(bob.copy(), registry, threshold=1e9, size=SIZE)

    assert result == MatchResult('Bob', 0.0)
    assert result.is_known


def test_empty_registry_is_unknown(rng):
    result = recognize(_face(rng), FaceRegistry(), threshold=1e9, size=SIZE)

    assert result.name == UNKNOWN
    assert math.isinf(result.error)
    assert not result.is_known


def test_error_at_or_above_threshold_is_unknown():
    reference = np.zeros((SIZE, SIZE), dtype=np.uint8)
    probe = np.full((SIZE, SIZE), 10, dtype=np.uint8)
    registry = FaceRegistry({'Alice': reference})

    assert recognize(probe, registry, threshold=100.0, size=SIZE).name == UNKNOWN
    assert recognize(probe, registry, threshold=100.1, size=SIZE) == MatchResult('Alice', 100.0)


def test_nearest_reference_is_selected():
    probe = np.full((SIZE, SIZE), 100, dtype=np.uint8)
    registry = FaceRegistry({
        'Far': np.full((SIZE, SIZE), 150, dtype=np.uint8),
        'Near': np.full((SIZE, SIZE), 105, dtype=np.uint8),
    })

    assert recognize(probe, registry, threshold=1500.0, size=SIZE) == MatchResult('Near', 25.0)


def test_tie_goes_to_first_name_in_sorted_order():
    probe = np.full((SIZE, SIZE), 100, dtype=np.uint8)
    registry = FaceRegistry({
        'Zed': np.full((SIZE, SIZE), 110, dtype=np.uint8),
        'Amy': np.full((SIZE, SIZE), 90, dtype=np.uint8),
        'Max': np.full((SIZE, SIZE), 110, dtype=np.uint8),
    })

    assert recognize(probe, registry, threshold=1500.0, size=SIZE).name == 'Amy'


def test_probe_is_resized_before_comparison():
    registry = FaceRegistry({'Alice': np.full((SIZE, SIZE), 80, dtype=np.uint8)})
    probe = np.full((123, 97), 80, dtype=np.uint8)

    assert recognize(probe, registry, threshold=1.0, size=SIZE) == MatchResult('Alice', 0.0)
