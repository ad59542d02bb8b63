"""
Face matching module.

Matches a probe face against known reference faces using mean squared
pixel-intensity difference.
"""

import math
from typing import NamedTuple

import numpy as np

from .preprocessing import normalize_face

UNKNOWN = 'Unknown'


class MatchResult(NamedTuple):
    name: str
    error: float

    @property
    def is_known(self) -> bool:
        return self.name != UNKNOWN


def mean_squared_error(face_a: np.ndarray, face_b: np.ndarray) -> float:
    """
    Mean squared difference of two equally sized grayscale images.

    Computed in float64 so large differences do not saturate.
    """
    diff = face_a.astype(np.float64) - face_b.astype(np.float64)
    return float(np.mean(diff * diff))


def recognize(probe: np.ndarray, registry, threshold: float, size: int) -> MatchResult:
    """
    Find the known face closest to a probe.

    References are visited in sorted name order and only a strictly smaller
    error replaces the current best, so ties go to the alphabetically first
    name.

    Args:
        probe: Grayscale face crop from a frame
        registry: FaceRegistry with the reference faces
        threshold: Error a match must stay strictly below
        size: Normalized face side

    Returns:
        MatchResult(name, error), or (UNKNOWN, inf) if nothing qualifies
    """
    if len(registry) == 0:
        return MatchResult(UNKNOWN, math.inf)

    probe = normalize_face(probe, size)

    best_name = UNKNOWN
    best_error = math.inf

    for name in registry.names():
        error = mean_squared_error(probe, registry.get(name))
        if error < best_error and error < threshold:
            best_error = error
            best_name = name

    return MatchResult(best_name, best_error)
