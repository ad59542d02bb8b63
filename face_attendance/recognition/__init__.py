"""
Recognition algorithms package.

Contains modules for:
- Face crop preprocessing
- Reference matching
- Verification before marking
"""

from .preprocessing import crop, normalize_face, prepare_reference_face, to_gray
from .matching import UNKNOWN, MatchResult, mean_squared_error, recognize
from .verification import VerificationStatus, VerificationTracker

__all__ = [
    'crop',
    'normalize_face',
    'prepare_reference_face',
    'to_gray',
    'UNKNOWN',
    'MatchResult',
    'mean_squared_error',
    'recognize',
    'VerificationStatus',
    'VerificationTracker',
]
