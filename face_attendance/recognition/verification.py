"""
Verification module.

Commits attendance only after the same person has stayed recognized for a
fixed time:

    IDLE -> VERIFYING(name, start) -> VERIFIED
                                   -> ALREADY_MARKED

Only one candidate is tracked at a time; callers feed the name recognized on
the first detected face of each frame.
"""

import time
from enum import Enum
from typing import Callable, Optional

from ..logging_config import get_logger
from ..session import AttendanceSession, MarkOutcome
from .matching import UNKNOWN

logger = get_logger(__name__)


class VerificationStatus(Enum):
    IDLE = 'idle'
    VERIFYING = 'verifying'
    VERIFIED = 'verified'
    ALREADY_MARKED = 'already_marked'


class VerificationTracker:
    """
    Per-frame verification state for a single candidate.

    Args:
        session: Attendance session used for marking
        verification_seconds: Time a candidate must persist
        monotonic: Clock used for the verification window
    """

    def __init__(
        self,
        session: AttendanceSession,
        verification_seconds: float = 3.0,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        self.session = session
        self.verification_seconds = verification_seconds
        self._monotonic = monotonic

        self.candidate: Optional[str] = None
        self.candidate_start: float = 0.0
        self.verified = False

    def reset(self) -> None:
        """Forget the current candidate."""
        self.candidate = None
        self.candidate_start = 0.0
        self.verified = False

    def elapsed(self) -> float:
        """Seconds the current candidate has been in view."""
        if self.candidate is None:
            return 0.0
        return self._monotonic() - self.candidate_start

    def update(self, name: Optional[str]) -> VerificationStatus:
        """
        Advance the state machine with this frame's recognized name.

        Args:
            name: Recognized name, UNKNOWN, or None when no face was detected

        Returns:
            Status to display for this frame
        """
        if name is None or name == UNKNOWN:
            self.reset()
            return VerificationStatus.IDLE

        now = self._monotonic()

        if name != self.candidate:
            self.candidate = name
            self.candidate_start = now
            self.verified = False
            logger.debug(f'New candidate {name}')
            return VerificationStatus.VERIFYING

        if now - self.candidate_start < self.verification_seconds:
            return VerificationStatus.VERIFYING

        if self.verified:
            return VerificationStatus.VERIFIED

        if self.session.is_marked(name):
            return VerificationStatus.ALREADY_MARKED

        if self.session.mark(name) is MarkOutcome.COOLDOWN:
            # retried on the next frame until the cooldown ends
            return VerificationStatus.VERIFYING

        self.verified = True
        logger.info(f'✅ {name} verified after {now - self.candidate_start:.1f}s')
        return VerificationStatus.VERIFIED
