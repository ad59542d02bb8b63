"""
Live attendance loop.

Orchestrates the recognition pipeline:
- Camera connection
- Face detection
- Matching against known faces
- Verification and attendance marking
- Preview window and quit key
"""

from typing import List, NamedTuple, Optional, Tuple

import cv2
import numpy as np

from .config import Config
from .camera import connect_camera
from .detector import Box
from .logging_config import get_logger
from .registry import FaceRegistry
from .session import AttendanceSession
from .recognition.matching import MatchResult, recognize
from .recognition.preprocessing import crop, to_gray
from .recognition.verification import VerificationStatus, VerificationTracker

logger = get_logger(__name__)

STATUS_STYLES = {
    VerificationStatus.VERIFYING: ('Verifying {name}...', (0, 255, 255)),
    VerificationStatus.VERIFIED: ('Attendance Successful: {name}', (0, 255, 0)),
    VerificationStatus.ALREADY_MARKED: ('Attendance Marked For Today: {name}', (0, 165, 255)),
}


class FrameResult(NamedTuple):
    faces: List[Tuple[Box, MatchResult]]
    status: VerificationStatus


def process_frame(
    frame: np.ndarray,
    detector,
    registry: FaceRegistry,
    tracker: VerificationTracker,
    config: Config
) -> FrameResult:
    """
    Detect, recognize and verify faces in one frame.

    Every detected face is recognized for display; only the first one
    drives the verification tracker.

    Args:
        frame: BGR camera frame
        detector: Object with detect(gray, min_neighbors)
        registry: Known faces
        tracker: Verification state
        config: Application configuration

    Returns:
        FrameResult with per-face matches and the frame status
    """
    gray = to_gray(frame)
    if config.equalize_frames:
        gray = cv2.equalizeHist(gray)

    boxes = detector.detect(gray, config.live_min_neighbors)

    faces = [
        (box, recognize(crop(gray, box), registry, config.match_threshold, config.face_size))
        for box in boxes
    ]

    first_name = faces[0][1].name if faces else None
    status = tracker.update(first_name)

    return FrameResult(faces, status)


def is_quit_key(key: int, quit_key: str) -> bool:
    """Check a cv2.waitKey code against the quit key in either case."""
    key &= 0xFF
    return key in (ord(quit_key.lower()), ord(quit_key.upper()))


def run(
    config: Config,
    detector,
    registry: FaceRegistry,
    session: AttendanceSession,
    video_capture=None
) -> None:
    """
    Live attendance loop. Returns when the quit key is pressed.

    Args:
        config: Application configuration
        detector: Object with detect(gray, min_neighbors)
        registry: Known faces
        session: Attendance session
        video_capture: Already opened capture (opened from config when None)

    Raises:
        RuntimeError: If the camera cannot be opened
    """
    if video_capture is None:
        video_capture = connect_camera(config)

    tracker = VerificationTracker(session, config.verification_seconds)

    logger.info(f"🎬 Live attendance started, press '{config.quit_key}' to quit")

    try:
        while True:
            ret, frame = video_capture.read()

            if ret and frame is not None and frame.size > 0:
                result = process_frame(frame, detector, registry, tracker, config)
                display_frame = _draw_visualization(frame, result, tracker.candidate)
                cv2.imshow(config.window_name, display_frame)
            else:
                logger.debug('Empty frame, skipping')

            key = cv2.waitKey(10)
            if is_quit_key(key, config.quit_key):
                logger.info('Quit key pressed')
                break

    finally:
        video_capture.release()
        cv2.destroyAllWindows()
        logger.info('Camera released')


def _draw_visualization(
    frame: np.ndarray,
    result: FrameResult,
    candidate: Optional[str]
) -> np.ndarray:
    """
    Draw face boxes, names and the attendance status on a frame.

    Args:
        frame: Frame to draw on
        result: Output of process_frame
        candidate: Name currently being verified

    Returns:
        Frame with visualization
    """
    for (x, y, w, h), match in result.faces:
        cv2.rectangle(frame, (x, y), (x + w, y + h), (255, 0, 0), 2)
        cv2.putText(frame, match.name, (x, max(0, y - 10)),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.8, (0, 255, 0), 2)

    style = STATUS_STYLES.get(result.status)
    if style and candidate:
        text, color = style
        cv2.putText(frame, text.format(name=candidate), (10, 30),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.8, color, 2)

    return frame
