"""
Configuration module for Face Attendance.

Loads configuration from environment variables with sensible defaults.
All settings are immutable after initialization.
"""

import os
from dataclasses import dataclass

import cv2


def _default_cascade_path() -> str:
    """Return the frontal-face cascade bundled with opencv-python."""
    return os.path.join(cv2.data.haarcascades, 'haarcascade_frontalface_default.xml')


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class Config:
    """
    Immutable configuration for Face Attendance.

    Storage:
        photos_dir: Directory with one reference photo per person
            (the filename prefix before '_', '-' or ' ' is the name)
        attendance_file: Append-only ledger (name,date,weekday per line)

    Camera Settings:
        camera_source: Camera source - can be:
            - Integer (0, 1, 2) for local webcam
            - RTSP URL: rtsp://user:pass@ip:port/path
            - HTTP MJPEG URL: http://camera-gateway:4000/streams/1.mjpg
        window_name: Title of the preview window
        quit_key: Key that closes the live view (case-insensitive)

    Detection:
        cascade_path: Haar cascade XML for the face detector
        scale_factor: Cascade pyramid scale step
        live_min_neighbors: minNeighbors used on camera frames
        reference_min_neighbors: minNeighbors used on reference photos
        min_face_size: Smallest face side in pixels
        equalize_frames: Equalize the grayscale frame before detection

    Recognition:
        face_size: Side of the normalized square face crop
        match_threshold: Mean squared error a match must stay below

    Attendance:
        verification_seconds: Time a face must stay recognized before marking
        mark_cooldown_seconds: Minimum time between marking attempts per name
            (0 disables the cooldown)
        zero_pad_dates: Write dates as 2025-08-05 instead of 2025-8-5

    System:
        api_port: Port for the Flask reporting server
        debug_mode: Enable debug logging
    """

    # Storage
    photos_dir: str
    attendance_file: str

    # Camera
    camera_source: str
    window_name: str
    quit_key: str

    # Detection
    cascade_path: str
    scale_factor: float
    live_min_neighbors: int
    reference_min_neighbors: int
    min_face_size: int
    equalize_frames: bool

    # Recognition
    face_size: int
    match_threshold: float

    # Attendance
    verification_seconds: float
    mark_cooldown_seconds: float
    zero_pad_dates: bool

    # System
    api_port: int
    debug_mode: bool


def load_config() -> Config:
    """
    Load configuration from environment variables.

    Returns:
        Config: Immutable configuration object
    """
    return Config(
        # Storage
        photos_dir=os.getenv('PHOTOS_DIR', 'photos'),
        attendance_file=os.getenv('ATTENDANCE_FILE', 'attendance.csv'),

        # Camera
        camera_source=os.getenv('CAMERA_SOURCE', '0'),
        window_name=os.getenv('WINDOW_NAME', 'Attendance'),
        quit_key=os.getenv('QUIT_KEY', 'q')[:1] or 'q',

        # Detection
        cascade_path=os.getenv('CASCADE_PATH') or _default_cascade_path(),
        scale_factor=float(os.getenv('SCALE_FACTOR', '1.1')),
        live_min_neighbors=int(os.getenv('LIVE_MIN_NEIGHBORS', '5')),
        reference_min_neighbors=int(os.getenv('REFERENCE_MIN_NEIGHBORS', '4')),
        min_face_size=int(os.getenv('MIN_FACE_SIZE', '80')),
        equalize_frames=_env_bool('EQUALIZE_FRAMES', 'true'),

        # Recognition
        face_size=int(os.getenv('FACE_SIZE', '200')),
        match_threshold=float(os.getenv('MATCH_THRESHOLD', '1500.0')),

        # Attendance
        verification_seconds=float(os.getenv('VERIFICATION_SECONDS', '3.0')),
        mark_cooldown_seconds=float(os.getenv('MARK_COOLDOWN', '10.0')),
        zero_pad_dates=_env_bool('ZERO_PAD_DATES', 'true'),

        # System
        api_port=int(os.getenv('API_PORT', '5001')),
        debug_mode=_env_bool('DEBUG', 'false'),
    )
