"""
Face detector initialization module.

Provides face detection using OpenCV Haar cascades.
"""

from typing import List, Tuple

import cv2
import numpy as np

from .config import Config
from .logging_config import get_logger

logger = get_logger(__name__)

Box = Tuple[int, int, int, int]


class FaceDetector:
    """
    Haar cascade face detector.

    Returns face regions as (x, y, w, h) tuples in detection order.
    """

    def __init__(self, cascade: cv2.CascadeClassifier, config: Config):
        self.cascade = cascade
        self.scale_factor = config.scale_factor
        self.min_size = (config.min_face_size, config.min_face_size)

    def detect(self, gray: np.ndarray, min_neighbors: int) -> List[Box]:
        """
        Detect faces in a grayscale image.

        Args:
            gray: Single-channel uint8 image
            min_neighbors: Cascade minNeighbors for this call

        Returns:
            List of (x, y, w, h) boxes
        """
        faces = self.cascade.detectMultiScale(
            gray,
            scaleFactor=self.scale_factor,
            minNeighbors=min_neighbors,
            minSize=self.min_size,
        )
        return [tuple(int(v) for v in face) for face in faces]


def initialize_detector(config: Config) -> FaceDetector:
    """
    Load the Haar cascade.

    Args:
        config: Application configuration

    Returns:
        Ready FaceDetector

    Raises:
        RuntimeError: If the cascade file cannot be loaded
    """
    logger.info(f'Loading face cascade from {config.cascade_path}...')

    cascade = cv2.CascadeClassifier()
    try:
        loaded = cascade.load(config.cascade_path)
    except cv2.error as e:
        raise RuntimeError(f'Could not load face cascade from {config.cascade_path}: {e}') from e

    if not loaded:
        raise RuntimeError(f'Could not load face cascade from {config.cascade_path}')

    logger.info('✅ Face detector initialized')

    return FaceDetector(cascade, config)
