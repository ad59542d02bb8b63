"""
Image preprocessing module.

Brings face crops to the common form used for comparison:
1. Grayscale conversion
2. Resize to a fixed square
3. Histogram equalization (reference faces and, optionally, live frames)
"""

import cv2
import numpy as np


def to_gray(image: np.ndarray) -> np.ndarray:
    """
    Convert a BGR image to grayscale (grayscale input is returned as is).

    Args:
        image: BGR or single-channel image

    Returns:
        Single-channel uint8 image
    """
    if image.ndim == 2:
        return image
    return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)


def normalize_face(gray_face: np.ndarray, size: int) -> np.ndarray:
    """
    Resize a grayscale face crop to size x size.

    Args:
        gray_face: Grayscale face crop
        size: Output side in pixels

    Returns:
        Resized uint8 crop
    """
    if gray_face.shape[:2] == (size, size):
        return gray_face
    return cv2.resize(gray_face, (size, size))


def prepare_reference_face(gray_face: np.ndarray, size: int) -> np.ndarray:
    """
    Normalize and equalize a crop taken from a reference photo.

    Args:
        gray_face: Grayscale face crop
        size: Output side in pixels

    Returns:
        Equalized size x size crop
    """
    return cv2.equalizeHist(normalize_face(gray_face, size))


def crop(gray: np.ndarray, box) -> np.ndarray:
    """Cut an (x, y, w, h) region out of an image."""
    x, y, w, h = box
    return gray[y:y + h, x:x + w]
