"""
Known-face registry module.

Loads reference photos from a directory and keeps one normalized face crop
per person. The person's name is the filename prefix before the first '_',
'-' or space.
"""

import re
from pathlib import Path
from typing import Dict, Iterator, List, Optional

import cv2
import numpy as np

from .config import Config
from .logging_config import get_logger
from .recognition.preprocessing import crop, prepare_reference_face, to_gray

logger = get_logger(__name__)

IMAGE_EXTENSIONS = frozenset({'.jpg', '.jpeg', '.png', '.bmp', '.tiff'})

_NAME_SEPARATORS = re.compile(r'[_\- ]')


class RegistryError(RuntimeError):
    """Raised when no usable registry can be built."""


def is_image_file(path: Path) -> bool:
    """Check the extension against the supported image formats."""
    return path.suffix.lower() in IMAGE_EXTENSIONS


def infer_name(stem: str) -> str:
    """
    Infer a person's name from a filename stem.

    'Alice_1' -> 'Alice', 'Bob-front' -> 'Bob', 'Carol' -> 'Carol'
    """
    return _NAME_SEPARATORS.split(stem, maxsplit=1)[0]


def extract_face(image: Optional[np.ndarray], detector, config: Config) -> Optional[np.ndarray]:
    """
    Detect and extract the largest face from a reference image.

    Args:
        image: Decoded BGR image (None or empty when decoding failed)
        detector: Object with detect(gray, min_neighbors)
        config: Application configuration

    Returns:
        Equalized face_size x face_size crop, or None if no face was found
    """
    if image is None or image.size == 0:
        return None

    gray = to_gray(image)
    faces = detector.detect(gray, config.reference_min_neighbors)
    if not faces:
        return None

    # max() keeps the first of equally large boxes
    best = max(faces, key=lambda box: box[2] * box[3])
    return prepare_reference_face(crop(gray, best), config.face_size)


class FaceRegistry:
    """
    Read-only mapping of name -> reference face.

    Names are always iterated in sorted order.
    """

    def __init__(self, faces: Optional[Dict[str, np.ndarray]] = None):
        self._faces: Dict[str, np.ndarray] = dict(faces or {})

    def __len__(self) -> int:
        return len(self._faces)

    def __contains__(self, name: str) -> bool:
        return name in self._faces

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def names(self) -> List[str]:
        return sorted(self._faces)

    def get(self, name: str) -> np.ndarray:
        return self._faces[name]

    @classmethod
    def load(cls, directory, detector, config: Config) -> 'FaceRegistry':
        """
        Build a registry from a directory of reference photos.

        Files are visited in sorted filename order, so when several photos
        share a name the last one in that order is kept.

        Args:
            directory: Photos directory
            detector: Object with detect(gray, min_neighbors)
            config: Application configuration

        Returns:
            Loaded FaceRegistry

        Raises:
            RegistryError: If the directory is missing or no face was extracted
        """
        photos_path = Path(directory)
        if not photos_path.is_dir():
            raise RegistryError(f'Photos path not found: {photos_path}')

        logger.info(f'Loading known faces from {photos_path}...')

        faces: Dict[str, np.ndarray] = {}
        loaded = 0

        for entry in sorted(photos_path.iterdir()):
            if not entry.is_file() or not is_image_file(entry):
                continue

            name = infer_name(entry.stem)
            image = cv2.imread(str(entry))

            if image is None:
                logger.warning(f'Failed to decode image {entry.name}, skipping')
                continue

            face = extract_face(image, detector, config)
            if face is None:
                logger.warning(f'No face found in {entry.name}, skipping')
                continue

            if name in faces:
                logger.debug(f'{entry.name} replaces earlier photo for {name}')
            faces[name] = face
            loaded += 1

        if loaded == 0:
            raise RegistryError(f'No usable faces found in {photos_path}')

        logger.info(f'✅ Loaded {loaded} known faces ({len(faces)} people)')
        return cls(faces)
