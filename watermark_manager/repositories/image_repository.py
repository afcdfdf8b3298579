from pathlib import Path
from typing import Union
import logging
import os

import numpy as np
import cv2
from PIL import Image as PILImage
from dotenv import load_dotenv

from ..models.image import Image
from ..exceptions import LoadError, WriteError

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

# Encoders that cannot store an alpha channel
_NO_ALPHA_EXTS = {".jpg", ".jpeg", ".jpe", ".jfif"}

DEFAULT_QUALITY = 100


def _quality_from_env() -> int:
    """OUTPUT_QUALITY as an int in [0, 100]; anything else falls back to the default."""
    raw = os.getenv("OUTPUT_QUALITY", str(DEFAULT_QUALITY))
    try:
        quality = int(raw)
    except ValueError:
        logger.warning(f"OUTPUT_QUALITY={raw!r} is not an integer, using {DEFAULT_QUALITY}")
        return DEFAULT_QUALITY
    if not 0 <= quality <= 100:
        logger.warning(f"OUTPUT_QUALITY={quality} is outside 0-100, using {DEFAULT_QUALITY}")
        return DEFAULT_QUALITY
    return quality


class ImageRepository:
    """
    Handles file I/O for Image entities.
    Decoding goes through OpenCV, encoding through Pillow.
    """
    def __init__(self, quality: int = None):
        self.quality = quality if quality is not None else _quality_from_env()

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def retrieve_image_dimensions(img: Image):
        return img.pixels.shape[:2]

    @staticmethod
    def exists(path: Union[str, Path]) -> bool:
        return Path(path).is_file()

    @staticmethod
    def _to_rgba(arr: np.ndarray) -> np.ndarray:
        """Any OpenCV decode result (gray, BGR, BGRA, 8/16 bit) → uint8 RGBA."""
        if arr.dtype == np.uint16:
            arr = (arr / 257).round().astype(np.uint8)
        elif arr.dtype != np.uint8:
            arr = cv2.normalize(arr, None, 0, 255, cv2.NORM_MINMAX).astype(np.uint8)

        if arr.ndim == 2 or arr.shape[2] == 1:
            return cv2.cvtColor(arr, cv2.COLOR_GRAY2RGBA)
        if arr.shape[2] == 4:
            return cv2.cvtColor(arr, cv2.COLOR_BGRA2RGBA)
        return cv2.cvtColor(arr, cv2.COLOR_BGR2RGBA)

    @staticmethod
    def load(path: Union[str, Path]) -> Image:
        path = Path(path)
        if not path.is_file():
            raise LoadError(f"Image not found: {path}")

        try:
            arr = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
        except cv2.error as err:
            raise LoadError(f"Image unreadable: {path}", err) from err

        if arr is None:
            raise LoadError(f"Image not found or unreadable: {path}")

        logger.debug(f"Loaded {path} ({arr.shape[1]}x{arr.shape[0]})")
        return Image(pixels=ImageRepository._to_rgba(arr), path=path)

    def save(self, image: Image, path: Union[str, Path] = None, quality: int = None) -> Path:
        path = Path(path) if path is not None else image.path
        if path is None:
            raise WriteError("No output path given and image has no path")
        quality = quality if quality is not None else self.quality

        pil_img = PILImage.fromarray(np.ascontiguousarray(image.pixels))
        save_kwargs = {}
        if path.suffix.lower() in _NO_ALPHA_EXTS:
            pil_img = pil_img.convert("RGB")
            save_kwargs.update(quality=quality, subsampling=0)

        try:
            pil_img.save(path, **save_kwargs)
        except (OSError, ValueError, KeyError) as err:
            raise WriteError(f"Could not write image: {path}", err) from err

        logger.debug(f"Saved {path} (quality={quality})")
        return path
