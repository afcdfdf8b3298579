from pathlib import Path
from typing import Union
import numpy as np
from PIL import Image as PILImage

from ..models.image import Image
from ..repositories.image_repository import ImageRepository


class ImageService:
    """I/O helpers.  No watermark or edit logic."""
    def __init__(self, quality: int = None):
        self.image_repository = ImageRepository(quality=quality)

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(path)

    def save(self, image: Image, path: Union[str, Path] = None) -> Path:
        """
        Business-level method to save the image, to *path* or to its own path.
        """
        return self.image_repository.save(image, path)

    def exists(self, path: Union[str, Path]) -> bool:
        return self.image_repository.exists(path)

    def get_image_dimensions(self, img: Image):
        return self.image_repository.retrieve_image_dimensions(img)

    def to_pil_image(self, img: Image) -> PILImage.Image:
        """
        Convert Image.pixels → RGBA PIL Image object.
        Ensures the NumPy array is C-contiguous.
        """
        np_img = img.pixels
        if not np_img.flags['C_CONTIGUOUS']:
            np_img = np.ascontiguousarray(np_img)

        return PILImage.fromarray(np_img).convert("RGBA")

    def from_pil_image(self, pil_img: PILImage.Image, path: Union[str, Path] = None) -> Image:
        """PIL Image → new Image with writable RGBA pixels."""
        return self.create_image(np.array(pil_img.convert("RGBA")), path)
