from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from ..models.image import Image
from .image_service import ImageService

logger = logging.getLogger(__name__)

WATERMARK_OPACITY = 0.5


class ImageWatermarkService:
    """
    Blends one Image over the centre of another ("source-over").
    *   No I/O here—works only with Image objects (RGBA numpy arrays).
    """

    def __init__(self, opacity: float = WATERMARK_OPACITY):
        self.opacity = opacity
        self.image_service = ImageService()

    @staticmethod
    def compute_offset(base_size: Tuple[int, int], mark_size: Tuple[int, int]) -> Tuple[int, int]:
        """
        Top-left corner that centres *mark* on *base*. Sizes are (width, height).
        Half-pixel offsets are truncated toward zero; negative offsets are valid.
        """
        base_w, base_h = base_size
        mark_w, mark_h = mark_size
        return int(base_w / 2 - mark_w / 2), int(base_h / 2 - mark_h / 2)

    def apply(self, base: Image, mark: Image) -> Image:
        """
        Return a *new* Image with *mark* composited over the centre of *base*.
        The mark's own alpha is scaled by the service opacity; anything falling
        outside the base is clipped.
        """
        base_h, base_w = self.image_service.get_image_dimensions(base)
        mark_h, mark_w = self.image_service.get_image_dimensions(mark)
        x, y = self.compute_offset((base_w, base_h), (mark_w, mark_h))

        out = base.pixels.copy()

        # Overlap of the placed mark with the base, in base coordinates
        left, top = max(x, 0), max(y, 0)
        right, bottom = min(x + mark_w, base_w), min(y + mark_h, base_h)
        if left >= right or top >= bottom:
            logger.debug("Watermark falls outside the base image, nothing to blend")
            return self.image_service.create_image(out, base.path)

        src = mark.pixels[top - y:bottom - y, left - x:right - x].astype(np.float64) / 255
        dst = out[top:bottom, left:right].astype(np.float64) / 255

        a_src = src[..., 3:4] * self.opacity
        a_dst = dst[..., 3:4]
        a_out = a_src + a_dst * (1 - a_src)

        rgb = np.divide(
            src[..., :3] * a_src + dst[..., :3] * a_dst * (1 - a_src),
            a_out,
            out=np.zeros_like(src[..., :3]),
            where=a_out > 0,
        )

        region = np.concatenate([rgb, a_out], axis=-1)
        out[top:bottom, left:right] = np.clip(np.rint(region * 255), 0, 255).astype(np.uint8)
        return self.image_service.create_image(out, base.path)
