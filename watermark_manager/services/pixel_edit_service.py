from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from ..models.image import Image
from ..models.edit_option import EditOption, in_canonical_order

logger = logging.getLogger(__name__)

BRIGHTNESS_DELTA = 0.2  # on a [-1, 1] scale
CONTRAST_DELTA = 0.2    # on a [-1, 1] scale

# Rec. 709 luma weights
_LUMA = np.array([0.2126, 0.7152, 0.0722])


class PixelEditService:
    """
    In-place pixel edits on the RGB channels of an Image; alpha is never touched.
    The caller owns the Image exclusively while an edit runs.
    """

    # ─── helpers ──────────────────────────────────────────────────
    @staticmethod
    def _check_delta(delta: float) -> None:
        if not -1.0 < delta < 1.0:
            raise ValueError(f"delta must be within (-1, 1), got {delta}")

    @staticmethod
    def _rgb(img: Image) -> np.ndarray:
        return img.pixels[..., :3].astype(np.float64)

    @staticmethod
    def _write_rgb(img: Image, rgb: np.ndarray) -> None:
        img.pixels[..., :3] = np.clip(np.rint(rgb), 0, 255).astype(np.uint8)

    # ─── transforms ──────────────────────────────────────────────
    def brighten(self, img: Image, delta: float = BRIGHTNESS_DELTA) -> None:
        """Move every channel towards white (delta > 0) or black (delta < 0)."""
        self._check_delta(delta)
        rgb = self._rgb(img)
        if delta < 0:
            rgb = rgb * (1 + delta)
        else:
            rgb = rgb + (255 - rgb) * delta
        self._write_rgb(img, rgb)

    def increase_contrast(self, img: Image, delta: float = CONTRAST_DELTA) -> None:
        """Stretch (delta > 0) or squash (delta < 0) channels around mid-gray."""
        self._check_delta(delta)
        factor = (delta + 1) / (1 - delta)
        self._write_rgb(img, factor * (self._rgb(img) - 127) + 127)

    def grayscale(self, img: Image) -> None:
        luma = self._rgb(img) @ _LUMA
        self._write_rgb(img, np.repeat(luma[..., None], 3, axis=-1))

    def invert(self, img: Image) -> None:
        img.pixels[..., :3] = 255 - img.pixels[..., :3]

    # ─── Public API ────────────────────────────────────────────────
    def apply_options(self, img: Image, options: Iterable[EditOption]) -> list[EditOption]:
        """
        Apply the selected edits in canonical order
        (brighten → contrast → grayscale → invert).

        Returns:
            list[EditOption]: the edits actually applied; empty for {NONE}.
        """
        steps = {
            EditOption.BRIGHTEN: self.brighten,
            EditOption.CONTRAST: self.increase_contrast,
            EditOption.GRAYSCALE: self.grayscale,
            EditOption.INVERT: self.invert,
        }
        applied = in_canonical_order(options)
        for option in applied:
            logger.debug(f"Applying edit: {option.value}")
            steps[option](img)
        return applied
