from __future__ import annotations

import logging
from typing import List

from PIL import Image as PILImage, ImageDraw

from ..models.image import Image
from ..repositories.font_repository import FontRepository
from .image_service import ImageService

logger = logging.getLogger(__name__)


class TextWatermarkService:
    """
    Prints text, centred both ways, over the whole image.

    The text box spans the full image; lines wrap at word boundaries when
    they are wider than the image. A word wider than the image stays on its
    own line and simply runs past the edges.
    """

    def __init__(self):
        self.font_repository = FontRepository()
        self.image_service = ImageService()

    def wrap_lines(self, text: str, max_width: float) -> List[str]:
        """Greedy word wrap; explicit newlines are kept."""
        lines = []
        for paragraph in text.split("\n"):
            words = paragraph.split()
            if not words:
                lines.append("")
                continue
            current = words[0]
            for word in words[1:]:
                candidate = f"{current} {word}"
                if self.font_repository.measure_width(candidate) <= max_width:
                    current = candidate
                else:
                    lines.append(current)
                    current = word
            lines.append(current)
        return lines

    def apply(self, img: Image, text: str) -> Image:
        """
        Return a *new* flattened Image with *text* printed in the middle.
        Blank text gives back an unchanged copy.
        """
        if not text or not text.strip():
            return self.image_service.create_image(img.pixels.copy(), img.path)

        base = self.image_service.to_pil_image(img)
        width, height = base.size

        overlay = PILImage.new("RGBA", base.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay)
        lines = self.wrap_lines(text, width)
        logger.debug(f"Printing {len(lines)} line(s) of watermark text")

        draw.multiline_text(
            (width / 2, height / 2),
            "\n".join(lines),
            font=self.font_repository.retrieve_font(),
            fill=self.font_repository.retrieve_color(),
            anchor="mm",
            align="center",
        )

        composed = PILImage.alpha_composite(base, overlay)
        return self.image_service.from_pil_image(composed, img.path)
