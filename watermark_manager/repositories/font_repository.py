# repositories/font_repository.py
from typing import Tuple
from PIL import ImageFont
from ..models.font_engine import FontEngine


class FontRepository:
    """
    Access layer for the fixed watermark font.
    """

    def __init__(self) -> None:
        self.engine = FontEngine()

    def retrieve_font(self) -> ImageFont.ImageFont:
        return self.engine.font

    def retrieve_color(self) -> Tuple[int, int, int, int]:
        return self.engine.color

    def measure_width(self, text: str) -> float:
        """Rendered width of a single line, in pixels."""
        return self.engine.font.getlength(text)
