# models/font_engine.py
"""
Singleton wrapper around the watermark font.

• Loads Pillow's bundled sans font once per Python process.
• Fixed style: 32 px, black. Not user configurable.
"""
from __future__ import annotations
from PIL import ImageFont

FONT_SIZE = 32
FONT_COLOR = (0, 0, 0, 255)  # RGBA, opaque black


class FontEngine:
    _instance: "FontEngine" | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_runtime()
        return cls._instance

    # --------------------------------------------------
    def _init_runtime(self) -> None:
        # Falls back to the bitmap font when Pillow is built without FreeType
        self.font = ImageFont.load_default(size=FONT_SIZE)
        self.color = FONT_COLOR
