from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class WatermarkKind(Enum):
    TEXT = "Text watermark"
    IMAGE = "Image watermark"


@dataclass(frozen=True)
class TextWatermark:
    """Text stamped in the middle of the picture."""
    text: str
    kind: WatermarkKind = field(default=WatermarkKind.TEXT, init=False)


@dataclass(frozen=True)
class ImageWatermark:
    """Second picture blended, half transparent, over the middle of the first."""
    source_path: Path
    kind: WatermarkKind = field(default=WatermarkKind.IMAGE, init=False)
