import os
from pathlib import Path
from typing import Union
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class FilenameService:
    """
    Names the watermarked copy of an input file.
    """

    def __init__(self, suffix: str = None):
        self.suffix = suffix if suffix is not None else os.getenv("OUTPUT_SUFFIX", "-with-watermark")

    def derive(self, filename: Union[str, Path]) -> str:
        """
        Insert the suffix before the extension of the last path component.

        The name is split on its *first* dot and every extension segment is kept:
            photo.jpg       → photo-with-watermark.jpg
            archive.tar.gz  → archive-with-watermark.tar.gz
            noext           → noext-with-watermark
        """
        directory, basename = os.path.split(str(filename))
        name, dot, extension = basename.partition(".")
        derived = f"{name}{self.suffix}{dot}{extension}"
        return os.path.join(directory, derived) if directory else derived
