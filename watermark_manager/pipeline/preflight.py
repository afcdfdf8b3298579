# pipeline/preflight.py
"""
Existence checks run before an operation is invoked.

Each path is tested on its own. (An earlier version of the image-watermark
check folded both paths into one expression and only ever tested the
watermark file.)
"""
from pathlib import Path
from typing import Union
import logging

from ..exceptions import ValidationError
from ..models.operation_result import OperationResult
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)


def check_files_exist(
    *paths: Union[str, Path],
    image_service: ImageService = ImageService(),
) -> OperationResult:
    """
    Returns a successful result when every path is an existing file,
    otherwise a failure carrying a ValidationError that names the missing ones.
    """
    missing = [str(p) for p in paths if not image_service.exists(p)]
    if missing:
        logger.warning(f"Missing file(s): {', '.join(missing)}")
        return OperationResult.failure(ValidationError(f"File(s) not found: {', '.join(missing)}"))
    return OperationResult.success(Path(paths[0]) if paths else None)
