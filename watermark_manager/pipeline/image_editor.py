# pipeline/image_editor.py
"""
Image Editor Pipeline
Applies the selected pixel edits and writes the result over the input file.
"""
from pathlib import Path
from typing import Iterable, Union
import logging

from ..exceptions import WatermarkManagerError
from ..models.edit_option import EditOption
from ..models.operation_result import OperationResult
from ..services.image_service import ImageService
from ..services.pixel_edit_service import PixelEditService

logger = logging.getLogger(__name__)


def edit_image(
    input_file: Union[str, Path],
    options: Iterable[Union[EditOption, str]],
    *,
    image_service: ImageService = ImageService(),
    edit_service: PixelEditService = PixelEditService(),
) -> OperationResult:
    """
    Edit *input_file* in place.

    Steps:
    1. Parse the selected options (labels, short names or EditOption members)
    2. Load the image
    3. Apply the edits in canonical order
    4. Overwrite the input file

    When nothing but "do nothing" is selected the file is left untouched.
    Any failure leaves the file as it was and is returned, never raised.

    Args:
        input_file: Image to edit (and overwrite)
        options: Selected edit options
        image_service: Service for image I/O
        edit_service: Service for pixel edits

    Returns:
        OperationResult: ok with the input path, or the error that stopped the edit
    """
    input_file = Path(input_file)
    try:
        selected = EditOption.parse_many(options)
        img = image_service.load(input_file)

        applied = edit_service.apply_options(img, selected)
        if not applied:
            logger.info(f"No edits selected for {input_file}, leaving it untouched")
            return OperationResult.success(input_file)

        image_service.save(img, input_file)
        logger.info(f"Edited {input_file}: {', '.join(o.value for o in applied)}")
        return OperationResult.success(input_file)

    except WatermarkManagerError as err:
        logger.warning(f"Editing {input_file} failed: {err.message}")
        return OperationResult.failure(err)
    except Exception as err:
        logger.exception(f"Editing {input_file} failed unexpectedly")
        return OperationResult.failure(WatermarkManagerError(str(err), err))
