# pipeline/watermark_applier.py
"""
Watermark Applier Pipeline
Stamps a text or image watermark on the input and writes a new file.
"""
from pathlib import Path
from typing import Union
import logging

from ..exceptions import ValidationError, WatermarkManagerError
from ..models.operation_result import OperationResult
from ..models.watermark import ImageWatermark, TextWatermark, WatermarkKind
from ..services.image_service import ImageService
from ..services.image_watermark_service import ImageWatermarkService
from ..services.text_watermark_service import TextWatermarkService

logger = logging.getLogger(__name__)


def _failed(action: str, input_file: Path, err: Exception) -> OperationResult:
    if isinstance(err, WatermarkManagerError):
        logger.warning(f"{action} on {input_file} failed: {err.message}")
        return OperationResult.failure(err)
    logger.exception(f"{action} on {input_file} failed unexpectedly")
    return OperationResult.failure(WatermarkManagerError(str(err), err))


def add_text_watermark(
    input_file: Union[str, Path],
    output_file: Union[str, Path],
    text: str,
    *,
    image_service: ImageService = ImageService(),
    text_service: TextWatermarkService = TextWatermarkService(),
) -> OperationResult:
    """
    Print *text* in the middle of *input_file* and save it as *output_file*
    at maximum quality. The input file is not modified.
    """
    input_file, output_file = Path(input_file), Path(output_file)
    try:
        img = image_service.load(input_file)
        marked = text_service.apply(img, text)
        image_service.save(marked, output_file)
    except Exception as err:
        return _failed("Text watermark", input_file, err)

    logger.info(f"Text watermark written to {output_file}")
    return OperationResult.success(output_file)


def add_image_watermark(
    input_file: Union[str, Path],
    output_file: Union[str, Path],
    watermark_file: Union[str, Path],
    *,
    image_service: ImageService = ImageService(),
    watermark_service: ImageWatermarkService = ImageWatermarkService(),
) -> OperationResult:
    """
    Blend *watermark_file* at half opacity over the centre of *input_file*
    and save it as *output_file* at maximum quality.
    """
    input_file, output_file = Path(input_file), Path(output_file)
    try:
        img = image_service.load(input_file)
        mark = image_service.load(watermark_file)
        marked = watermark_service.apply(img, mark)
        image_service.save(marked, output_file)
    except Exception as err:
        return _failed("Image watermark", input_file, err)

    logger.info(f"Image watermark {watermark_file} written to {output_file}")
    return OperationResult.success(output_file)


def apply_watermark(
    input_file: Union[str, Path],
    output_file: Union[str, Path],
    watermark: Union[TextWatermark, ImageWatermark],
    **services,
) -> OperationResult:
    """Dispatch on the watermark kind."""
    if watermark.kind is WatermarkKind.TEXT:
        return add_text_watermark(input_file, output_file, watermark.text, **services)
    if watermark.kind is WatermarkKind.IMAGE:
        return add_image_watermark(input_file, output_file, watermark.source_path, **services)
    return OperationResult.failure(ValidationError(f"Unknown watermark kind: {watermark.kind}"))
