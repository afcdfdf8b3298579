"""
Watermark Manager interactive session.

Asks which picture to mark, which kind of watermark to use and whether to
edit the picture first, then runs the edit (in place) and the watermark
(new "<name>-with-watermark.<ext>" file) from the image directory.
"""
import os
import logging
from pathlib import Path
from typing import FrozenSet, Union

import click
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from ..exceptions import ValidationError
from ..models.edit_option import EditOption
from ..models.watermark import ImageWatermark, TextWatermark, WatermarkKind
from ..pipeline.preflight import check_files_exist
from ..pipeline.image_editor import edit_image
from ..pipeline.watermark_applier import apply_watermark
from ..services.filename_service import FilenameService

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Something went wrong... Try again!"
EDITED_MESSAGE = "Your image has been edited!"
WATERMARKED_MESSAGE = "Your watermark has been added!"

EDIT_CHOICES = list(EditOption)


def setup_logging() -> None:
    """Centralized logging configuration; runs once per process."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "ERROR").upper(),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def parse_edit_selection(raw: str) -> FrozenSet[EditOption]:
    """
    Comma separated labels, short names or 1-based numbers → EditOptions.
    An empty answer means "do nothing".
    """
    selected = set()
    for item in (part.strip() for part in raw.split(",")):
        if not item:
            continue
        if item.isdecimal():
            index = int(item)
            if not 1 <= index <= len(EDIT_CHOICES):
                raise ValidationError(f"No edit option number {index}")
            selected.add(EDIT_CHOICES[index - 1])
        else:
            selected.add(EditOption.parse(item))
    return frozenset(selected or {EditOption.NONE})


def _edit_selection_proc(raw: str) -> FrozenSet[EditOption]:
    try:
        return parse_edit_selection(raw)
    except ValidationError as err:
        raise click.BadParameter(err.message)


def _prompt_edit_options() -> FrozenSet[EditOption]:
    for number, option in enumerate(EDIT_CHOICES, 1):
        click.echo(f"  {number}) {option.value}")
    return click.prompt(
        "Which edits? (comma separated)",
        default=EditOption.NONE.value,
        value_proc=_edit_selection_proc,
    )


def run_session(img_dir: Union[str, Path]) -> None:
    img_dir = Path(img_dir)
    filename_service = FilenameService()

    click.echo("App is loading...")

    ready = click.confirm(
        'Hi! Welcome to "Watermark manager". Copy your image files to '
        f"`{img_dir}` folder. Then you'll be able to use them in the app. Are you ready?",
        default=True,
    )
    # if answer is no, just quit the app
    if not ready:
        return

    input_image = click.prompt(
        "What file do you want to mark?",
        default=os.getenv("DEFAULT_INPUT_IMAGE", "test.jpg"),
    )
    watermark_type = WatermarkKind(click.prompt(
        "Select watermark type?",
        type=click.Choice([kind.value for kind in WatermarkKind]),
        default=WatermarkKind.TEXT.value,
    ))
    wants_edit = click.confirm("Do you want edit your image?", default=False)

    input_path = img_dir / input_image

    if wants_edit:
        options = _prompt_edit_options()
        result = check_files_exist(input_path)
        if result.ok:
            result = edit_image(input_path, options)
        click.echo(EDITED_MESSAGE if result.ok else FAILURE_MESSAGE)

    if watermark_type is WatermarkKind.TEXT:
        text = click.prompt("Type your watermark text", default="", show_default=False)
        watermark = TextWatermark(text)
        result = check_files_exist(input_path)
    else:
        filename = click.prompt(
            "Type your watermark name",
            default=os.getenv("DEFAULT_WATERMARK_IMAGE", "logo.png"),
        )
        watermark = ImageWatermark(img_dir / filename)
        result = check_files_exist(input_path, watermark.source_path)

    if result.ok:
        output_path = img_dir / filename_service.derive(input_image)
        result = apply_watermark(input_path, output_path, watermark)
    click.echo(WATERMARKED_MESSAGE if result.ok else FAILURE_MESSAGE)


@click.command()
def main():
    """Add a text or image watermark to a picture in the image folder."""
    setup_logging()
    run_session(os.getenv("IMG_DIR_PATH", "img"))


if __name__ == "__main__":
    main()
