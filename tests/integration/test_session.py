"""End-to-end runs of the interactive session, answers fed through stdin."""
import numpy as np
import pytest
from click.testing import CliRunner
from PIL import Image as PILImage

from watermark_manager.cli.session import (
    EDITED_MESSAGE,
    FAILURE_MESSAGE,
    WATERMARKED_MESSAGE,
    main,
    parse_edit_selection,
)
from watermark_manager.exceptions import ValidationError
from watermark_manager.models.edit_option import EditOption

pytestmark = pytest.mark.e2e


def answers(*lines):
    return "\n".join(lines) + "\n"


@pytest.fixture
def run(img_dir, monkeypatch):
    for name in ("DEFAULT_INPUT_IMAGE", "DEFAULT_WATERMARK_IMAGE", "OUTPUT_SUFFIX"):
        monkeypatch.delenv(name, raising=False)

    def _run(*lines):
        return CliRunner().invoke(main, input=answers(*lines), env={"IMG_DIR_PATH": str(img_dir)})

    return _run


def test_declining_quits_immediately(run, make_image, img_dir):
    make_image("test.jpg")

    result = run("n")

    assert result.exit_code == 0
    assert "App is loading..." in result.output
    assert "What file do you want to mark?" not in result.output
    assert sorted(p.name for p in img_dir.iterdir()) == ["test.jpg"]


def test_text_watermark_without_editing(run, make_image, img_dir):
    source = make_image("test.jpg", size=(100, 100))
    original = source.read_bytes()

    result = run("y", "", "Text watermark", "n", "HELLO")

    assert result.exit_code == 0, result.output
    assert WATERMARKED_MESSAGE in result.output
    assert EDITED_MESSAGE not in result.output
    output = img_dir / "test-with-watermark.jpg"
    with PILImage.open(output) as marked:
        assert marked.size == (100, 100)
    assert source.read_bytes() == original


def test_edit_then_text_watermark(run, make_image, img_dir):
    source = make_image("test.jpg", size=(100, 100), color=(200, 120, 40, 255))

    result = run("y", "", "Text watermark", "y", "make image b&w, invert image", "")

    assert result.exit_code == 0, result.output
    assert EDITED_MESSAGE in result.output
    assert WATERMARKED_MESSAGE in result.output
    with PILImage.open(source) as edited:
        pixels = np.array(edited.convert("RGB")).astype(int)
    assert np.abs(pixels - 124).max() <= 4
    assert (img_dir / "test-with-watermark.jpg").is_file()


def test_edit_options_by_number(run, make_image):
    source = make_image("pic.png", size=(4, 4), color=(200, 120, 40, 255))

    result = run("y", "pic.png", "Text watermark", "y", "4, 3", "")

    assert result.exit_code == 0, result.output
    with PILImage.open(source) as edited:
        assert np.array(edited)[0, 0].tolist() == [124, 124, 124, 255]


def test_bad_edit_selection_is_asked_again(run, make_image):
    make_image("test.jpg")

    result = run("y", "", "Text watermark", "y", "9", "5", "HELLO")

    assert result.exit_code == 0, result.output
    assert "No edit option number 9" in result.output
    assert EDITED_MESSAGE in result.output


def test_image_watermark_with_default_logo(run, make_image, img_dir):
    make_image("base.png", size=(100, 100), color=(255, 255, 255, 255))
    make_image("logo.png", size=(20, 20), color=(0, 0, 0, 255))

    result = run("y", "base.png", "Image watermark", "n", "")

    assert result.exit_code == 0, result.output
    assert WATERMARKED_MESSAGE in result.output
    with PILImage.open(img_dir / "base-with-watermark.png") as marked:
        assert np.array(marked)[50, 50].tolist() == [128, 128, 128, 255]


def test_image_watermark_missing_input_fails(run, make_image, img_dir):
    make_image("logo.png")

    result = run("y", "", "Image watermark", "n", "")

    assert result.exit_code == 0
    assert FAILURE_MESSAGE in result.output
    assert WATERMARKED_MESSAGE not in result.output
    assert not (img_dir / "test-with-watermark.jpg").exists()


def test_missing_input_reports_failure_for_every_step(run):
    result = run("y", "", "Text watermark", "y", "1", "HELLO")

    assert result.exit_code == 0
    assert result.output.count(FAILURE_MESSAGE) == 2
    assert EDITED_MESSAGE not in result.output


def test_corrupt_input_does_not_crash(run, img_dir):
    (img_dir / "test.jpg").write_bytes(b"\x00garbage")

    result = run("y", "", "Text watermark", "n", "HELLO")

    assert result.exit_code == 0
    assert FAILURE_MESSAGE in result.output


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", {EditOption.NONE}),
        ("1, 4", {EditOption.BRIGHTEN, EditOption.INVERT}),
        ("increase contrast,grayscale", {EditOption.CONTRAST, EditOption.GRAYSCALE}),
        (" , 5 ", {EditOption.NONE}),
    ],
)
def test_parse_edit_selection(raw, expected):
    assert parse_edit_selection(raw) == expected


@pytest.mark.parametrize("raw", ["0", "6", "sepia", "²", "1²"])
def test_parse_edit_selection_rejects_unknown(raw):
    with pytest.raises(ValidationError):
        parse_edit_selection(raw)


def test_non_decimal_digit_selection_is_asked_again(run, make_image):
    make_image("test.jpg")

    result = run("y", "", "Text watermark", "y", "²", "5", "HELLO")

    assert result.exit_code == 0, result.output
    assert result.exception is None
    assert EDITED_MESSAGE in result.output
    assert WATERMARKED_MESSAGE in result.output
