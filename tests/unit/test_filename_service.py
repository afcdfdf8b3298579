"""Tests for output file naming."""
import os

import pytest

from watermark_manager.services.filename_service import FilenameService

pytestmark = pytest.mark.unit


@pytest.fixture
def service():
    return FilenameService(suffix="-with-watermark")


def test_single_extension(service):
    assert service.derive("photo.jpg") == "photo-with-watermark.jpg"


def test_default_suffix(monkeypatch):
    monkeypatch.delenv("OUTPUT_SUFFIX", raising=False)
    assert FilenameService().derive("photo.jpg") == "photo-with-watermark.jpg"


def test_suffix_from_environment(monkeypatch):
    monkeypatch.setenv("OUTPUT_SUFFIX", "_marked")
    assert FilenameService().derive("photo.png") == "photo_marked.png"


def test_splits_on_first_dot_and_keeps_every_segment(service):
    assert service.derive("archive.tar.gz") == "archive-with-watermark.tar.gz"


def test_no_extension(service):
    assert service.derive("noext") == "noext-with-watermark"


def test_only_last_component_is_renamed(service):
    source = os.path.join("my.photos", "photo.jpg")
    expected = os.path.join("my.photos", "photo-with-watermark.jpg")
    assert service.derive(source) == expected
