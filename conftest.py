# conftest.py
# -------------------------------------------------------------
# Shared pytest fixtures: build Fastlane metadata trees and
# images under tmp_path.
# -------------------------------------------------------------

import os

import pytest
from PIL import Image

VALID_TEXTS = {
    "title.txt": "My App",
    "short_description.txt": "A short description.",
    "full_description.txt": "A longer description of the app.",
}


def _write_image(path, size, fmt="PNG", mode="RGB", transparent=False):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    if transparent:
        mode = "RGBA"
    color = (10, 20, 30, 255) if mode == "RGBA" else (10, 20, 30) if mode == "RGB" else 0
    img = Image.new(mode, size, color)
    if transparent:
        img.putpixel((0, 0), (10, 20, 30, 0))
    img.save(path, format=fmt)
    return path


def _write_text(path, content):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path


@pytest.fixture
def write_image():
    """Factory: write_image(path, (w, h), fmt="PNG", mode="RGB", transparent=False)."""
    return _write_image


@pytest.fixture
def write_text():
    return _write_text


@pytest.fixture
def truncate():
    """Factory: cut a file to half its size, keeping the header intact."""
    def _truncate(path):
        with open(path, "rb") as f:
            data = f.read()
        with open(path, "wb") as f:
            f.write(data[: len(data) // 2])
        return path
    return _truncate


@pytest.fixture
def fastlane(tmp_path):
    """Empty Fastlane dir with an existing metadata/android root."""
    os.makedirs(tmp_path / "metadata" / "android")
    return tmp_path


@pytest.fixture
def make_locale(fastlane):
    """
    Factory: make_locale("en-US", texts=None) creates a locale directory
    with valid descriptive texts (override or drop with texts=...).
    Returns the locale path.
    """
    def _make(name="en-US", texts=None):
        locale_path = os.path.join(str(fastlane), "metadata", "android", name)
        os.makedirs(locale_path, exist_ok=True)
        for filename, content in (VALID_TEXTS if texts is None else texts).items():
            _write_text(os.path.join(locale_path, filename), content)
        return locale_path
    return _make
