# =============================================================================
# tests/test_utils.py - Slug and filename helpers
# =============================================================================

import pytest

from utils import ALPHABET, image_filename, random_name, slugify


@pytest.mark.parametrize("title,expected", [
    ("Hello", "hello"),
    ("Hello, World!", "hello-world"),
    ("  Spaces   everywhere  ", "spaces-everywhere"),
    ("Café déjà vu", "cafe-deja-vu"),
    ("!!!", ""),
])
def test_slugify(title, expected):
    assert slugify(title) == expected


def test_random_name():
    name = random_name()

    assert len(name) == 10
    assert set(name) <= set(ALPHABET)
    assert random_name() != name


def test_image_filename_keeps_extension():
    name = image_filename("Photo.PNG")

    assert name.endswith(".png")
    assert len(name) == 14


def test_image_filename_without_name():
    assert len(image_filename(None)) == 10
