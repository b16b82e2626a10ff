# =============================================================================
# tests/test_storage.py - Local blob store tests
# =============================================================================

import pytest

from storage import LocalStorage, upload_path


def test_put_exists_delete(storage):
    storage.put("uploads/a.png", b"data")

    assert storage.exists("uploads/a.png")
    assert storage.delete("uploads/a.png") is True
    assert not storage.exists("uploads/a.png")


def test_delete_missing_is_noop(storage):
    assert storage.delete("uploads/missing.png") is False


@pytest.mark.parametrize("path", [None, ""])
def test_empty_path(storage, path):
    assert storage.delete(path) is False
    assert storage.exists(path) is False


def test_path_outside_root_is_rejected(storage):
    with pytest.raises(ValueError):
        storage.put("../escape.png", b"data")


def test_put_writes_bytes(tmp_path):
    storage = LocalStorage(str(tmp_path))

    storage.put("uploads/nested/b.bin", b"\x00\x01")

    assert (tmp_path / "uploads" / "nested" / "b.bin").read_bytes() == b"\x00\x01"


def test_url_and_upload_path():
    assert upload_path("abc.png") == "uploads/abc.png"
    assert upload_path(None) is None
    assert LocalStorage.url("uploads/abc.png") == "/uploads/abc.png"
