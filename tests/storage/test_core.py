"""Tests for storage initialization."""

from vikings import storage


def test_init_creates_layout(tmp_path):
    storage.init_storage(tmp_path / "data")
    assert storage.data_dir() == tmp_path / "data"
    assert storage.vikings_dir().is_dir()
    assert storage.images_dir().is_dir()


def test_init_is_repeatable(tmp_path):
    storage.init_storage(tmp_path)
    storage.init_storage(tmp_path)
    assert storage.vikings_dir() == tmp_path / "vikings"
