"""Storage initialization and path helpers."""

from pathlib import Path

_data_dir: Path | None = None


def init_storage(data_dir: Path) -> None:
    global _data_dir
    _data_dir = data_dir
    _data_dir.mkdir(parents=True, exist_ok=True)
    vikings_dir().mkdir(exist_ok=True)
    images_dir().mkdir(exist_ok=True)


def data_dir() -> Path:
    assert _data_dir is not None, "Call init_storage() before using storage"
    return _data_dir


def vikings_dir() -> Path:
    return data_dir() / "vikings"


def images_dir() -> Path:
    return data_dir() / "images"
