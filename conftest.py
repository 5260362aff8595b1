import shutil
from pathlib import Path

import pytest
from PIL import Image

from vikings import storage
from vikings.conditions import EquipmentCondition, WearableCondition, is_lowest
from vikings.settings import Settings
from vikings.specification import PART_DIRS, clean_name
from vikings.traits import APPEARANCE_TABLES, STYLED_TABLES

TEST_DATA_DIR = Path("data-tests")
TEST_PARTS_DIR = Path("data-tests-parts")


def _write_part(path: Path, color: tuple[int, int, int, int], size: int = 16) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", (size, size), color).save(path)


def build_parts_tree(root: Path) -> None:
    """Write a tiny PNG at every path the specification builder can produce."""
    shade = 0
    for slot, table in APPEARANCE_TABLES.items():
        for _, name in table:
            shade += 3
            _write_part(root / PART_DIRS[slot] / f"{slot}_{clean_name(name)}.png", (shade, 0, 0, 255))
    for slot, table in STYLED_TABLES.items():
        tiers = WearableCondition if slot in ("boots", "bottoms") else EquipmentCondition
        if slot in ("boots", "bottoms"):
            _write_part(root / PART_DIRS[slot] / f"{slot}_basic.png", (0, 0, 255, 128))
        for _, name in table:
            type_ = clean_name(name)
            for tier in tiers:
                if is_lowest(tier):
                    continue
                path = root / PART_DIRS[slot] / type_ / f"{slot}_{type_}_{clean_name(tier.value)}.png"
                _write_part(path, (0, 255, 0, 64))


@pytest.fixture(scope="session")
def parts_root() -> Path:
    if TEST_PARTS_DIR.exists():
        shutil.rmtree(TEST_PARTS_DIR)
    build_parts_tree(TEST_PARTS_DIR)
    return TEST_PARTS_DIR


@pytest.fixture
def settings(parts_root) -> Settings:
    return Settings(
        data_dir=TEST_DATA_DIR,
        parts_root=parts_root,
        api_url="http://api.test/api",
        front_end_url="http://vikings.test",
    )


@pytest.fixture(autouse=True)
def clean_test_data():
    """Wipe and re-init data-tests/ before every test."""
    if TEST_DATA_DIR.exists():
        shutil.rmtree(TEST_DATA_DIR)
    storage.init_storage(TEST_DATA_DIR)
    yield
    # leave data-tests around after tests for inspection; CI can ignore it
