"""Viking record CRUD. Records are write-once; one JSON file per number."""

import json
from pathlib import Path
from typing import Any

from vikings.errors import DuplicateVikingError
from vikings.specification import AssetSpecification, SLOT_STATS

from .core import vikings_dir

DEFAULT_DESCRIPTION = "A unique and special viking"


def _viking_path(number: int) -> Path:
    return vikings_dir() / f"{number}.json"


def record_from_specification(
    spec: AssetSpecification, name: str | None = None, description: str = DEFAULT_DESCRIPTION
) -> dict[str, Any]:
    """Flatten a specification into the stored record shape."""
    names = spec.names
    record: dict[str, Any] = {
        "number": spec.number,
        "name": name or f"Viking #{spec.number}",
        "image": spec.image_url,
        "description": description,
        "beard_name": names.beard,
        "body_name": names.body,
        "face_name": names.face,
        "top_name": names.top,
    }
    for slot, stat in SLOT_STATS.items():
        record[f"{slot}_name"] = getattr(names, slot)
        record[f"{slot}_condition"] = getattr(spec.conditions, slot).value
        record[stat] = getattr(spec.stats, stat)
    return record


def create_viking(record: dict[str, Any]) -> dict[str, Any]:
    """Persist a new record. Raises DuplicateVikingError if the number exists."""
    number = record["number"]
    path = _viking_path(number)
    text = json.dumps(record, indent=2)
    try:
        fh = path.open("x")
    except FileExistsError:
        raise DuplicateVikingError("Viking already exists", number=number, path=path)
    try:
        with fh:
            fh.write(text)
    except BaseException:
        path.unlink(missing_ok=True)
        raise
    return record


def get_viking(number: int) -> dict[str, Any] | None:
    path = _viking_path(number)
    if not path.is_file():
        return None
    return json.loads(path.read_text())


def list_vikings() -> list[dict[str, Any]]:
    """All records sorted by number."""
    records = [json.loads(p.read_text()) for p in vikings_dir().glob("*.json")]
    return sorted(records, key=lambda r: r["number"])


def count_vikings() -> int:
    return sum(1 for _ in vikings_dir().glob("*.json"))


def delete_viking(number: int) -> bool:
    path = _viking_path(number)
    if not path.is_file():
        return False
    path.unlink()
    return True


def delete_all_vikings() -> int:
    """Remove every record. Returns how many were deleted."""
    deleted = 0
    for path in vikings_dir().glob("*.json"):
        path.unlink()
        deleted += 1
    return deleted
