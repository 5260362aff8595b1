"""Viking generation pipeline.

One Viking:
  1. Build the asset specification from the raw contract payload.
  2. Reserve the number by persisting the flattened record (exactly once;
     duplicate → DuplicateVikingError).
  3. Composite the image into storage.images_dir(). If compositing fails the
     record is removed again so the number can be retried.

Batches run in groups of `batch_size` on a thread pool. Each Viking's
failure is recorded in the BatchReport and the batch carries on; duplicates
are reported as skipped. Nothing is retried.
"""

import logging
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from vikings import storage
from vikings.compositor import compose_image
from vikings.conditions import EquipmentCondition, WearableCondition
from vikings.errors import DuplicateVikingError, MalformedInputError, VikingError
from vikings.settings import Settings
from vikings.specification import SLOT_STATS, RawTraitInput, build_specification
from vikings.traits import known_names

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 9


class BatchReport(BaseModel):
    created: list[int] = Field(default_factory=list)
    skipped: list[int] = Field(default_factory=list)
    failed: dict[int, str] = Field(default_factory=dict)


def generate_viking(number: int, raw: RawTraitInput, settings: Settings) -> dict[str, Any]:
    """Build, persist and composite one Viking. Returns the stored record."""
    spec = build_specification(number, raw, settings.asset_config())
    record = storage.create_viking(storage.record_from_specification(spec))
    try:
        compose_image(spec, storage.images_dir())
    except BaseException:
        storage.delete_viking(number)
        raise
    logger.info("generated viking=%d body=%s", number, spec.names.body)
    return record


def generate_batch(
    numbers: Iterable[int],
    supplier: Callable[[int], RawTraitInput],
    settings: Settings,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> BatchReport:
    """Generate many Vikings, `batch_size` at a time.

    `supplier` maps a number to its payload; a payload it cannot build
    (pydantic ValidationError) is recorded as a malformed-input failure.
    """
    report = BatchReport()
    pending = list(numbers)
    total_batches = (len(pending) + batch_size - 1) // batch_size

    def _run(number: int) -> tuple[int, str | None, bool]:
        try:
            try:
                raw = supplier(number)
            except ValidationError as e:
                raise MalformedInputError(
                    f"Invalid contract payload ({e.error_count()} error(s))", number=number
                ) from e
            generate_viking(number, raw, settings)
        except DuplicateVikingError:
            return number, None, True
        except VikingError as e:
            logger.warning("viking %d failed: %s", number, e)
            return number, str(e), False
        return number, None, False

    with ThreadPoolExecutor(max_workers=batch_size) as pool:
        for index in range(0, len(pending), batch_size):
            logger.info("processing batch %d of %d", index // batch_size + 1, total_batches)
            for number, error, duplicate in pool.map(_run, pending[index:index + batch_size]):
                if duplicate:
                    report.skipped.append(number)
                elif error is not None:
                    report.failed[number] = error
                else:
                    report.created.append(number)
    return report


# ── Distribution report ──────────────────────────────────


def _stat_distribution(records: list[dict[str, Any]], field: str) -> dict[str, Any]:
    values = [r[field] for r in records]
    if not values:
        return {"min": 0, "max": 0, "average": "0.00"}
    return {
        "min": min(values),
        "max": max(values),
        "average": f"{sum(values) / len(values):.2f}",
    }


def _counts(records: list[dict[str, Any]], field: str, names: list[str]) -> dict[str, Any]:
    total = len(records)
    out: dict[str, Any] = {}
    counted = 0
    for name in names:
        count = sum(1 for r in records if r[field] == name)
        counted += count
        out[name] = {"count": count, "percent": f"{(count / total * 100) if total else 0:.2f}"}
    out["total"] = {"count": counted, "percent": f"{(counted / total * 100) if total else 0:.2f}"}
    return out


def trait_statistics(records: list[dict[str, Any]]) -> dict[str, Any]:
    """Distribution of statistics, conditions and part names across records."""
    report: dict[str, Any] = {}
    for stat in SLOT_STATS.values():
        report[stat] = _stat_distribution(records, stat)
    for slot in SLOT_STATS:
        tiers = WearableCondition if slot in ("boots", "bottoms") else EquipmentCondition
        report[f"{slot}_conditions"] = _counts(records, f"{slot}_condition", [t.value for t in tiers])
    for slot in ("beard", "body", "face", "top", *SLOT_STATS):
        report[f"{slot}_names"] = _counts(records, f"{slot}_name", known_names(slot))
    return report
