"""Administrative endpoints: synthetic batch generation, statistics, reset.

Not for production exposure; these drive local full-scale test runs.
"""

import asyncio
import random
import shutil

from fastapi import APIRouter, Request

from vikings import storage
from vikings.generator import generate_raw_input
from vikings.pipeline import generate_batch, trait_statistics

router = APIRouter(prefix="/admin")


@router.post("/make/{count}")
async def make_vikings(request: Request, count: int, start: int = 0, seed: int | None = None):
    """Generate `count` Vikings from synthetic payloads, numbered from `start`."""
    settings = request.app.state.settings
    rng = random.Random(seed)
    numbers = range(start, start + count)
    # Draw payloads up front so a seed fixes the result regardless of thread order.
    payloads = {n: generate_raw_input(rng) for n in numbers}
    report = await asyncio.to_thread(generate_batch, numbers, payloads.__getitem__, settings)
    return report.model_dump()


@router.get("/stats")
async def statistics():
    """Distribution of statistics, conditions and part names across stored Vikings."""
    records = storage.list_vikings()
    return {"total": len(records), **trait_statistics(records)}


@router.post("/reset")
async def reset():
    """Delete every Viking record and image."""
    deleted = storage.delete_all_vikings()
    shutil.rmtree(storage.images_dir(), ignore_errors=True)
    storage.images_dir().mkdir(parents=True, exist_ok=True)
    return {"ok": True, "deleted": deleted}
