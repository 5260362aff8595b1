"""Viking read + generate endpoints."""

import asyncio

from fastapi import APIRouter, HTTPException, Request

from vikings import storage
from vikings.errors import (
    CompositeError,
    DuplicateVikingError,
    MalformedInputError,
    MissingAssetError,
)
from vikings.metadata import project, to_broadcast
from vikings.pipeline import generate_viking
from vikings.specification import RawTraitInput

router = APIRouter()


def _parse_select(select: str) -> list[str]:
    return [key.strip() for key in select.split(",") if key.strip()]


@router.get("/vikings")
async def list_vikings(select: str = ""):
    """List stored Viking records, optionally projected (?select=number,-image)."""
    keys = _parse_select(select)
    return [project(record, keys) for record in storage.list_vikings()]


@router.get("/vikings/{number}")
async def get_viking(request: Request, number: int, select: str = ""):
    """OpenSea metadata for one Viking."""
    record = storage.get_viking(number)
    if not record:
        raise HTTPException(404, "Viking not found")
    settings = request.app.state.settings
    return project(to_broadcast(record, settings.front_end_url), _parse_select(select))


@router.post("/vikings/{number}", status_code=201)
async def create_viking(request: Request, number: int, body: RawTraitInput):
    """Generate a Viking from a raw contract payload."""
    settings = request.app.state.settings
    try:
        return await asyncio.to_thread(generate_viking, number, body, settings)
    except DuplicateVikingError:
        raise HTTPException(409, f"Viking {number} already exists")
    except MalformedInputError as e:
        raise HTTPException(422, str(e))
    except MissingAssetError as e:
        raise HTTPException(500, {"message": e.message, "paths": [str(p) for p in e.paths]})
    except CompositeError as e:
        raise HTTPException(500, str(e))
