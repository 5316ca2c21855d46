"""Track Routes — list, search, get, create and partially update tracks.

Invariants:
    - /search is registered before /{track_id} so it is never captured as an id
    - GET /{track_id} returns the bare track object, not a list
    - track_id may contain "/"; a non-integer id is a 404 on GET
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from catalog_api.api import convertors  # noqa: F401
from catalog_api.api.dependencies import get_catalog
from catalog_api.api.responses import success_response
from catalog_api.schemas.track import CreateTrackRequest
from catalog_api.services.music_catalog import MusicCatalog

router = APIRouter(prefix="/api/v1/tracks", tags=["tracks"])


@router.get("")
async def list_tracks(catalog: MusicCatalog = Depends(get_catalog)):
    return await catalog.list_tracks()


@router.post("")
async def create_track(
    body: CreateTrackRequest, catalog: MusicCatalog = Depends(get_catalog),
):
    track_id = await catalog.create_track(body)
    return success_response({"id": track_id}, "Track created successfully")


@router.get("/search")
async def search_tracks(
    q: str | None = None,
    field: str | None = None,
    value: str | None = None,
    catalog: MusicCatalog = Depends(get_catalog),
):
    """Free-text title search (?q=) or single-field search (?field=&value=)."""
    return await catalog.search_tracks(q, field, value)


@router.get("/{track_id:nonempty}")
async def get_track(track_id: str, catalog: MusicCatalog = Depends(get_catalog)):
    return await catalog.get_track(track_id)


@router.put("/{track_id:nonempty}")
async def update_track(
    track_id: str,
    body: dict[str, Any] = Body(...),
    catalog: MusicCatalog = Depends(get_catalog),
):
    await catalog.update_track(track_id, body)
    return success_response(message="Track updated successfully")
