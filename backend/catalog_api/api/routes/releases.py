"""Release Routes — releases, their track listings, and linking tracks into them.

Invariants:
    - /{release_id}/tracks is matched only with the literal "tracks" suffix, and any
      path ending in /tracks never reaches the release detail routes
    - release_id may contain "/" (e.g. "CYJ/001"); empty ids fall through to the listing
    - Release ids are caller-chosen strings, passed through unchanged
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from catalog_api.api import convertors  # noqa: F401
from catalog_api.api.dependencies import get_catalog
from catalog_api.api.responses import success_response
from catalog_api.schemas.release import AddTrackToReleaseRequest, CreateReleaseRequest
from catalog_api.services.music_catalog import MusicCatalog

router = APIRouter(prefix="/api/v1/releases", tags=["releases"])


@router.get("")
async def list_releases(catalog: MusicCatalog = Depends(get_catalog)):
    return await catalog.list_releases()


@router.post("")
async def create_release(
    body: CreateReleaseRequest, catalog: MusicCatalog = Depends(get_catalog),
):
    await catalog.create_release(body)
    return success_response(message="Release created successfully")


@router.get("/{release_id:nonempty}/tracks")
async def get_release_tracks(
    release_id: str, catalog: MusicCatalog = Depends(get_catalog),
):
    return await catalog.get_release_tracks(release_id)


@router.post("/{release_id:nonempty}/tracks")
async def add_track_to_release(
    release_id: str,
    body: AddTrackToReleaseRequest,
    catalog: MusicCatalog = Depends(get_catalog),
):
    await catalog.add_track_to_release(release_id, body)
    return success_response(message="Track added to release successfully")


@router.get("/{release_id:release_detail}")
async def get_release(release_id: str, catalog: MusicCatalog = Depends(get_catalog)):
    """Release fields plus ordered `tracks` and total `duration` (M:SS)."""
    return await catalog.get_release(release_id)


@router.put("/{release_id:release_detail}")
async def update_release(
    release_id: str,
    body: dict[str, Any] = Body(...),
    catalog: MusicCatalog = Depends(get_catalog),
):
    await catalog.update_release(release_id, body)
    return success_response(message="Release updated successfully")
