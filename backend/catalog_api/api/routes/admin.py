"""Admin Routes — raw SQL execution, full export, and JSON-LD projection.

Invariants:
    - POST /query runs caller SQL verbatim; it is an administrative capability,
      not a hardened endpoint (no auth is a non-goal of this service)
    - GET /export is served as an attachment download
"""

from fastapi import APIRouter, Depends

from catalog_api.api.dependencies import get_catalog
from catalog_api.api.responses import PrettyJSONResponse, success_response
from catalog_api.config import Settings, get_settings
from catalog_api.schemas.admin import QueryRequest
from catalog_api.services.music_catalog import MusicCatalog

router = APIRouter(prefix="/api/v1", tags=["admin"])


@router.post("/query")
async def execute_query(
    body: QueryRequest, catalog: MusicCatalog = Depends(get_catalog),
):
    results = await catalog.execute_query(body)
    return success_response({"results": results})


@router.get("/export")
async def export_data(
    catalog: MusicCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    data = await catalog.export()
    return PrettyJSONResponse(
        content=data,
        headers={
            "Content-Disposition": f'attachment; filename="{settings.export_filename}"',
        },
    )


@router.get("/linked-data")
async def linked_data(catalog: MusicCatalog = Depends(get_catalog)):
    """schema.org MusicGroup/MusicAlbum document wrapped in the success envelope."""
    document = await catalog.linked_data()
    return success_response(document)
