"""Route Dependencies — builds the per-request catalog service."""

from fastapi import Depends

from catalog_api.config import Settings, get_settings
from catalog_api.infrastructure.database import get_db_manager
from catalog_api.services.music_catalog import MusicCatalog


def get_catalog(settings: Settings = Depends(get_settings)) -> MusicCatalog:
    """FastAPI dependency for the catalog service."""
    return MusicCatalog(get_db_manager(), default_artist=settings.default_artist)
