"""Service test fixtures — file-backed SQLite database + FastAPI test client.

Invariants:
    - Every test gets a fresh SQLite file under tmp_path
    - get_catalog dependency overridden to use the test database
    - App exceptions are turned into responses, not re-raised, so the
      catch-all 500 handler can be asserted on

Design Decisions:
    - File database instead of :memory: so export/linked-data can open
      concurrent connections that all see the same tables
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import insert

from catalog_api.api.dependencies import get_catalog
from catalog_api.infrastructure.database import DatabaseSessionManager
from catalog_api.main import app
from catalog_api.models import Instance, Release, Track
from catalog_api.services.music_catalog import MusicCatalog


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}",
    )
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
def catalog(db_manager):
    return MusicCatalog(db_manager, default_artist="Cyjet")


@pytest.fixture
async def client(catalog):
    """FastAPI test client with the catalog dependency overridden."""
    app.dependency_overrides[get_catalog] = lambda: catalog
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def insert_row(db_manager):
    """Insert a row directly, bypassing API validation. Returns the primary key."""
    async def _insert(model, **values):
        async with db_manager.session() as session:
            result = await session.execute(insert(model.__table__).values(**values))
            await session.commit()
            return result.inserted_primary_key[0]
    return _insert


@pytest.fixture
async def seeded_release(insert_row):
    """Release CYJ001 with two tracks (3:30 at position 2, 4:05 at position 1)."""
    await insert_row(
        Release, ID="CYJ001", Name="Night Drive", Status="Released",
        Catalogue="CYJ-001", ReleaseDate="2024-03-01", UPC=1234567890123,
        Bandcamp="https://cyjet.bandcamp.com/album/night-drive",
    )
    first = await insert_row(
        Track, title="Headlights", artist="Cyjet", type="Original",
        year=2024, length="3:30", bpm=128, ISRC="QZ1234567890", Genre="Synthwave",
    )
    second = await insert_row(
        Track, title="Headlights (Night Mix)", artist="Cyjet", type="Remix",
        year=2024, length="4:05",
    )
    await insert_row(Instance, id=first, release="CYJ001", track_number=2)
    await insert_row(Instance, id=second, release="CYJ001", track_number=1)
    return {"release_id": "CYJ001", "track_ids": (first, second)}
