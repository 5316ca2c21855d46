"""MusicCatalog service — direct calls without HTTP."""

import pytest

from catalog_api.core.errors import DatabaseError, ResourceNotFoundError, ValidationFailedError
from catalog_api.models import Instance, Release, Track
from catalog_api.schemas.admin import QueryRequest
from catalog_api.schemas.release import CreateReleaseRequest
from catalog_api.schemas.track import CreateTrackRequest
from catalog_api.services.music_catalog import MusicCatalog


async def test_create_track_uses_configured_default_artist(db_manager):
    catalog = MusicCatalog(db_manager, default_artist="Side Project")
    track_id = await catalog.create_track(CreateTrackRequest(title="B-side"))
    assert (await catalog.get_track(str(track_id)))["artist"] == "Side Project"


async def test_numeric_release_id_is_stored_as_text(catalog):
    await catalog.create_release(CreateReleaseRequest(id=42))
    assert [r["ID"] for r in await catalog.list_releases()] == ["42"]


async def test_release_without_instances_has_empty_listing(catalog, insert_row):
    await insert_row(Release, ID="LONELY")
    release = await catalog.get_release("LONELY")
    assert release["tracks"] == []
    assert await catalog.get_release_tracks("LONELY") == []


async def test_dangling_instance_is_listed_without_track_fields(catalog, insert_row):
    await insert_row(Release, ID="DANGLING")
    await insert_row(Instance, id=777, release="DANGLING", track_number=1)
    listing = await catalog.get_release_tracks("DANGLING")
    assert listing == [{"title": None, "track_number": 1, "id": None, "length": None}]
    assert (await catalog.get_release("DANGLING"))["duration"] == "0:00"


async def test_update_track_non_integer_id_touches_nothing(catalog, insert_row):
    track_id = await insert_row(Track, title="Keep", year=2024)
    await catalog.update_track("1abc", {"title": "Changed"})
    assert (await catalog.get_track(str(track_id)))["title"] == "Keep"


async def test_get_missing_track_raises(catalog):
    with pytest.raises(ResourceNotFoundError):
        await catalog.get_track("404")


async def test_update_validates_before_touching_storage(catalog):
    with pytest.raises(ValidationFailedError):
        await catalog.update_release("ANY", {})


async def test_storage_errors_name_the_operation(catalog):
    await catalog.execute_query(QueryRequest(query="DROP TABLE tracks"))
    with pytest.raises(DatabaseError) as exc_info:
        await catalog.list_tracks()
    assert exc_info.value.message == "Failed to fetch tracks: no such table: tracks"


async def test_linked_data_runs_per_release_lookups(catalog, seeded_release, insert_row):
    for release_id in ("R1", "R2", "R3"):
        await insert_row(Release, ID=release_id)
    document = await catalog.linked_data()
    assert sorted(a["@id"] for a in document["album"]) == [
        "album:CYJ001", "album:R1", "album:R2", "album:R3",
    ]
