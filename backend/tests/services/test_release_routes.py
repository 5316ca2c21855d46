"""Release endpoints — creation, detail with track listing and duration, linking tracks."""

import pytest

from catalog_api.models import Release, Track


async def test_create_release_forces_wip_status(client):
    res = await client.post("/api/v1/releases", json={"id": "CYJ010", "Status": "Released", "Name": "X"})
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Release created successfully"}

    release = (await client.get("/api/v1/releases/CYJ010")).json()
    assert release["ID"] == "CYJ010"
    assert release["Status"] == "WIP"
    assert release["Name"] is None
    assert release["tracks"] == []
    assert release["duration"] == "0:00"


@pytest.mark.parametrize("payload", [{}, {"id": ""}, {"Name": "No id"}])
async def test_create_release_requires_id(client, payload):
    res = await client.post("/api/v1/releases", json=payload)
    assert res.status_code == 400
    assert res.json() == {"success": False, "message": "Release ID is required"}


async def test_duplicate_release_id_is_storage_failure(client):
    await client.post("/api/v1/releases", json={"id": "DUP"})
    res = await client.post("/api/v1/releases", json={"id": "DUP"})
    assert res.status_code == 500
    body = res.json()
    assert body["success"] is False
    assert body["message"].startswith("Failed to create release: ")


async def test_list_releases_ordered_by_id(client, insert_row):
    for release_id in ("C", "A", "B"):
        await insert_row(Release, ID=release_id)
    res = await client.get("/api/v1/releases")
    assert [r["ID"] for r in res.json()] == ["A", "B", "C"]


async def test_unknown_release_is_404(client):
    res = await client.get("/api/v1/releases/NOPE")
    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "Release not found"}


async def test_release_detail_orders_tracks_and_sums_duration(client, seeded_release):
    first, second = seeded_release["track_ids"]
    res = await client.get("/api/v1/releases/CYJ001")
    assert res.status_code == 200
    release = res.json()
    assert release["Name"] == "Night Drive"
    assert release["duration"] == "7:35"
    assert release["tracks"] == [
        {"title": "Headlights (Night Mix)", "track_number": 1, "id": second,
         "ISRC": None, "length": "4:05"},
        {"title": "Headlights", "track_number": 2, "id": first,
         "ISRC": "QZ1234567890", "length": "3:30"},
    ]


async def test_release_detail_with_malformed_stored_length_is_500(client, insert_row):
    await insert_row(Release, ID="BAD")
    track_id = await insert_row(Track, title="Broken", year=2024, length="3m")
    await client.post("/api/v1/releases/BAD/tracks", json={"track_id": track_id, "track_number": 1})
    res = await client.get("/api/v1/releases/BAD")
    assert res.status_code == 500
    assert res.json()["message"] == "Failed to fetch release: Invalid length '3m': expected M:SS"


async def test_release_tracks_projection(client, seeded_release):
    res = await client.get("/api/v1/releases/CYJ001/tracks")
    assert res.status_code == 200
    listing = res.json()
    assert [t["track_number"] for t in listing] == [1, 2]
    assert set(listing[0]) == {"title", "track_number", "id", "length"}


async def test_release_tracks_for_unknown_release_is_empty(client):
    res = await client.get("/api/v1/releases/NOPE/tracks")
    assert res.status_code == 200
    assert res.json() == []


async def test_add_track_to_release(client, insert_row):
    await insert_row(Release, ID="EP1")
    track_id = await insert_row(Track, title="Opener", year=2024, length="2:00")
    res = await client.post("/api/v1/releases/EP1/tracks", json={"track_id": track_id, "track_number": 1})
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Track added to release successfully"}

    listing = (await client.get("/api/v1/releases/EP1/tracks")).json()
    assert listing == [{"title": "Opener", "track_number": 1, "id": track_id, "length": "2:00"}]


async def test_same_track_can_appear_on_two_releases(client, insert_row):
    await insert_row(Release, ID="SINGLE")
    await insert_row(Release, ID="ALBUM")
    track_id = await insert_row(Track, title="Hit", year=2024, length="3:00")
    for release_id, position in (("SINGLE", 1), ("ALBUM", 7)):
        res = await client.post(
            f"/api/v1/releases/{release_id}/tracks",
            json={"track_id": track_id, "track_number": position},
        )
        assert res.status_code == 200
    album = (await client.get("/api/v1/releases/ALBUM")).json()
    assert album["tracks"][0]["track_number"] == 7


@pytest.mark.parametrize("payload", [
    {},
    {"track_id": 1},
    {"track_number": 1},
    {"track_id": 1, "track_number": 0},
    {"track_id": 0, "track_number": 1},
])
async def test_add_track_requires_truthy_fields(client, payload):
    res = await client.post("/api/v1/releases/EP1/tracks", json=payload)
    assert res.status_code == 400
    assert res.json()["message"] == "track_id and track_number are required"


async def test_update_release_fields(client, insert_row):
    await insert_row(Release, ID="EP2")
    res = await client.put("/api/v1/releases/EP2", json={
        "Name": "Second EP", "Status": "Released", "UPC": 5012345678900, "ID": "HIJACK",
    })
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Release updated successfully"}

    release = (await client.get("/api/v1/releases/EP2")).json()
    assert release["Name"] == "Second EP"
    assert release["Status"] == "Released"
    assert release["UPC"] == 5012345678900


async def test_update_release_without_valid_fields_is_400(client):
    res = await client.put("/api/v1/releases/EP2", json={"name": "lowercase is not a column"})
    assert res.status_code == 400
    assert res.json()["message"].startswith("No valid fields to update.")


async def test_release_id_containing_slash_is_routed_whole(client, insert_row):
    res = await client.post("/api/v1/releases", json={"id": "CYJ/001", "Name": "Split"})
    assert res.status_code == 200

    res = await client.put("/api/v1/releases/CYJ/001", json={"Name": "Split Single"})
    assert res.json() == {"success": True, "message": "Release updated successfully"}

    release = (await client.get("/api/v1/releases/CYJ/001")).json()
    assert release["ID"] == "CYJ/001"
    assert release["Name"] == "Split Single"

    track_id = await insert_row(Track, title="Side A", length="2:10")
    res = await client.post("/api/v1/releases/CYJ/001/tracks", json={"track_id": track_id, "track_number": 1})
    assert res.status_code == 200
    tracks = (await client.get("/api/v1/releases/CYJ/001/tracks")).json()
    assert [t["title"] for t in tracks] == ["Side A"]


async def test_release_path_ending_in_tracks_is_the_track_listing(client, insert_row):
    await insert_row(Release, ID="EP3")
    res = await client.get("/api/v1/releases/EP3/tracks")
    assert res.status_code == 200
    assert res.json() == []
