"""Music Catalog Service — one method per catalog operation over tracks, releases, instances.

Invariants:
    - Every statement is built with SQLAlchemy Core; request values are always bound
      (except execute_query, which runs caller SQL verbatim by design)
    - Validation happens before any database access
    - Storage failures surface as DatabaseError("<operation> failed: ...") via the session manager
    - At most one write per operation; no multi-statement transactions

Design Decisions:
    - Takes the session manager, not a session: export and linked_data open one
      session per concurrent query and gather them
    - Methods return plain dicts/lists; HTTP shaping stays in api/
"""

import asyncio
import logging
from typing import Any, Mapping

from sqlalchemy import String, cast, insert, select, update

from catalog_api.core.durations import (
    DurationFormatError, current_year, format_duration, parse_duration, total_duration,
)
from catalog_api.core.errors import (
    ResourceNotFoundError, StoredDataError, ValidationFailedError,
)
from catalog_api.core.field_selection import (
    RELEASE_UPDATE_FIELDS, TRACK_UPDATE_FIELDS, check_search_field, select_update_fields,
)
from catalog_api.core.linked_data import build_album, build_music_group
from catalog_api.infrastructure.database import DatabaseSessionManager
from catalog_api.models import Instance, Release, Track
from catalog_api.schemas.admin import QueryRequest
from catalog_api.schemas.release import AddTrackToReleaseRequest, CreateReleaseRequest
from catalog_api.schemas.track import CreateTrackRequest

logger = logging.getLogger(__name__)

tracks = Track.__table__
releases = Release.__table__
instances = Instance.__table__

DEFAULT_TRACK_TYPE = "Original"
DEFAULT_TRACK_LENGTH = "00:00"
NEW_RELEASE_STATUS = "WIP"


def _track_pk(raw: str) -> int | None:
    """Track ids are integers; anything else cannot match a row."""
    raw = raw.strip()
    if raw.isascii() and raw.isdigit():
        return int(raw)
    return None


def _check_length(value: Any) -> None:
    try:
        parse_duration(value)
    except DurationFormatError as e:
        raise ValidationFailedError(str(e), field="length") from e


def _release_listing(*columns):
    """Release -> instances -> tracks left join, ordered by track_number."""
    return (
        select(*columns)
        .select_from(
            releases
            .outerjoin(instances, instances.c.release == releases.c.ID)
            .outerjoin(tracks, instances.c.id == tracks.c.id)
        )
        .order_by(instances.c.track_number)
    )


class MusicCatalog:
    """Data-access object for the catalog; one instance per request."""

    def __init__(self, db: DatabaseSessionManager, default_artist: str = "Cyjet"):
        self._db = db
        self._default_artist = default_artist

    async def _fetch_all(self, statement, action: str) -> list[dict]:
        async with self._db.session(action) as session:
            result = await session.execute(statement)
            return [dict(row) for row in result.mappings().all()]

    async def _write(self, statement, action: str) -> None:
        async with self._db.session(action) as session:
            await session.execute(statement)
            await session.commit()

    # ─── Tracks ─────────────────────────────────────────────────

    async def list_tracks(self) -> list[dict]:
        return await self._fetch_all(select(tracks), "Failed to fetch tracks")

    async def search_tracks(
        self, q: str | None, field: str | None, value: str | None,
    ) -> list[dict]:
        """Substring match on title (q) or on one whitelisted field (field+value)."""
        if q:
            column, needle = tracks.c.title, q
        elif field and value:
            column, needle = tracks.c[check_search_field(field)], value
        else:
            raise ValidationFailedError(
                "Either q parameter or both field and value parameters are required",
            )
        statement = select(tracks).where(cast(column, String).like(f"%{needle}%"))
        return await self._fetch_all(statement, "Search failed")

    async def get_track(self, track_id: str) -> dict:
        pk = _track_pk(track_id)
        if pk is None:
            raise ResourceNotFoundError("Track", track_id)
        rows = await self._fetch_all(
            select(tracks).where(tracks.c.id == pk), "Failed to fetch track",
        )
        if not rows:
            raise ResourceNotFoundError("Track", track_id)
        return rows[0]

    async def create_track(self, body: CreateTrackRequest) -> int:
        """Insert a track with defaults applied; returns the generated id."""
        if not body.title:
            raise ValidationFailedError("Title is required", field="title")
        length = body.length or DEFAULT_TRACK_LENGTH
        _check_length(length)
        values = {
            "title": body.title,
            "artist": body.artist or self._default_artist,
            "type": body.type or DEFAULT_TRACK_TYPE,
            "year": body.year or current_year(),
            "length": length,
            "bpm": body.bpm or None,
            "ISRC": body.ISRC or None,
            "Genre": body.Genre or None,
        }
        async with self._db.session("Failed to create track") as session:
            result = await session.execute(insert(tracks).values(values))
            await session.commit()
            track_id = result.inserted_primary_key[0]
        logger.info(f"Track {track_id} created", extra={"track_id": track_id})
        return track_id

    async def update_track(self, track_id: str, body: Mapping[str, Any]) -> None:
        fields = select_update_fields(body, TRACK_UPDATE_FIELDS)
        if fields.get("length") is not None:
            _check_length(fields["length"])
        pk = _track_pk(track_id)
        if pk is None:
            logger.info(f"Track update for non-integer id {track_id!r} matches nothing")
            return
        await self._write(
            update(tracks).where(tracks.c.id == pk).values(fields),
            "Failed to update track",
        )
        logger.info(
            f"Track {pk} updated: {', '.join(fields)}", extra={"track_id": pk},
        )

    # ─── Releases ───────────────────────────────────────────────

    async def list_releases(self) -> list[dict]:
        return await self._fetch_all(
            select(releases).order_by(releases.c.ID), "Failed to fetch releases",
        )

    async def get_release(self, release_id: str) -> dict:
        """Release row plus its ordered track listing and total duration."""
        action = "Failed to fetch release"
        async with self._db.session(action) as session:
            result = await session.execute(
                select(releases).where(releases.c.ID == release_id),
            )
            release = result.mappings().first()
            if release is None:
                raise ResourceNotFoundError("Release", release_id)
            result = await session.execute(
                _release_listing(
                    tracks.c.title, instances.c.track_number, tracks.c.id,
                    tracks.c.ISRC, tracks.c.length,
                ).where(releases.c.ID == release_id),
            )
            listing = [
                dict(row) for row in result.mappings().all()
                if row["track_number"] is not None
            ]
        try:
            seconds = total_duration(row["length"] for row in listing)
        except DurationFormatError as e:
            raise StoredDataError(action, str(e)) from e
        return {**release, "tracks": listing, "duration": format_duration(seconds)}

    async def get_release_tracks(self, release_id: str) -> list[dict]:
        rows = await self._fetch_all(
            _release_listing(
                tracks.c.title, instances.c.track_number, tracks.c.id, tracks.c.length,
            ).where(releases.c.ID == release_id),
            "Failed to fetch release tracks",
        )
        return [row for row in rows if row["track_number"] is not None]

    async def create_release(self, body: CreateReleaseRequest) -> None:
        """Insert a release by id; Status always starts as WIP."""
        if not body.id:
            raise ValidationFailedError("Release ID is required", field="id")
        release_id = str(body.id)
        await self._write(
            insert(releases).values(ID=release_id, Status=NEW_RELEASE_STATUS),
            "Failed to create release",
        )
        logger.info(f"Release {release_id} created", extra={"release_id": release_id})

    async def update_release(self, release_id: str, body: Mapping[str, Any]) -> None:
        fields = select_update_fields(body, RELEASE_UPDATE_FIELDS)
        await self._write(
            update(releases).where(releases.c.ID == release_id).values(fields),
            "Failed to update release",
        )
        logger.info(
            f"Release {release_id} updated: {', '.join(fields)}",
            extra={"release_id": release_id},
        )

    async def add_track_to_release(
        self, release_id: str, body: AddTrackToReleaseRequest,
    ) -> None:
        if not body.track_id or not body.track_number:
            raise ValidationFailedError("track_id and track_number are required")
        await self._write(
            insert(instances).values(
                id=body.track_id, release=release_id, track_number=body.track_number,
            ),
            "Failed to add track to release",
        )
        logger.info(
            f"Track {body.track_id} added to release {release_id} "
            f"at position {body.track_number}",
            extra={"release_id": release_id, "track_id": body.track_id},
        )

    # ─── Bulk / admin ───────────────────────────────────────────

    async def execute_query(self, body: QueryRequest) -> list[dict]:
        """Run caller-supplied SQL verbatim. Administrative backdoor: no parameterization."""
        if not body.query:
            raise ValidationFailedError("Query is required", field="query")
        logger.warning("Executing raw SQL query from /query endpoint")
        async with self._db.session("Query failed") as session:
            conn = await session.connection()
            result = await conn.exec_driver_sql(body.query)
            rows = (
                [dict(row) for row in result.mappings().all()]
                if result.returns_rows else []
            )
            await session.commit()
        return rows

    async def export(self) -> dict:
        """Full dump of all three tables, fetched concurrently."""
        action = "Export failed"
        track_rows, release_rows, instance_rows = await asyncio.gather(
            self._fetch_all(select(tracks), action),
            self._fetch_all(select(releases), action),
            self._fetch_all(select(instances), action),
        )
        return {
            "tracks": track_rows,
            "releases": release_rows,
            "instances": instance_rows,
        }

    async def _album_tracks(self, release_id: str, action: str) -> list[dict]:
        statement = (
            select(tracks, instances.c.track_number)
            .select_from(tracks.join(instances, tracks.c.id == instances.c.id))
            .where(instances.c.release == release_id)
            .order_by(instances.c.track_number)
        )
        return await self._fetch_all(statement, action)

    async def linked_data(self) -> dict:
        """schema.org MusicGroup document with one MusicAlbum per release."""
        action = "Linked data export failed"
        release_rows = await self._fetch_all(select(releases), action)
        track_lists = await asyncio.gather(
            *(self._album_tracks(r["ID"], action) for r in release_rows),
        )
        try:
            albums = [
                build_album(release, album_tracks)
                for release, album_tracks in zip(release_rows, track_lists)
            ]
        except DurationFormatError as e:
            raise StoredDataError(action, str(e)) from e
        return build_music_group(self._default_artist, albums)
