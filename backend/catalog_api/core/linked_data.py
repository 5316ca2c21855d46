"""Linked Data Projection — schema.org JSON-LD for releases and their tracks.

Invariants:
    - Pure: rows in, dicts out, no IO
    - Absent values (None) are dropped at every nesting level, never emitted as null
    - Durations use the "PT" + M:SS form, e.g. "PT7:35"
    - recordingType: Original/Remix/Live map to their schema.org names, anything else is StudioRecording
"""

from typing import Any, Mapping

from catalog_api.core.durations import format_duration, total_duration

SCHEMA_ORG_CONTEXT = "https://schema.org"

RECORDING_TYPES = {
    "Original": "StudioRecording",
    "Remix": "RemixRecording",
    "Live": "LiveRecording",
}
DEFAULT_RECORDING_TYPE = "StudioRecording"


def recording_type(track_type: str | None) -> str:
    return RECORDING_TYPES.get(track_type, DEFAULT_RECORDING_TYPE)


def drop_absent(value: Any) -> Any:
    """Recursively remove None-valued keys from dicts (lists are walked, not filtered)."""
    if isinstance(value, dict):
        return {k: drop_absent(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [drop_absent(v) for v in value]
    return value


def build_recording(track: Mapping[str, Any]) -> dict:
    """MusicRecording for one track row (tracks.* plus track_number)."""
    artist = track.get("artist")
    year = track.get("year")
    return drop_absent({
        "@type": "MusicRecording",
        "@id": f"track:{track['id']}",
        "name": track.get("title"),
        "byArtist": {"@type": "MusicGroup", "name": artist},
        "position": track.get("track_number"),
        "duration": f"PT{track['length']}" if track.get("length") else None,
        "datePublished": str(year) if year is not None else None,
        "recordingOf": {
            "@type": "MusicComposition",
            "name": track.get("title"),
            "composer": {"@type": "Person", "name": artist},
        },
        "isrc": track.get("ISRC"),
        "genre": track.get("Genre"),
        "tempoMarking": f"{track['bpm']} BPM" if track.get("bpm") else None,
        "recordingType": recording_type(track.get("type")),
    })


def build_album(
    release: Mapping[str, Any], tracks: list[Mapping[str, Any]],
) -> dict:
    """MusicAlbum for one release row and its ordered track rows.

    Raises:
        DurationFormatError: if a track carries a malformed length.
    """
    duration = None
    if tracks:
        seconds = total_duration(t.get("length") for t in tracks)
        duration = f"PT{format_duration(seconds)}"
    return drop_absent({
        "@type": "MusicAlbum",
        "@id": f"album:{release['ID']}",
        "name": release.get("Name"),
        "albumReleaseType": "AlbumRelease",
        "datePublished": release.get("ReleaseDate"),
        "catalogNumber": release.get("Catalogue"),
        "gtin13": release.get("UPC"),
        "url": release.get("Bandcamp"),
        "duration": duration,
        "track": [build_recording(t) for t in tracks],
    })


def build_music_group(name: str, albums: list[dict]) -> dict:
    """Top-level JSON-LD document: one MusicGroup owning every album."""
    return {
        "@context": SCHEMA_ORG_CONTEXT,
        "@type": "MusicGroup",
        "name": name,
        "album": albums,
    }
