"""Track Schemas — request bodies for track creation."""

from pydantic import BaseModel


class CreateTrackRequest(BaseModel):
    """Track creation — only title is required (checked by the service)."""
    title: str | None = None
    artist: str | None = None
    type: str | None = None
    year: int | None = None
    length: str | None = None
    bpm: int | None = None
    ISRC: str | None = None
    Genre: str | None = None
