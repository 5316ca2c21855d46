"""Release Schemas — request bodies for release creation and track linking."""

from pydantic import BaseModel


class CreateReleaseRequest(BaseModel):
    """Release creation — only the caller-chosen id is accepted."""
    id: str | int | None = None


class AddTrackToReleaseRequest(BaseModel):
    """Links an existing track into a release at a position.

    Both fields must be truthy: track_number 0 is rejected like a missing field.
    """
    track_id: int | None = None
    track_number: int | None = None
