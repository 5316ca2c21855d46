"""Update Field Selection — whitelist intersection for partial updates.

Invariants:
    - Only whitelisted column names ever reach an UPDATE statement
    - Selected fields follow the whitelist's order, not the request body's
    - Unknown keys are ignored; an empty selection is a validation error

Design Decisions:
    - Whitelists are tuples so their order is a stable contract
"""

from typing import Any, Mapping

from catalog_api.core.errors import ValidationFailedError

TRACK_UPDATE_FIELDS = (
    "title", "type", "artist", "year", "length", "bpm", "ISRC", "Genre", "song_fname",
)
RELEASE_UPDATE_FIELDS = (
    "Name", "Status", "UPC", "Catalogue", "ReleaseDate", "PromoLink", "Bandcamp",
)
TRACK_SEARCH_FIELDS = ("artist", "type", "title", "year")


def select_update_fields(
    body: Mapping[str, Any], allowed: tuple[str, ...],
) -> dict[str, Any]:
    """Return {field: value} for the whitelisted keys present in body.

    Raises:
        ValidationFailedError: when no whitelisted key is present.
    """
    selected = {name: body[name] for name in allowed if name in body}
    if not selected:
        raise ValidationFailedError(
            f"No valid fields to update. Valid fields are: {', '.join(allowed)}",
        )
    return selected


def check_search_field(field: str) -> str:
    """Validate a field-mode search column name."""
    if field not in TRACK_SEARCH_FIELDS:
        raise ValidationFailedError(
            f"Invalid field. Valid fields are: {', '.join(TRACK_SEARCH_FIELDS)}",
            field="field",
        )
    return field
