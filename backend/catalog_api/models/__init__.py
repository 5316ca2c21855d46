"""ORM Models — declarative tables for tracks, releases and instances.

Invariants:
    - Column names match the JSON keys exposed by the API (ISRC, Genre, ID, ...)
    - All models imported here so Base.metadata is complete before create_all

Design Decisions:
    - One file per entity for locality
"""

from catalog_api.models.track import Track  # noqa: F401
from catalog_api.models.release import Release  # noqa: F401
from catalog_api.models.instance import Instance  # noqa: F401
