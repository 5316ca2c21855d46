"""Track ORM — a single recorded song with descriptive metadata.

Invariants:
    - id is an integer primary key generated by the store
    - title is non-nullable; type/artist/length carry server-side defaults
    - year has no column default; the catalog service supplies the current year
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.db.base import Base


class Track(Base):
    __tablename__ = "tracks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    type: Mapped[str] = mapped_column(
        String(50), nullable=False, default="Original",
    )
    artist: Mapped[str] = mapped_column(
        String(200), nullable=False, default="Cyjet",
    )
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    length: Mapped[str] = mapped_column(
        String(16), nullable=False, default="00:00",
    )
    bpm: Mapped[int | None] = mapped_column(Integer, nullable=True)
    ISRC: Mapped[str | None] = mapped_column(String(20), nullable=True)
    Genre: Mapped[str | None] = mapped_column(String(100), nullable=True)
    song_fname: Mapped[str | None] = mapped_column(String(500), nullable=True)
