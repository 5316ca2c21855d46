"""Instance ORM — places a track at a track_number within a release.

Invariants:
    - Composite primary key (id, release): a track appears at most once per release
    - id references tracks.id; release references releases.ID
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.db.base import Base


class Instance(Base):
    __tablename__ = "instances"

    id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tracks.id"), primary_key=True,
    )
    release: Mapped[str] = mapped_column(
        String(100), ForeignKey("releases.ID"), primary_key=True,
    )
    track_number: Mapped[int] = mapped_column(Integer, nullable=False)
