"""Release ORM — an album/EP identified by a caller-chosen ID.

Invariants:
    - ID is the primary key and is never generated by the store
    - Status defaults to "WIP"
"""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.db.base import Base


class Release(Base):
    __tablename__ = "releases"

    ID: Mapped[str] = mapped_column(String(100), primary_key=True)
    Name: Mapped[str | None] = mapped_column(String(500), nullable=True)
    Status: Mapped[str] = mapped_column(String(50), nullable=False, default="WIP")
    UPC: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    Catalogue: Mapped[str | None] = mapped_column(String(100), nullable=True)
    ReleaseDate: Mapped[str | None] = mapped_column(String(50), nullable=True)
    PromoLink: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    Bandcamp: Mapped[str | None] = mapped_column(String(1000), nullable=True)
