"""Place ORM: a reviewable location identified by (name, address).

Invariants:
    - (name, address) is unique (uq_places_name_address)
    - Created implicitly by review submission; never updated or deleted
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from place_reviews.db.base import Base


class Place(Base):
    __tablename__ = "places"
    __table_args__ = (
        UniqueConstraint("name", "address", name="uq_places_name_address"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    reviews: Mapped[list["Review"]] = relationship(
        "Review", back_populates="place",
    )
