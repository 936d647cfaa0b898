"""hospitals table."""

from typing import Optional

from sqlalchemy import BigInteger, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from ahbets.core.database import Base

# SQLite only auto-increments INTEGER PRIMARY KEY columns.
IdType = BigInteger().with_variant(Integer, "sqlite")


class Hospital(Base):
    __tablename__ = "hospitals"

    id: Mapped[int] = mapped_column("code", IdType, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[Optional[str]] = mapped_column(Text)
    city: Mapped[Optional[str]] = mapped_column(Text)
    phone: Mapped[Optional[str]] = mapped_column(Text)
    bed_capacity: Mapped[Optional[int]] = mapped_column(Integer)

    def __repr__(self) -> str:
        return f"Hospital(id={self.id!r}, name={self.name!r})"
