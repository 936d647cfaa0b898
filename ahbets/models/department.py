"""departments table."""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from ahbets.core.database import Base
from ahbets.models.hospital import IdType


class Department(Base):
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column("deprt_id", IdType, primary_key=True, autoincrement=True)
    dep_name: Mapped[str] = mapped_column(Text, nullable=False)
    available: Mapped[Optional[int]] = mapped_column(Integer)
    released: Mapped[Optional[int]] = mapped_column(Integer)
    assigned: Mapped[Optional[int]] = mapped_column(Integer)
    hospital_id: Mapped[Optional[int]] = mapped_column(
        "hcode",
        IdType,
        ForeignKey("hospitals.code", ondelete="SET NULL"),
        index=True,
    )

    def __repr__(self) -> str:
        return f"Department(id={self.id!r}, dep_name={self.dep_name!r})"
