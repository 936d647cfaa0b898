"""SQLAlchemy ORM models — one file per table."""

from ahbets.models.department import Department
from ahbets.models.hospital import Hospital

__all__ = [
    "Hospital",
    "Department",
]
