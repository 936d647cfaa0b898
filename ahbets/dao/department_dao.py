"""DepartmentDAO — departments table operations."""

from ahbets.dao.base import BaseDAO
from ahbets.models.department import Department


class DepartmentDAO(BaseDAO[Department]):
    model = Department
