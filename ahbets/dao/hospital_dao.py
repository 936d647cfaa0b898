"""HospitalDAO — hospitals table operations."""

from ahbets.dao.base import BaseDAO
from ahbets.models.hospital import Hospital


class HospitalDAO(BaseDAO[Hospital]):
    model = Hospital
