from __future__ import annotations

import logging

from ..core.exceptions import DirectoryUnavailableError, UnknownEmployeeError
from .repository import DirectoryRepository

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Use case: turn an employee id into the name shown in commits and PRs.

    A missing or unreadable directory never blocks an upload (the raw id is
    used instead); operators disable the check by not publishing the file. A
    readable directory that does not list the id rejects the upload.
    """

    def __init__(self, directory: DirectoryRepository):
        self._directory = directory

    def resolve(self, employee_id: str) -> str:
        try:
            entry = self._directory.lookup(employee_id)
        except DirectoryUnavailableError as e:
            logger.warning("Employee directory unavailable, using raw id %r: %s", employee_id, e)
            return employee_id

        if entry is None:
            raise UnknownEmployeeError()
        return entry.name
