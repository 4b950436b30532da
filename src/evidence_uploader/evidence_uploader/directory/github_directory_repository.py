from __future__ import annotations

import json
from typing import List, Optional

from ..backend.repository import VersionControlBackend
from ..core.constants import DIRECTORY_PATH
from ..core.exceptions import BackendError, DirectoryUnavailableError
from .model import DirectoryEntry
from .repository import DirectoryRepository


def parse_directory(raw: bytes) -> List[DirectoryEntry]:
    """Parse ``docs/employees.json``: an ordered array of ``{"id", "nombre"}``.

    Ids are compared as strings, so ``123`` and ``"123"`` are the same employee.
    An entry without ``nombre`` is displayed by its id.
    """
    try:
        data = json.loads(raw.decode("utf-8-sig"))
    except (UnicodeDecodeError, ValueError) as e:
        raise DirectoryUnavailableError(f"{DIRECTORY_PATH} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise DirectoryUnavailableError(f"{DIRECTORY_PATH} must contain a JSON array")

    entries: List[DirectoryEntry] = []
    for item in data:
        if not isinstance(item, dict) or item.get("id") is None:
            continue
        employee_id = str(item["id"])
        entries.append(DirectoryEntry(employee_id=employee_id, name=str(item.get("nombre") or employee_id)))
    return entries


class GitHubDirectoryRepository(DirectoryRepository):
    """Directory snapshot read from the target repository at a fixed ref."""

    def __init__(self, backend: VersionControlBackend, *, ref: str, path: str = DIRECTORY_PATH):
        self._backend = backend
        self._ref = ref
        self._path = path

    def lookup(self, employee_id: str) -> Optional[DirectoryEntry]:
        try:
            raw = self._backend.get_file_content(self._path, ref=self._ref)
        except BackendError as e:
            raise DirectoryUnavailableError(f"Could not read {self._path}@{self._ref}: {e}") from e

        for entry in parse_directory(raw):
            if entry.employee_id == employee_id:
                return entry
        return None
