from __future__ import annotations

from typing import Optional, Protocol

from .model import DirectoryEntry


class DirectoryRepository(Protocol):
    """Read-only view over the externally maintained employee directory.

    Two outcomes must stay distinct: ``lookup`` returns ``None`` when the
    directory is readable but has no such id, and raises
    ``DirectoryUnavailableError`` when the directory itself cannot be read.
    """

    def lookup(self, employee_id: str) -> Optional[DirectoryEntry]:
        raise NotImplementedError
