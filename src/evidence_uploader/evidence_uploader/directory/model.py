from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryEntry:
    """One employee in the directory: id + display name (``nombre`` in the JSON)."""

    employee_id: str
    name: str
