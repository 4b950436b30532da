from __future__ import annotations

from enum import Enum


class EvidenceKind(str, Enum):
    """Tipo de evidencia: marcaje de entrada o de salida."""

    ENTRADA = "entrada"
    SALIDA = "salida"

    @property
    def tag(self) -> str:
        """Upper-case tag used in commit messages and PR titles."""
        return self.value.upper()
