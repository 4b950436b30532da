from __future__ import annotations

import base64
import binascii
from typing import Any, Mapping, Optional

from ..core.constants import ALLOWED_EXTENSIONS, DEFAULT_MAX_SIZE_BYTES
from ..core.enums import EvidenceKind
from ..core.exceptions import (
    ContentTooLargeError,
    DisallowedExtensionError,
    InvalidContentError,
    InvalidKindError,
    MissingFieldsError,
)
from .model import EvidenceSubmission

# Field name in the JSON body -> legacy Spanish alias still sent by older clients.
_ALIASES = {
    "employeeId": "empleadoId",
    "kind": "tipo",
    "notes": "notas",
}

_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")


def _field(raw: Mapping[str, Any], name: str) -> Optional[str]:
    value = raw.get(name)
    if value is None and name in _ALIASES:
        value = raw.get(_ALIASES[name])
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def decode_content(content_base64: str) -> bytes:
    """Decode a base64 payload the way lenient clients encode it.

    Tolerates a ``data:<mime>;base64,`` prefix, whitespace, the URL-safe alphabet
    and missing padding. A lone trailing character (length mod 4 == 1) carries
    no full byte and is dropped.
    """
    payload = content_base64
    if payload.startswith("data:") and "," in payload:
        payload = payload.split(",", 1)[1]
    payload = "".join(payload.split())
    payload = payload.rstrip("=").translate(_URLSAFE_TO_STANDARD)
    if len(payload) % 4 == 1:
        payload = payload[:-1]
    payload += "=" * (-len(payload) % 4)
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidContentError()


def file_extension(filename: str) -> str:
    """Lower-cased text after the last dot (the whole name when there is none)."""
    return filename.rsplit(".", 1)[-1].lower()


def validate_submission(raw: Mapping[str, Any], *, max_size_bytes: int = DEFAULT_MAX_SIZE_BYTES) -> EvidenceSubmission:
    """Validate raw upload fields and return the normalized submission.

    Checks run in a fixed order so the reported error is deterministic:
    presence -> kind -> content decoding -> size -> extension.
    """
    employee_id = _field(raw, "employeeId")
    kind = _field(raw, "kind")
    filename = _field(raw, "filename")
    content_base64 = _field(raw, "contentBase64")
    if not employee_id or not kind or not filename or not content_base64:
        raise MissingFieldsError()

    try:
        evidence_kind = EvidenceKind(kind)
    except ValueError:
        raise InvalidKindError()

    content = decode_content(content_base64)
    if len(content) > int(max_size_bytes):
        raise ContentTooLargeError()

    if file_extension(filename) not in ALLOWED_EXTENSIONS:
        raise DisallowedExtensionError()

    return EvidenceSubmission(
        employee_id=employee_id,
        kind=evidence_kind,
        notes=(_field(raw, "notes") or "").strip(),
        filename=filename,
        content=content,
    )
