from __future__ import annotations

import re

from ..core.constants import FILENAME_MAX_LENGTH, SEGMENT_MAX_LENGTH

_UNSAFE_SEGMENT_RE = re.compile(r"[^A-Za-z0-9_\-]+")
_UNDERSCORES_RE = re.compile(r"_+")
_PATH_SEPARATORS_RE = re.compile(r"[\\/]+")


def sanitize_segment(value: str) -> str:
    """Normalize an employee id into a safe branch/path segment.

    Lowercases, turns every run of characters outside ``[A-Za-z0-9_-]`` into a
    single ``_`` and truncates to 64 characters. Idempotent.
    """
    lowered = value.lower()
    collapsed = _UNDERSCORES_RE.sub("_", _UNSAFE_SEGMENT_RE.sub("_", lowered))
    return collapsed[:SEGMENT_MAX_LENGTH]


def sanitize_filename(name: str) -> str:
    """Stored file name: path separators replaced, truncated to 120 characters."""
    return _PATH_SEPARATORS_RE.sub("_", name)[:FILENAME_MAX_LENGTH]
