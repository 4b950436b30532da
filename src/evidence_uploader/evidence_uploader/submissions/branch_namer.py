from __future__ import annotations

from datetime import datetime

from ..common.datetime_utils import format_compact_time, format_date
from ..common.sanitizer import sanitize_segment
from ..core.constants import BRANCH_PREFIX
from .model import SubmissionStamp


def stamp_for(now: datetime) -> SubmissionStamp:
    return SubmissionStamp(date=format_date(now), time=format_compact_time(now))


def branch_name(employee_id: str, stamp: SubmissionStamp) -> str:
    """``evidencia/<segment>/<YYYY-MM-DD>-<HHMMSS>``.

    Resolution is one second: two uploads by the same employee within the same
    second get the same name and the second one fails at branch creation.
    """
    return f"{BRANCH_PREFIX}/{sanitize_segment(employee_id)}/{stamp.date}-{stamp.time}"
