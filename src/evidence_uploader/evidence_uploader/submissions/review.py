from __future__ import annotations

import logging

from ..backend.repository import VersionControlBackend
from ..core.constants import DEFAULT_LABEL, NOTES_FALLBACK
from .model import ChangeSet, EvidenceSubmission, ReviewRequest, SubmissionStamp

logger = logging.getLogger(__name__)


def review_title(submission: EvidenceSubmission, display_name: str, stamp: SubmissionStamp) -> str:
    return f"{submission.kind.tag}: {display_name} ({submission.employee_id}) - {stamp.date}"


def review_body(submission: EvidenceSubmission, display_name: str, stamp: SubmissionStamp) -> str:
    lines = [
        "Evidencia subida automáticamente.",
        "",
        f"- Empleado: {display_name} ({submission.employee_id})",
        f"- Tipo: {submission.kind.value}",
        f"- Fecha: {stamp.date}",
        f"- Hora: {stamp.time}",
        f"- Notas: {submission.notes or NOTES_FALLBACK}",
    ]
    return "\n".join(lines)


class ReviewRequestOpener:
    """Opens the pull request for a change-set, then tries to label it."""

    def __init__(self, backend: VersionControlBackend, *, label: str = DEFAULT_LABEL):
        self._backend = backend
        self._label = label

    def open(
        self,
        *,
        change_set: ChangeSet,
        submission: EvidenceSubmission,
        display_name: str,
        stamp: SubmissionStamp,
    ) -> ReviewRequest:
        branch = change_set.branch
        title = review_title(submission, display_name, stamp)
        body = review_body(submission, display_name, stamp)
        pr = self._backend.create_pull_request(title=title, body=body, head=branch.name, base=branch.base_branch)
        logger.info("Opened pull request #%s for %s", pr.number, branch.name)

        self._attach_label(pr.number)

        return ReviewRequest(
            title=title,
            body=body,
            head_branch=branch.name,
            base_branch=branch.base_branch,
            number=pr.number,
            url=pr.url,
        )

    def _attach_label(self, number: int) -> None:
        """Best-effort: the label is cosmetic, so no failure here ever propagates."""
        if not self._label:
            return
        try:
            self._backend.add_labels(number, [self._label])
        except Exception as e:
            logger.debug("Could not label pull request #%s: %s", number, e)
