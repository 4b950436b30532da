from __future__ import annotations

import logging

from ..backend.repository import VersionControlBackend
from ..common.sanitizer import sanitize_filename, sanitize_segment
from ..core.constants import EVIDENCE_ROOT, METADATA_SUFFIX
from ..core.exceptions import BackendError
from .model import BranchDescriptor, ChangeSet, CommitRecord, EvidenceSubmission, MetadataRecord, SubmissionStamp

logger = logging.getLogger(__name__)


def evidence_paths(submission: EvidenceSubmission, stamp: SubmissionStamp) -> tuple[str, str]:
    """(evidence path, metadata path) inside the target repository."""
    directory = f"{EVIDENCE_ROOT}/{sanitize_segment(submission.employee_id)}/{stamp.date}"
    prefix = f"{directory}/{submission.kind.value}-{stamp.time}"
    return f"{prefix}-{sanitize_filename(submission.filename)}", f"{prefix}-{METADATA_SUFFIX}"


def commit_message(submission: EvidenceSubmission, display_name: str, stamp: SubmissionStamp) -> str:
    return (
        f"[{submission.kind.tag}] {display_name} ({submission.employee_id}) - "
        f"{stamp.date} {stamp.time} - {sanitize_filename(submission.filename)}"
    )


class ChangeSetPublisher:
    """Creates the evidence branch and commits the file plus its metadata.

    Steps run strictly in order: base lookup -> branch -> evidence -> metadata.
    Nothing is rolled back: once the branch exists a later failure leaves it
    orphaned (the branch name is logged so operators can clean it up).
    """

    def __init__(self, backend: VersionControlBackend, *, fallback_branch: str):
        self._backend = backend
        self._fallback_branch = fallback_branch

    def _base(self) -> tuple[str, str]:
        base_branch = self._backend.get_default_branch() or self._fallback_branch
        return base_branch, self._backend.get_branch_head(base_branch)

    def publish(
        self,
        *,
        branch_name: str,
        submission: EvidenceSubmission,
        display_name: str,
        stamp: SubmissionStamp,
    ) -> ChangeSet:
        base_branch, base_sha = self._base()
        self._backend.create_branch(branch_name, sha=base_sha)
        branch = BranchDescriptor(name=branch_name, base_commit=base_sha, base_branch=base_branch)

        file_path, meta_path = evidence_paths(submission, stamp)
        message = commit_message(submission, display_name, stamp)
        metadata = MetadataRecord(
            employee_id=submission.employee_id,
            employee_name=display_name,
            kind=submission.kind,
            notes=submission.notes,
            date=stamp.date,
            time=stamp.time,
            filename=sanitize_filename(submission.filename),
        )

        try:
            evidence = self._commit(branch_name, file_path, message, submission.content)
            meta = self._commit(branch_name, meta_path, f"{message} (metadata)", metadata.to_json_bytes())
        except BackendError:
            logger.warning("Commit failed, branch %s left without a complete change-set", branch_name)
            raise

        logger.info("Published change-set on %s (base %s@%s)", branch_name, base_branch, base_sha[:7])
        return ChangeSet(branch=branch, evidence=evidence, metadata=meta)

    def _commit(self, branch: str, path: str, message: str, content: bytes) -> CommitRecord:
        sha = self._backend.put_file(path, branch=branch, message=message, content=content)
        return CommitRecord(path=path, message=message, content=content, sha=sha or None)
