from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Mapping, Protocol

from ..backend.repository import VersionControlBackend
from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_BRANCH, DEFAULT_LABEL, DEFAULT_MAX_SIZE_BYTES
from ..directory.github_directory_repository import GitHubDirectoryRepository
from ..directory.service import IdentityResolver
from .branch_namer import branch_name, stamp_for
from .model import EvidenceSubmission, SubmissionResult
from .publisher import ChangeSetPublisher
from .review import ReviewRequestOpener
from .validator import validate_submission

logger = logging.getLogger(__name__)


class BackendClientFactory(Protocol):
    def create(self) -> VersionControlBackend:
        raise NotImplementedError


class EvidenceSubmissionService:
    """Use case: publish one evidence upload as a reviewable pull request.

    validate -> resolve identity -> name branch -> publish change-set -> open PR.
    Any stage may stop the chain; validation and identity errors happen before
    anything is written to the backend.
    """

    def __init__(
        self,
        client_factory: BackendClientFactory,
        *,
        default_branch: str = DEFAULT_BRANCH,
        max_size_bytes: int = DEFAULT_MAX_SIZE_BYTES,
        label: str = DEFAULT_LABEL,
        clock: Callable[[], datetime] = now_local,
    ):
        self._client_factory = client_factory
        self._default_branch = default_branch
        self._max_size_bytes = int(max_size_bytes)
        self._label = label
        self._clock = clock

    def submit(self, raw: Mapping[str, Any]) -> SubmissionResult:
        submission = validate_submission(raw, max_size_bytes=self._max_size_bytes)

        # One short-lived authenticated client per submission.
        backend = self._client_factory.create()
        try:
            return self._publish(backend, submission)
        finally:
            backend.close()

    def _publish(self, backend: VersionControlBackend, submission: EvidenceSubmission) -> SubmissionResult:
        directory = GitHubDirectoryRepository(backend, ref=self._default_branch)
        display_name = IdentityResolver(directory).resolve(submission.employee_id)

        stamp = stamp_for(self._clock())
        name = branch_name(submission.employee_id, stamp)

        change_set = ChangeSetPublisher(backend, fallback_branch=self._default_branch).publish(
            branch_name=name,
            submission=submission,
            display_name=display_name,
            stamp=stamp,
        )
        review = ReviewRequestOpener(backend, label=self._label).open(
            change_set=change_set,
            submission=submission,
            display_name=display_name,
            stamp=stamp,
        )

        logger.info(
            "Evidence %s for %s published as PR #%s (%s)",
            submission.kind.value,
            submission.employee_id,
            review.number,
            name,
        )
        return SubmissionResult(branch=name, pr_number=review.number, pr_url=review.url)
