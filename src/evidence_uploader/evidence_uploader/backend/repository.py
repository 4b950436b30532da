from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence


@dataclass(frozen=True)
class PullRequestRef:
    number: int
    url: str


class VersionControlBackend(Protocol):
    """Capabilities the evidence workflow needs from the hosting platform.

    Services depend on this interface only, so tests can swap in an
    in-memory fake. Implementations raise ``BackendError`` on any failure.
    """

    def get_file_content(self, path: str, *, ref: str) -> bytes:
        raise NotImplementedError

    def get_default_branch(self) -> str:
        raise NotImplementedError

    def get_branch_head(self, branch: str) -> str:
        raise NotImplementedError

    def create_branch(self, branch: str, *, sha: str) -> None:
        """Raises ``BranchCreationError`` when the ref cannot be created."""

        raise NotImplementedError

    def put_file(self, path: str, *, branch: str, message: str, content: bytes) -> str:
        """Create or update ``path`` on ``branch``; returns the commit sha."""

        raise NotImplementedError

    def create_pull_request(self, *, title: str, body: str, head: str, base: str) -> PullRequestRef:
        raise NotImplementedError

    def add_labels(self, number: int, labels: Sequence[str]) -> None:
        raise NotImplementedError

    def close(self) -> None:
        """Release the connection held for this submission."""

        raise NotImplementedError
