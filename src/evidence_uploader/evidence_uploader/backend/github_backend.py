from __future__ import annotations

import base64
import logging
from typing import Any, Optional, Sequence
from urllib.parse import quote

import requests

from ..core.exceptions import BackendError, BranchCreationError
from .repository import PullRequestRef, VersionControlBackend

logger = logging.getLogger(__name__)

RAW_CONTENT_MEDIA_TYPE = "application/vnd.github.raw+json"


class GitHubRequestError(BackendError):
    """A GitHub REST call failed (transport error or non-2xx status)."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GitHubBackend(VersionControlBackend):
    """Thin wrapper around the GitHub REST API for one repository.

    The session it receives is already authenticated and is meant to live for a
    single submission only (see ``GitHubClientFactory``).
    """

    def __init__(
        self,
        session: requests.Session,
        *,
        owner: str,
        repo: str,
        api_url: str = "https://api.github.com",
        timeout: Optional[float] = None,
    ):
        self._session = session
        self._timeout = timeout
        self.owner = owner
        self.repo = repo
        self.base_url = f"{api_url.rstrip('/')}/repos/{owner}/{repo}"

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            resp = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.RequestException as e:
            raise GitHubRequestError(f"{method} {path} failed: {e}") from e
        if resp.status_code >= 400:
            raise GitHubRequestError(
                f"{method} {path} failed: {resp.status_code} {resp.text[:200]}",
                status_code=resp.status_code,
            )
        return resp

    def get_file_content(self, path: str, *, ref: str) -> bytes:
        """Raw bytes of a file at ``ref``."""
        resp = self._request(
            "GET",
            f"/contents/{quote(path, safe='/')}",
            params={"ref": ref},
            headers={"Accept": RAW_CONTENT_MEDIA_TYPE},
        )
        return resp.content

    def get_default_branch(self) -> str:
        data = self._request("GET", "").json()
        return data.get("default_branch") or ""

    def get_branch_head(self, branch: str) -> str:
        data = self._request("GET", f"/git/ref/heads/{quote(branch, safe='/')}").json()
        return data["object"]["sha"]

    def create_branch(self, branch: str, *, sha: str) -> None:
        try:
            self._request("POST", "/git/refs", json={"ref": f"refs/heads/{branch}", "sha": sha})
        except GitHubRequestError as e:
            if e.status_code == 422:
                raise BranchCreationError(f"Branch {branch!r} already exists") from e
            raise BranchCreationError(f"Could not create branch {branch!r}: {e}") from e

    def put_file(self, path: str, *, branch: str, message: str, content: bytes) -> str:
        payload = {
            "message": message,
            "content": base64.b64encode(content).decode("ascii"),
            "branch": branch,
        }
        data = self._request("PUT", f"/contents/{quote(path, safe='/')}", json=payload).json()
        return (data.get("commit") or {}).get("sha", "")

    def create_pull_request(self, *, title: str, body: str, head: str, base: str) -> PullRequestRef:
        data = self._request(
            "POST",
            "/pulls",
            json={"title": title, "body": body, "head": head, "base": base},
        ).json()
        return PullRequestRef(number=int(data["number"]), url=data["html_url"])

    def add_labels(self, number: int, labels: Sequence[str]) -> None:
        self._request("POST", f"/issues/{int(number)}/labels", json={"labels": list(labels)})

    def close(self) -> None:
        self._session.close()
