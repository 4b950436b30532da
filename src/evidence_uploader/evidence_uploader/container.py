from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .backend.client import GitHubClientFactory, GitHubConfig
from .core.constants import DEFAULT_BRANCH, DEFAULT_LABEL, DEFAULT_MAX_SIZE_BYTES
from .submissions.service import BackendClientFactory, EvidenceSubmissionService


@dataclass(frozen=True)
class Container:
    client_factory: BackendClientFactory
    submission_service: EvidenceSubmissionService
    max_size_bytes: int


def _optional(value) -> Optional[str]:
    text = str(value).strip() if value is not None else ""
    return text or None


def build_github_config(github_config: dict) -> GitHubConfig:
    private_key = _optional(github_config.get("private_key"))
    if private_key:
        # Keys pasted into a single env var usually carry literal "\n".
        private_key = private_key.replace("\\n", "\n")
    timeout = _optional(github_config.get("timeout"))

    return GitHubConfig(
        owner=str(github_config.get("owner") or ""),
        repo=str(github_config.get("repo") or ""),
        api_url=str(github_config.get("api_url") or "https://api.github.com"),
        app_id=_optional(github_config.get("app_id")),
        private_key=private_key,
        installation_id=_optional(github_config.get("installation_id")),
        token=_optional(github_config.get("token")),
        timeout=float(timeout) if timeout else None,
    )


def build_container(
    *,
    github_config: dict,
    upload_config: dict,
    client_factory: Optional[BackendClientFactory] = None,
) -> Container:
    factory = client_factory or GitHubClientFactory(build_github_config(github_config))
    max_size_bytes = int(upload_config.get("max_size_bytes") or DEFAULT_MAX_SIZE_BYTES)

    submission_service = EvidenceSubmissionService(
        factory,
        default_branch=str(upload_config.get("default_branch") or DEFAULT_BRANCH),
        max_size_bytes=max_size_bytes,
        label=str(upload_config.get("label", DEFAULT_LABEL) or ""),
    )

    return Container(
        client_factory=factory,
        submission_service=submission_service,
        max_size_bytes=max_size_bytes,
    )
