from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

import jwt
import requests

from ..core.exceptions import BackendError, ConfigurationError
from .github_backend import GitHubBackend

logger = logging.getLogger(__name__)

GITHUB_API_VERSION = "2022-11-28"
# GitHub rejects app JWTs living longer than 10 minutes.
APP_JWT_TTL_SECONDS = 9 * 60
APP_JWT_CLOCK_SKEW_SECONDS = 60


@dataclass(frozen=True)
class GitHubConfig:
    owner: str
    repo: str
    api_url: str = "https://api.github.com"
    app_id: Optional[str] = None
    private_key: Optional[str] = None
    installation_id: Optional[str] = None
    token: Optional[str] = None
    timeout: Optional[float] = None

    @property
    def uses_app_credentials(self) -> bool:
        return bool(self.app_id and self.private_key and self.installation_id)


class GitHubClientFactory:
    """Stateless factory: every call to ``create`` yields a freshly authenticated client.

    Note: Nothing credential-bearing is kept between calls. With GitHub App
    credentials a new installation token is minted for each submission.
    """

    def __init__(self, config: GitHubConfig, *, session_factory: Callable[[], requests.Session] = requests.Session):
        self._config = config
        self._session_factory = session_factory

    def create(self) -> GitHubBackend:
        cfg = self._config
        if not cfg.owner or not cfg.repo:
            raise ConfigurationError("REPO_OWNER and REPO_NAME must be configured")

        token = cfg.token or self._installation_token()
        session = self._new_session(token)
        return GitHubBackend(session, owner=cfg.owner, repo=cfg.repo, api_url=cfg.api_url, timeout=cfg.timeout)

    def _new_session(self, bearer: str) -> requests.Session:
        session = self._session_factory()
        session.headers.update(
            {
                "Authorization": f"Bearer {bearer}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
            }
        )
        return session

    def _app_jwt(self) -> str:
        now = int(time.time())
        claims = {
            "iat": now - APP_JWT_CLOCK_SKEW_SECONDS,
            "exp": now + APP_JWT_TTL_SECONDS,
            "iss": str(self._config.app_id),
        }
        try:
            return jwt.encode(claims, self._config.private_key, algorithm="RS256")
        except (jwt.PyJWTError, ValueError, TypeError) as e:
            raise ConfigurationError(f"Invalid APP_PRIVATE_KEY: {e}") from e

    def _installation_token(self) -> str:
        cfg = self._config
        if not cfg.uses_app_credentials:
            raise ConfigurationError("Set GITHUB_TOKEN or APP_ID, APP_PRIVATE_KEY and INSTALLATION_ID")

        session = self._new_session(self._app_jwt())
        url = f"{cfg.api_url.rstrip('/')}/app/installations/{cfg.installation_id}/access_tokens"
        try:
            resp = session.post(url, timeout=cfg.timeout)
            resp.raise_for_status()
            token = resp.json()["token"]
        except (requests.RequestException, KeyError, ValueError) as e:
            raise BackendError(f"Could not obtain installation token: {e}") from e
        finally:
            session.close()

        logger.debug("Minted installation token for installation %s", cfg.installation_id)
        return token
