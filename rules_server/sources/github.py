"""Fetch rules from GitHub, accepting both browsable and raw file URLs."""

import logging
from typing import Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from rules_server.constants import (
    GITHUB_BLOB_SEGMENT,
    GITHUB_DOMAIN,
    GITHUB_RAW_DOMAIN,
    HTTPS_PREFIX,
    SERVER_NAME,
)
from rules_server.errors import (
    GitHubAuthError,
    GitHubFetchError,
    GitHubNotFoundError,
)
from rules_server.sources.base import IContentSource

logger = logging.getLogger(__name__)


def is_github_url(location: str) -> bool:
    return location.startswith(HTTPS_PREFIX) and (
        GITHUB_DOMAIN in location or GITHUB_RAW_DOMAIN in location
    )


def to_raw_url(url: str) -> str:
    """Map a github.com blob URL onto raw.githubusercontent.com.

    ``https://github.com/org/repo/blob/main/RULES.md`` becomes
    ``https://raw.githubusercontent.com/org/repo/main/RULES.md``. Raw URLs are
    returned as-is.
    """
    if GITHUB_DOMAIN not in url:
        return url
    return url.replace(GITHUB_DOMAIN, GITHUB_RAW_DOMAIN, 1).replace(
        GITHUB_BLOB_SEGMENT, "/", 1
    )


class GitHubSource(IContentSource):
    def __init__(
        self,
        url: str,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._url = url
        self._token = token
        self._timeout = timeout

    @property
    def origin(self) -> str:
        return "github"

    @property
    def location(self) -> str:
        return self._url

    @property
    def raw_url(self) -> str:
        return to_raw_url(self._url)

    def _headers(self) -> dict[str, str]:
        headers = {"User-Agent": SERVER_NAME}
        if self._token:
            headers["Authorization"] = f"token {self._token}"
        return headers

    def fetch(self) -> str:
        raw_url = self.raw_url
        logger.debug(
            "Fetching rules from %s (authenticated=%s)", raw_url, bool(self._token)
        )
        request = Request(raw_url, headers=self._headers())
        try:
            with urlopen(request, timeout=self._timeout) as response:
                payload = response.read()
        except HTTPError as exc:
            logger.warning("GitHub responded %s for %s", exc.code, raw_url)
            if exc.code == 404:
                raise GitHubNotFoundError(self._url) from exc
            if exc.code in (401, 403):
                raise GitHubAuthError(self._url, exc.code) from exc
            raise GitHubFetchError(self._url, str(exc)) from exc
        except URLError as exc:
            logger.warning("GitHub fetch failed for %s: %s", raw_url, exc.reason)
            raise GitHubFetchError(self._url, str(exc.reason)) from exc
        except OSError as exc:
            logger.warning("GitHub fetch failed for %s: %s", raw_url, exc)
            raise GitHubFetchError(self._url, str(exc)) from exc
        except Exception as exc:
            logger.warning("GitHub fetch failed for %s: %r", raw_url, exc)
            raise GitHubFetchError(self._url) from exc

        return payload.decode("utf-8-sig", errors="replace")
