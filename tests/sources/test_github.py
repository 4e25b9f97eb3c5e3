"""Tests for GitHubSource and origin selection."""

from pathlib import Path
from urllib.error import HTTPError, URLError

import pytest

from rules_server.config import ServerConfig
from rules_server.errors import (
    GitHubAuthError,
    GitHubFetchError,
    GitHubNotFoundError,
)
from rules_server.sources import (
    GitHubSource,
    LocalFileSource,
    create_content_source,
    is_github_url,
    to_raw_url,
)

BLOB_URL = "https://github.com/acme/rules/blob/main/docs/RULES.md"
RAW_URL = "https://raw.githubusercontent.com/acme/rules/main/docs/RULES.md"


def _http_error(code: int, reason: str) -> HTTPError:
    return HTTPError(RAW_URL, code, reason, hdrs=None, fp=None)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("location", "expected"),
    [
        (BLOB_URL, True),
        (RAW_URL, True),
        ("http://github.com/acme/rules/blob/main/RULES.md", False),
        ("https://gitlab.com/acme/rules/RULES.md", False),
        ("./RULES.md", False),
        ("/etc/github.com/RULES.md", False),
    ],
)
def test_is_github_url(location: str, expected: bool) -> None:
    assert is_github_url(location) is expected


def test_blob_url_rewritten_to_raw() -> None:
    assert to_raw_url(BLOB_URL) == RAW_URL


def test_raw_url_left_untouched() -> None:
    assert to_raw_url(RAW_URL) == RAW_URL


def test_fetch_uses_raw_url_without_auth(fake_urlopen) -> None:
    requests = fake_urlopen("#A\nk: v\n")
    source = GitHubSource(BLOB_URL)

    assert source.fetch() == "#A\nk: v\n"
    assert len(requests) == 1
    assert requests[0].full_url == RAW_URL
    assert requests[0].get_method() == "GET"
    assert requests[0].get_header("Authorization") is None


def test_fetch_sends_token_header(fake_urlopen) -> None:
    requests = fake_urlopen()
    GitHubSource(RAW_URL, token="s3cret").fetch()
    assert requests[0].get_header("Authorization") == "token s3cret"


def test_not_found_suggests_token(fake_urlopen) -> None:
    fake_urlopen(error=_http_error(404, "Not Found"))
    with pytest.raises(GitHubNotFoundError, match="GITHUB_TOKEN"):
        GitHubSource(BLOB_URL).fetch()


@pytest.mark.parametrize("code", [401, 403])
def test_auth_failure(fake_urlopen, code: int) -> None:
    fake_urlopen(error=_http_error(code, "Forbidden"))
    with pytest.raises(GitHubAuthError, match="authentication failed") as excinfo:
        GitHubSource(BLOB_URL, token="bad").fetch()
    assert excinfo.value.status == code


def test_other_status_is_generic_failure(fake_urlopen) -> None:
    fake_urlopen(error=_http_error(500, "Internal Server Error"))
    with pytest.raises(GitHubFetchError) as excinfo:
        GitHubSource(BLOB_URL).fetch()
    assert str(excinfo.value).startswith("Failed to fetch from GitHub: ")
    assert "500" in str(excinfo.value)


def test_transport_failure(fake_urlopen) -> None:
    fake_urlopen(error=URLError("name resolution failed"))
    with pytest.raises(GitHubFetchError, match="name resolution failed"):
        GitHubSource(BLOB_URL).fetch()


def test_unknown_failure(fake_urlopen) -> None:
    fake_urlopen(error=ValueError("boom"))
    with pytest.raises(GitHubFetchError) as excinfo:
        GitHubSource(BLOB_URL).fetch()
    assert str(excinfo.value) == "Failed to fetch from GitHub: Unknown error"


def test_factory_selects_github_source() -> None:
    config = ServerConfig.create(BLOB_URL, github_token="tok", fetch_timeout=5)
    source = create_content_source(config)
    assert isinstance(source, GitHubSource)
    assert source.raw_url == RAW_URL
    assert source.origin == "github"


def test_factory_selects_local_source(rules_file: Path) -> None:
    source = create_content_source(ServerConfig.create(str(rules_file)))
    assert isinstance(source, LocalFileSource)
    assert source.origin == "local"


def test_fetch_drops_byte_order_mark(fake_urlopen) -> None:
    fake_urlopen("\ufeff# Style\nindent: 4\n")
    assert GitHubSource(RAW_URL).fetch() == "# Style\nindent: 4\n"
