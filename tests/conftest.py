import sys
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


SAMPLE_RULES = (
    "Preamble without a category: ignored\n"
    "\n"
    "# Style\n"
    "indent: 4 spaces\n"
    "quotes: double\n"
    "## Subsection is not a header\n"
    "# Testing\n"
    "runner: pytest\n"
    "docs: https://docs.pytest.org\n"
    "not a rule line\n"
    "# Style\n"
    "line-length: 88\n"
)


class FakeResponse:
    def __init__(self, payload: str) -> None:
        self._payload = payload

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return None

    def read(self) -> bytes:
        return self._payload.encode("utf-8")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    for name in ("RULES_FILE_PATH", "GITHUB_TOKEN", "RULES_FETCH_TIMEOUT", "RULES_SERVER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    path = tmp_path / "RULES.md"
    path.write_text(SAMPLE_RULES, encoding="utf-8")
    return path


@pytest.fixture
def fake_urlopen(monkeypatch):
    """Patch urlopen in the GitHub source; returns the list of captured requests."""

    def _install(payload: str = SAMPLE_RULES, error: Exception | None = None) -> list[Any]:
        requests: list[Any] = []

        def _urlopen(request, *args, **kwargs):
            requests.append(request)
            if error is not None:
                raise error
            return FakeResponse(payload)

        monkeypatch.setattr("rules_server.sources.github.urlopen", _urlopen)
        return requests

    return _install


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
