import logging
from pathlib import Path

from rules_server.errors import LocalReadError
from rules_server.sources.base import IContentSource

logger = logging.getLogger(__name__)


class LocalFileSource(IContentSource):
    def __init__(self, path: str | Path) -> None:
        self._location = str(path)
        self._path = Path(path).expanduser()

    @property
    def origin(self) -> str:
        return "local"

    @property
    def location(self) -> str:
        return self._location

    @property
    def path(self) -> Path:
        return self._path

    def fetch(self) -> str:
        logger.debug("Reading rules from local file %s", self._path)
        try:
            return self._path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Local rules read failed for %s: %s", self._path, exc)
            raise LocalReadError(self._location, str(exc)) from exc
