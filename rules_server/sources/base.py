from abc import ABC, abstractmethod


class IContentSource(ABC):
    @property
    @abstractmethod
    def origin(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def location(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def fetch(self) -> str:
        """Return the raw rules text. Raises ContentSourceError on failure."""
