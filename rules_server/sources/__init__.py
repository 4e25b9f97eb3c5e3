from rules_server.config import ServerConfig
from rules_server.sources.base import IContentSource
from rules_server.sources.github import GitHubSource, is_github_url, to_raw_url
from rules_server.sources.local import LocalFileSource


def create_content_source(config: ServerConfig) -> IContentSource:
    if is_github_url(config.location):
        return GitHubSource(
            config.location, token=config.github_token, timeout=config.fetch_timeout
        )
    return LocalFileSource(config.location)


__all__ = [
    "IContentSource",
    "GitHubSource",
    "LocalFileSource",
    "create_content_source",
    "is_github_url",
    "to_raw_url",
]
