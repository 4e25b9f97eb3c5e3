class RulesServerError(Exception):
    """Base user-facing application error."""


class MissingRulesPathError(RulesServerError):
    def __init__(self) -> None:
        super().__init__(
            "RULES_FILE_PATH environment variable is required. "
            "Set this to either a local file path or GitHub URL."
        )


class ContentSourceError(RulesServerError):
    def __init__(self, location: str, message: str) -> None:
        self.location = location
        self.message = message
        super().__init__(message)


class LocalReadError(ContentSourceError):
    def __init__(self, location: str, detail: str) -> None:
        self.detail = detail
        super().__init__(
            location=location,
            message=(
                f"Failed to read local file: {detail}. "
                "Make sure the file exists and is accessible."
            ),
        )


class GitHubNotFoundError(ContentSourceError):
    def __init__(self, location: str) -> None:
        super().__init__(
            location=location,
            message=(
                "GitHub file not found. "
                "If this is a private repository, please provide a GITHUB_TOKEN."
            ),
        )


class GitHubAuthError(ContentSourceError):
    def __init__(self, location: str, status: int) -> None:
        self.status = status
        super().__init__(
            location=location,
            message="GitHub authentication failed. Please check your GITHUB_TOKEN.",
        )


class GitHubFetchError(ContentSourceError):
    def __init__(self, location: str, detail: str = "Unknown error") -> None:
        self.detail = detail
        super().__init__(
            location=location, message=f"Failed to fetch from GitHub: {detail}"
        )


class ToolError(RulesServerError):
    def __init__(self, tool: str, message: str) -> None:
        self.tool = tool
        self.message = message
        super().__init__(message)


class UnknownToolError(ToolError):
    def __init__(self, tool: str) -> None:
        super().__init__(tool=tool, message=f"Unknown tool: {tool}")


class InvalidToolArgumentsError(ToolError):
    def __init__(self, tool: str, detail: str) -> None:
        self.detail = detail
        super().__init__(tool=tool, message=f"Invalid arguments for {tool} ({detail})")
