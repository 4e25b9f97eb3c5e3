from typing import Final


SERVER_NAME: Final[str] = "rules-server"
SERVER_VERSION: Final[str] = "0.1.0"

RULES_PATH_ENV: Final[str] = "RULES_FILE_PATH"
GITHUB_TOKEN_ENV: Final[str] = "GITHUB_TOKEN"
FETCH_TIMEOUT_ENV: Final[str] = "RULES_FETCH_TIMEOUT"
LOG_LEVEL_ENV: Final[str] = "RULES_SERVER_LOG_LEVEL"

HTTPS_PREFIX: Final[str] = "https://"
GITHUB_DOMAIN: Final[str] = "github.com"
GITHUB_RAW_DOMAIN: Final[str] = "raw.githubusercontent.com"
GITHUB_BLOB_SEGMENT: Final[str] = "/blob/"

CATEGORY_MARKER: Final[str] = "#"
RULE_SEPARATOR: Final[str] = ":"

GET_RULES_TOOL: Final[str] = "get_rules"
GET_CATEGORIES_TOOL: Final[str] = "get_categories"
