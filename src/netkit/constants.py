from enum import StrEnum

__all__ = [
    "API_KEY_HEADER",
    "DEFAULT_BASE_URL",
    "DEFAULT_RETRY_DELAY",
    "DEFAULT_TIMEOUT",
    "KEY_PATH_SEPARATOR",
    "EnvironmentName",
]

DEFAULT_BASE_URL = "https://hws.dev"
DEFAULT_TIMEOUT = 60.0
DEFAULT_RETRY_DELAY = 1.0

API_KEY_HEADER = "APIKey"
KEY_PATH_SEPARATOR = "."


class EnvironmentName(StrEnum):
    PRODUCTION = "production"
    TESTING = "testing"
