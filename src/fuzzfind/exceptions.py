"""Exception hierarchy for fuzzfind."""


class FuzzfindError(Exception):
    """Base exception for all fuzzfind errors."""

    exit_code: int = 1
    user_message: str = "An error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message or self.user_message)
        if user_message:
            self.user_message = user_message


# Config Errors
class ConfigError(FuzzfindError):
    """Configuration errors."""

    exit_code = 20
    user_message = "Configuration error"


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    exit_code = 21
    user_message = "Configuration file not found"


class ConfigValidationError(ConfigError):
    """Configuration validation failed."""

    exit_code = 22
    user_message = "Invalid configuration"


# Search Errors
class SearchError(FuzzfindError):
    """Search-related errors."""

    exit_code = 30
    user_message = "Search error"


class InvalidPathError(SearchError):
    """Base directory is missing or not a directory."""

    exit_code = 31
    user_message = "Base directory does not exist or is not a directory"


class WalkError(SearchError):
    """A walker task failed with an unexpected error."""

    exit_code = 32
    user_message = "Error while scanning directories"


# Interaction Errors
class PromptError(FuzzfindError):
    """Interactive prompt could not read input."""

    exit_code = 40
    user_message = "Input stream closed"
