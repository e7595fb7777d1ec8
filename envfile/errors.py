"""Configuration errors raised while loading secret files."""

ENV_FILE_NOT_SET = "An environment variable with name '%s' must be set to a non-blank value"
ENV_FILE_EMPTY = "The file with path '%s' must contain a non-blank line"


class ConfigurationError(Exception):
    """Expected configuration is absent or invalid."""


class VariableNotSetError(ConfigurationError):
    """Raised when a required env var is unset or blank."""

    def __init__(self, env_name: str) -> None:
        self.env_name = env_name
        super().__init__(ENV_FILE_NOT_SET % env_name)


class FileEmptyError(ConfigurationError):
    """Raised when a required secret file has no non-blank content."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(ENV_FILE_EMPTY % path)
