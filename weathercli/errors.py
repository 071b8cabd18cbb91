"""Error types raised along the fetch-and-render pipeline."""


class WeatherCliError(Exception):
    """Base class for every failure that ends an invocation."""


class ConfigError(WeatherCliError):
    """Raised when the YAML config cannot be read or fails validation."""


class CredentialMissingError(WeatherCliError):
    """Raised when neither the environment nor the fallback yields an API key."""

    def __init__(self, env_var: str):
        super().__init__(f"{env_var} is not set and no fallback key is configured")
        self.env_var = env_var


class EmptyInputError(WeatherCliError):
    """Raised when no usable location string was supplied."""


class NetworkError(WeatherCliError):
    """Raised when the request never produced an HTTP response."""


class ApiError(WeatherCliError):
    """Raised when WeatherAPI answers with an error status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


class MalformedResponseError(WeatherCliError):
    """Raised when an essential field is missing or has the wrong type."""
