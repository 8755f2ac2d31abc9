"""
Exceptions raised while signing or verifying OAuth 1.0a requests.
"""
from typing import Optional


class OAuth1Error(Exception):
    """Base class for all oauth1_header errors."""


class InvalidUrl(OAuth1Error):
    """The request URL is not an absolute URL with a scheme and host."""

    def __init__(self, url: str, reason: str = "URL must include a scheme and host"):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}")


class UnsupportedParameterType(OAuth1Error):
    """A request parameter name or value is not a str, int or bool."""

    def __init__(self, name, value, message: Optional[str] = None):
        self.name = name
        self.value = value
        if message is None:
            message = (
                f"Unsupported type {type(value).__name__} for parameter {name!r}; "
                f"expected str, int or bool"
            )
        super().__init__(message)


class EncodingFailure(OAuth1Error):
    """Text could not be percent-encoded as UTF-8."""


class SigningEnvironmentError(OAuth1Error):
    """The clock or the random source failed or returned an unusable value."""


class MalformedHeader(OAuth1Error):
    """An Authorization header could not be parsed as OAuth parameters."""


class ConfigurationError(OAuth1Error):
    """Required configuration is missing or invalid."""
