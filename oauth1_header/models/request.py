"""
Request descriptor model: the method and URL a signature covers.
"""
from dataclasses import dataclass
from typing import List, Tuple
from urllib.parse import parse_qsl, urlsplit

from oauth1_header.errors import InvalidUrl

DEFAULT_PORTS = {
    'http': 80,
    'https': 443,
}


@dataclass(frozen=True)
class RequestDescriptor:
    """
    The part of an HTTP request that enters the signature base string.

    The URL is parsed once on construction; an unparsable URL or one without
    a scheme and host raises InvalidUrl.

    Attributes:
        method: HTTP verb as given by the caller (any case, any verb)
        url: Absolute request URL, optionally with a query string
    """
    method: str
    url: str

    def __post_init__(self) -> None:
        self._validate_url()

    def _validate_url(self) -> None:
        """Check the URL is absolute and its port, if any, is valid."""
        if not isinstance(self.url, str):
            raise InvalidUrl(repr(self.url), "URL must be a string")

        try:
            parts = urlsplit(self.url)
            # Accessing .port validates it
            parts.port
        except ValueError as e:
            raise InvalidUrl(self.url, str(e)) from e

        if not parts.scheme or not parts.hostname:
            raise InvalidUrl(self.url)

        self._parse_query(parts.query)

    def _parse_query(self, query: str) -> List[Tuple[str, str]]:
        """Decode the query string, rejecting escapes that are not UTF-8."""
        if not query:
            return []
        try:
            return parse_qsl(query, keep_blank_values=True, errors='strict')
        except UnicodeDecodeError as e:
            raise InvalidUrl(self.url, "query string is not valid UTF-8") from e

    @property
    def normalized_method(self) -> str:
        """HTTP method upper-cased for the base string."""
        return self.method.upper()

    @property
    def base_url(self) -> str:
        """
        Base string URI: scheme, host, non-default port and path.

        Scheme and host are lower-cased; query, fragment and userinfo are
        dropped; an empty path becomes "/".
        """
        parts = urlsplit(self.url)
        scheme = parts.scheme.lower()
        host = parts.hostname
        if ':' in host:
            host = f"[{host}]"

        port = parts.port
        if port is not None and DEFAULT_PORTS.get(scheme) != port:
            host = f"{host}:{port}"

        path = parts.path or '/'
        return f"{scheme}://{host}{path}"

    @property
    def query_params(self) -> List[Tuple[str, str]]:
        """
        Query string parameters as decoded (name, value) pairs.

        Parsed with form-urlencoded rules: '+' decodes to a space and blank
        values are kept. Repeated names produce repeated pairs.
        """
        return self._parse_query(urlsplit(self.url).query)
