"""
Parsing of OAuth Authorization header values.
"""
import re
from typing import Dict

from oauth1_header.errors import MalformedHeader
from .encoding import percent_decode

AUTH_SCHEME = 'oauth'

# name="value", then a comma or the end; quoted values may contain commas
_PARAM_PATTERN = re.compile(r'\s*([^=\s,]+)\s*=\s*"([^"]*)"\s*(?:,|$)')


def parse_authorization_header(auth_header: str) -> Dict[str, str]:
    """
    Parse an OAuth Authorization header value into its parameters.

    The "OAuth" scheme name is matched case-insensitively. Names and values
    are percent-decoded. The realm parameter is dropped.

    Args:
        auth_header: Header value, e.g. 'OAuth oauth_consumer_key="key", ...'

    Returns:
        Dictionary of decoded parameter names to values

    Raises:
        MalformedHeader: If the header is not a well-formed OAuth header or
                         repeats a parameter
    """
    if not auth_header:
        raise MalformedHeader("Empty Authorization header")

    scheme, _, rest = auth_header.strip().partition(' ')
    if scheme.lower() != AUTH_SCHEME:
        raise MalformedHeader("Not an OAuth Authorization header")

    params = {}
    pos = 0
    while rest[pos:].strip():
        match = _PARAM_PATTERN.match(rest, pos)
        if not match:
            raise MalformedHeader(f"Malformed parameter: {rest[pos:].strip()!r}")
        pos = match.end()

        try:
            name = percent_decode(match.group(1))
            value = percent_decode(match.group(2))
        except UnicodeDecodeError as e:
            raise MalformedHeader(f"Parameter is not valid UTF-8: {match.group(0).strip()!r}") from e

        if name == 'realm':
            continue
        if name in params:
            raise MalformedHeader(f"Duplicate parameter: {name}")
        params[name] = value

    return params
