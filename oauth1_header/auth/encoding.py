"""
RFC 3986 percent-encoding as required by OAuth 1.0a (RFC 5849 section 3.6).
"""
from urllib.parse import quote, unquote

from oauth1_header.errors import EncodingFailure


def percent_encode(value: str) -> str:
    """
    Percent-encode a string for use in a signature base string or header.

    Only A-Z, a-z, 0-9, '-', '.', '_' and '~' are left unencoded. Hex
    digits are uppercase.

    Args:
        value: Text to encode

    Returns:
        Encoded ASCII string

    Raises:
        EncodingFailure: If the text cannot be encoded as UTF-8
    """
    try:
        return quote(value.encode('utf-8'), safe='~')
    except UnicodeEncodeError as e:
        raise EncodingFailure(f"Cannot UTF-8 encode value: {e.reason}") from e


def percent_decode(value: str) -> str:
    """Reverse percent_encode."""
    return unquote(value, errors='strict')
