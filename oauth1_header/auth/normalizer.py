"""
Request parameter collection and normalization (RFC 5849 section 3.4.1.3).
"""
from typing import Dict, Iterable, List, Optional, Tuple

from oauth1_header.models.param_value import ExtraParams, iter_param_pairs
from oauth1_header.models.request import RequestDescriptor
from .encoding import percent_encode

SIGNATURE_PARAM = 'oauth_signature'


def collect_parameters(
    request: RequestDescriptor,
    oauth_params: Dict[str, str],
    extra_params: Optional[ExtraParams] = None
) -> List[Tuple[str, str]]:
    """
    Gather every parameter that is covered by the signature.

    Combines the extra parameters, the URL query parameters and the OAuth
    protocol parameters. Any oauth_signature entry is left out.

    Args:
        request: Method and URL being signed
        oauth_params: OAuth protocol parameters (without the signature)
        extra_params: Caller-supplied body or query parameters

    Returns:
        List of (name, value) pairs, not yet encoded or sorted

    Raises:
        UnsupportedParameterType: If an extra parameter is not a str, int or bool
    """
    params = iter_param_pairs(extra_params)
    params.extend(request.query_params)
    params.extend(oauth_params.items())
    return [(name, value) for name, value in params if name != SIGNATURE_PARAM]


def normalize_parameters(params: Iterable[Tuple[str, str]]) -> str:
    """
    Build the normalized parameter string.

    Each name and value is percent-encoded once, the pairs are sorted by
    encoded name and then encoded value, and joined as name=value with '&'.
    Encoded strings are pure ASCII, so str ordering equals byte ordering.

    Args:
        params: (name, value) pairs

    Returns:
        Normalized parameter string

    Raises:
        EncodingFailure: If a name or value cannot be UTF-8 encoded
    """
    encoded = sorted(
        (percent_encode(name), percent_encode(value))
        for name, value in params
    )
    return '&'.join(f"{name}={value}" for name, value in encoded)
