"""
Generate OAuth 1.0a Authorization headers (RFC 5849, HMAC-SHA1).

    from oauth1_header import sign

    header_value = sign(
        'some-consumer-key', 'some-consumer-secret',
        'some-token', 'some-token-secret',
        'GET', 'https://example.com', {'foo': 'bar'}
    )
"""
from .errors import (
    OAuth1Error,
    InvalidUrl,
    UnsupportedParameterType,
    EncodingFailure,
    SigningEnvironmentError,
    MalformedHeader,
    ConfigurationError,
)
from .models import Credentials, RequestDescriptor
from .auth import OAuth1Signer, OAuth1Verifier, SignedRequest, sign, parse_authorization_header

__all__ = [
    'OAuth1Error',
    'InvalidUrl',
    'UnsupportedParameterType',
    'EncodingFailure',
    'SigningEnvironmentError',
    'MalformedHeader',
    'ConfigurationError',
    'Credentials',
    'RequestDescriptor',
    'OAuth1Signer',
    'OAuth1Verifier',
    'SignedRequest',
    'sign',
    'parse_authorization_header',
]
