"""
OAuth 1.0a signing and verification components.
"""
from .encoding import percent_encode, percent_decode
from .sources import NonceSource, Clock, SecureNonceSource, SystemClock, FixedNonceSource, FixedClock
from .normalizer import collect_parameters, normalize_parameters
from .signer import (
    OAuth1Signer,
    SignedRequest,
    sign,
    build_base_string,
    build_signing_key,
    compute_signature,
    format_authorization_header,
)
from .header_parser import parse_authorization_header
from .verifier import OAuth1Verifier, SecretProvider, DictSecretProvider
from .nonce_storage import RedisNonceStorage

__all__ = [
    'percent_encode',
    'percent_decode',
    'NonceSource',
    'Clock',
    'SecureNonceSource',
    'SystemClock',
    'FixedNonceSource',
    'FixedClock',
    'collect_parameters',
    'normalize_parameters',
    'OAuth1Signer',
    'SignedRequest',
    'sign',
    'build_base_string',
    'build_signing_key',
    'compute_signature',
    'format_authorization_header',
    'parse_authorization_header',
    'OAuth1Verifier',
    'SecretProvider',
    'DictSecretProvider',
    'RedisNonceStorage',
]
