"""
OAuth 1.0a HMAC-SHA1 request signing (RFC 5849).
"""
import base64
import hashlib
import hmac
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from oauth1_header.models.credentials import Credentials
from oauth1_header.models.param_value import ExtraParams
from oauth1_header.models.request import RequestDescriptor
from oauth1_header.monitoring import track_signing
from .encoding import percent_encode
from .normalizer import collect_parameters, normalize_parameters
from .sources import Clock, NonceSource, SecureNonceSource, SystemClock, read_nonce, read_timestamp

logger = logging.getLogger(__name__)

SIGNATURE_METHOD = 'HMAC-SHA1'
OAUTH_VERSION = '1.0'


def build_base_string(method: str, base_url: str, normalized_params: str) -> str:
    """
    Build the signature base string.

    Format: METHOD&enc(base_url)&enc(normalized_params)
    """
    return '&'.join([
        method.upper(),
        percent_encode(base_url),
        percent_encode(normalized_params)
    ])


def build_signing_key(consumer_secret: str, token_secret: str) -> str:
    """Build the HMAC key: enc(consumer_secret)&enc(token_secret)."""
    return f"{percent_encode(consumer_secret)}&{percent_encode(token_secret)}"


def compute_signature(base_string: str, signing_key: str) -> str:
    """
    Compute the base64 HMAC-SHA1 of the base string.

    Both inputs are percent-encoded ASCII at this point.

    Returns:
        Base64 signature (not yet percent-encoded)
    """
    digest = hmac.new(
        signing_key.encode('ascii'),
        base_string.encode('ascii'),
        hashlib.sha1
    ).digest()
    return base64.b64encode(digest).decode('ascii')


def format_authorization_header(oauth_params: Dict[str, str]) -> str:
    """
    Format protocol parameters as an Authorization header value.

    Parameters are emitted in alphabetical order, each value percent-encoded
    and double-quoted.

    Returns:
        Header value such as 'OAuth oauth_consumer_key="...", ...'
    """
    fields = ', '.join(
        f'{percent_encode(name)}="{percent_encode(value)}"'
        for name, value in sorted(oauth_params.items())
    )
    return f"OAuth {fields}"


@dataclass(frozen=True)
class SignedRequest:
    """
    Intermediate and final values of one signing call.

    Attributes:
        oauth_params: Protocol parameters including oauth_signature
        normalized_params: Normalized parameter string
        base_string: Signature base string
        signature: Base64 HMAC-SHA1 signature (not percent-encoded)
    """
    oauth_params: Dict[str, str]
    normalized_params: str
    base_string: str
    signature: str

    @property
    def authorization_header(self) -> str:
        """The value for the HTTP Authorization header."""
        return format_authorization_header(self.oauth_params)


class OAuth1Signer:
    """
    Signs requests with OAuth 1.0a HMAC-SHA1.

    The signer holds only credentials and its nonce/clock collaborators.
    Each call builds its own parameters, so one instance may be shared
    across threads.
    """

    def __init__(
        self,
        credentials: Credentials,
        nonce_source: Optional[NonceSource] = None,
        clock: Optional[Clock] = None
    ):
        """
        Initialize the signer.

        Args:
            credentials: Consumer and token credentials
            nonce_source: Nonce generator (default: SecureNonceSource)
            clock: Timestamp source (default: SystemClock)
        """
        self.credentials = credentials
        self.nonce_source = nonce_source if nonce_source is not None else SecureNonceSource()
        self.clock = clock if clock is not None else SystemClock()

    def prepare(
        self,
        method: str,
        url: str,
        params: Optional[ExtraParams] = None
    ) -> SignedRequest:
        """
        Compute the signature and everything that goes into it.

        Args:
            method: HTTP method (any case)
            url: Absolute request URL, may include a query string
            params: Extra parameters sent in the body or query

        Returns:
            SignedRequest with the protocol parameters and signature

        Raises:
            InvalidUrl: If the URL has no scheme or host
            UnsupportedParameterType: If a parameter is not a str, int or bool
            EncodingFailure: If text cannot be UTF-8 encoded
            SigningEnvironmentError: If the clock or random source fails
        """
        request = RequestDescriptor(method=method, url=url)

        oauth_params = {
            'oauth_consumer_key': self.credentials.consumer_key,
            'oauth_nonce': read_nonce(self.nonce_source),
            'oauth_signature_method': SIGNATURE_METHOD,
            'oauth_timestamp': str(read_timestamp(self.clock)),
            'oauth_token': self.credentials.token,
            'oauth_version': OAUTH_VERSION,
        }

        normalized = normalize_parameters(collect_parameters(request, oauth_params, params))
        base_string = build_base_string(request.normalized_method, request.base_url, normalized)
        signing_key = build_signing_key(
            self.credentials.consumer_secret,
            self.credentials.token_secret
        )
        signature = compute_signature(base_string, signing_key)

        logger.debug("Signed OAuth 1.0a request", extra={
            'method': request.normalized_method,
            'base_url': request.base_url,
            'param_count': normalized.count('&') + 1
        })

        return SignedRequest(
            oauth_params={**oauth_params, 'oauth_signature': signature},
            normalized_params=normalized,
            base_string=base_string,
            signature=signature
        )

    @track_signing
    def sign_request(
        self,
        method: str,
        url: str,
        params: Optional[ExtraParams] = None
    ) -> str:
        """
        Generate the Authorization header value for a request.

        Args:
            method: HTTP method (any case)
            url: Absolute request URL, may include a query string
            params: Extra parameters sent in the body or query; signed but
                    not included in the header

        Returns:
            Authorization header value, without the "Authorization:" prefix
        """
        return self.prepare(method, url, params).authorization_header

    def sign_get(self, url: str, params: Optional[ExtraParams] = None) -> str:
        """Sign a GET request."""
        return self.sign_request('GET', url, params)

    def sign_post(self, url: str, params: Optional[ExtraParams] = None) -> str:
        """Sign a POST request with form parameters."""
        return self.sign_request('POST', url, params)

    def sign_put(self, url: str, params: Optional[ExtraParams] = None) -> str:
        """Sign a PUT request with form parameters."""
        return self.sign_request('PUT', url, params)

    def sign_delete(self, url: str, params: Optional[ExtraParams] = None) -> str:
        """Sign a DELETE request."""
        return self.sign_request('DELETE', url, params)


def sign(
    consumer_key: str,
    consumer_secret: str,
    token: str,
    token_secret: str,
    method: str,
    url: str,
    extra_params: Optional[ExtraParams] = None,
    *,
    nonce_source: Optional[NonceSource] = None,
    clock: Optional[Clock] = None
) -> str:
    """
    Compute an OAuth 1.0a Authorization header value.

    Example:
        header = sign('key', 'secret', 'token', 'token-secret',
                      'GET', 'https://example.com', {'foo': 'bar'})
        # 'OAuth oauth_consumer_key="key", oauth_nonce="...", ...'

    Args:
        consumer_key: Consumer key (may be empty)
        consumer_secret: Consumer secret (may be empty)
        token: Token (may be empty)
        token_secret: Token secret (may be empty)
        method: HTTP method (any case)
        url: Absolute request URL, may include a query string
        extra_params: Mapping or (name, value) pairs of str, int or bool values
        nonce_source: Override the nonce generator (tests)
        clock: Override the timestamp source (tests)

    Returns:
        Authorization header value, without the "Authorization:" prefix
    """
    credentials = Credentials(
        consumer_key=consumer_key,
        consumer_secret=consumer_secret,
        token=token,
        token_secret=token_secret
    )
    signer = OAuth1Signer(credentials, nonce_source=nonce_source, clock=clock)
    return signer.sign_request(method, url, extra_params)
