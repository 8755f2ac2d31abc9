"""
Server-side verification of OAuth 1.0a HMAC-SHA1 signatures.
"""
import hmac
import logging
from typing import Dict, Optional, Tuple

from oauth1_header.errors import OAuth1Error
from oauth1_header.models.param_value import ExtraParams
from oauth1_header.models.request import RequestDescriptor
from oauth1_header.monitoring import record_verification
from .header_parser import parse_authorization_header
from .normalizer import collect_parameters, normalize_parameters
from .signer import SIGNATURE_METHOD, OAUTH_VERSION, build_base_string, build_signing_key, compute_signature
from .sources import Clock, SystemClock, read_timestamp

logger = logging.getLogger(__name__)

DEFAULT_TIMESTAMP_TOLERANCE = 300

REQUIRED_PARAMS = (
    'oauth_consumer_key',
    'oauth_nonce',
    'oauth_signature',
    'oauth_signature_method',
    'oauth_timestamp',
)


class SecretProvider:
    """
    Looks up the secrets needed to check a signature.

    Subclasses return (consumer_secret, token_secret) for a consumer key and
    token, or None if the pair is unknown.
    """

    def get_secrets(self, consumer_key: str, token: str) -> Optional[Tuple[str, str]]:
        raise NotImplementedError


class DictSecretProvider(SecretProvider):
    """
    Secret provider backed by in-memory dictionaries.

    Args:
        consumer_secrets: consumer_key -> consumer_secret
        token_secrets: token -> token_secret. The empty token always maps to
                       the empty secret.
    """

    def __init__(self, consumer_secrets: Dict[str, str], token_secrets: Optional[Dict[str, str]] = None):
        self.consumer_secrets = consumer_secrets
        self.token_secrets = token_secrets or {}

    def get_secrets(self, consumer_key: str, token: str) -> Optional[Tuple[str, str]]:
        consumer_secret = self.consumer_secrets.get(consumer_key)
        if consumer_secret is None:
            return None
        if not token:
            return consumer_secret, ''
        token_secret = self.token_secrets.get(token)
        if token_secret is None:
            return None
        return consumer_secret, token_secret


class OAuth1Verifier:
    """
    Verifies OAuth 1.0a Authorization headers.

    Validates:
    1. Header format and required protocol parameters
    2. Signature method is HMAC-SHA1 and version, if given, is 1.0
    3. Timestamp within the tolerance window
    4. Signature matches the one recomputed from the request
    5. Nonce not previously seen (replay protection)
    """

    def __init__(
        self,
        secret_provider: SecretProvider,
        timestamp_tolerance: int = DEFAULT_TIMESTAMP_TOLERANCE,
        nonce_storage=None,
        clock: Optional[Clock] = None
    ):
        """
        Initialize the verifier.

        Args:
            secret_provider: Source of consumer and token secrets
            timestamp_tolerance: How many seconds old/future timestamps are accepted (default: 5 minutes)
            nonce_storage: Optional store of seen nonces: a dict, pruned of entries
                          older than the tolerance window, or an object with
                          record_if_new. For multiple verifier instances, use
                          RedisNonceStorage.
            clock: Timestamp source (default: SystemClock)
        """
        self.secret_provider = secret_provider
        self.timestamp_tolerance = timestamp_tolerance
        self.nonce_storage = nonce_storage if nonce_storage is not None else {}
        self.clock = clock if clock is not None else SystemClock()

    def verify(
        self,
        auth_header: str,
        method: str,
        url: str,
        params: Optional[ExtraParams] = None
    ) -> Optional[str]:
        """
        Verify a signed request.

        Args:
            auth_header: Authorization header value ('OAuth oauth_consumer_key=...')
            method: HTTP method of the request
            url: Full request URL including its query string
            params: Form body parameters of the request, if any

        Returns:
            The consumer key if the request is authentic, None otherwise
        """
        consumer_key = self._verify(auth_header, method, url, params)
        record_verification(consumer_key is not None)
        return consumer_key

    def _verify(self, auth_header, method, url, params) -> Optional[str]:
        try:
            oauth_params = parse_authorization_header(auth_header)
        except OAuth1Error as e:
            return self._reject(str(e))

        missing = [name for name in REQUIRED_PARAMS if name not in oauth_params]
        if missing:
            return self._reject("Missing OAuth parameters", missing=missing)

        consumer_key = oauth_params['oauth_consumer_key']
        token = oauth_params.get('oauth_token', '')

        if oauth_params['oauth_signature_method'] != SIGNATURE_METHOD:
            return self._reject("Unsupported signature method", consumer_key=consumer_key)
        if oauth_params.get('oauth_version', OAUTH_VERSION) != OAUTH_VERSION:
            return self._reject("Unsupported OAuth version", consumer_key=consumer_key)

        timestamp_value = oauth_params['oauth_timestamp']
        if not (timestamp_value.isascii() and timestamp_value.isdigit()):
            return self._reject("Malformed timestamp", consumer_key=consumer_key)
        timestamp = int(timestamp_value)
        now = read_timestamp(self.clock)
        if abs(now - timestamp) > self.timestamp_tolerance:
            return self._reject("Timestamp outside tolerance", consumer_key=consumer_key)

        secret_pair = self.secret_provider.get_secrets(consumer_key, token)
        if secret_pair is None:
            return self._reject("Unknown consumer or token", consumer_key=consumer_key)
        consumer_secret, token_secret = secret_pair

        try:
            request = RequestDescriptor(method=method, url=url)
            normalized = normalize_parameters(collect_parameters(request, oauth_params, params))
        except OAuth1Error as e:
            return self._reject(str(e), consumer_key=consumer_key)

        base_string = build_base_string(request.normalized_method, request.base_url, normalized)
        expected = compute_signature(base_string, build_signing_key(consumer_secret, token_secret))
        if not hmac.compare_digest(expected.encode('ascii'), oauth_params['oauth_signature'].encode('utf-8')):
            return self._reject("Signature mismatch", consumer_key=consumer_key)

        if not self._record_nonce(f"{consumer_key}:{oauth_params['oauth_nonce']}", timestamp, now):
            return self._reject("Nonce already used", consumer_key=consumer_key)

        return consumer_key

    def _record_nonce(self, nonce_key: str, timestamp: int, now: int) -> bool:
        """Record a nonce, returning False if it was seen before."""
        record_if_new = getattr(self.nonce_storage, 'record_if_new', None)
        if record_if_new is not None:
            return record_if_new(nonce_key, timestamp)

        if isinstance(self.nonce_storage, dict):
            self._prune_nonces(now)
        if nonce_key in self.nonce_storage:
            return False
        self.nonce_storage[nonce_key] = timestamp
        return True

    def _prune_nonces(self, now: int) -> None:
        """Drop in-memory nonces whose timestamps can no longer pass the window check."""
        cutoff = now - self.timestamp_tolerance
        expired = [key for key, ts in self.nonce_storage.items() if ts < cutoff]
        for key in expired:
            del self.nonce_storage[key]

    def _reject(self, reason: str, **fields) -> None:
        logger.info("OAuth 1.0a verification failed", extra={'reason': reason, **fields})
        return None
