"""
Redis-based nonce storage for OAuth 1.0a replay protection.

Records seen nonces in Redis so several verifier instances share one
replay window.
"""
import logging

logger = logging.getLogger(__name__)

# Should match or exceed the verifier's timestamp tolerance; a nonce only
# needs to be remembered while its timestamp could still be accepted
DEFAULT_NONCE_TTL = 600


class RedisNonceStorage:
    """
    Redis-backed nonce storage.

    OAuth1Verifier calls record_if_new for every authentic request. Each
    nonce is written with SET NX and a TTL, so the check and the insert are
    one atomic step and keys expire on their own.
    """

    def __init__(self, redis_client, ttl: int = DEFAULT_NONCE_TTL, key_prefix: str = "oauth1_nonce"):
        """
        Initialize Redis nonce storage.

        Args:
            redis_client: Redis client instance
            ttl: Time-to-live for nonces in seconds (default: 600)
            key_prefix: Prefix for Redis keys (default: "oauth1_nonce")
        """
        self._redis = redis_client
        self._ttl = ttl
        self._key_prefix = key_prefix

    def _get_key(self, nonce_key: str) -> str:
        return f"{self._key_prefix}:{nonce_key}"

    def record_if_new(self, nonce_key: str, timestamp: int) -> bool:
        """
        Atomically record a nonce unless it already exists.

        Uses SET NX so two verifiers racing on the same nonce cannot both
        accept it.

        Args:
            nonce_key: "<consumer_key>:<nonce>"
            timestamp: oauth_timestamp the nonce was signed with

        Returns:
            True if the nonce was new and is now recorded
        """
        created = self._redis.set(self._get_key(nonce_key), str(timestamp), ex=self._ttl, nx=True)
        if not created:
            logger.info("Replayed OAuth nonce rejected", extra={'key_prefix': self._key_prefix})
        return bool(created)
