"""
Environment-based configuration for signers and verifiers.
"""
import os
import logging
from typing import Optional
import redis
from dotenv import load_dotenv

from oauth1_header.errors import ConfigurationError
from oauth1_header.models.credentials import Credentials
from oauth1_header.auth.signer import OAuth1Signer
from oauth1_header.auth.sources import DEFAULT_NONCE_BYTES, SecureNonceSource
from oauth1_header.auth.verifier import DEFAULT_TIMESTAMP_TOLERANCE, OAuth1Verifier, SecretProvider
from oauth1_header.auth.nonce_storage import DEFAULT_NONCE_TTL, RedisNonceStorage

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def _get_int(name: str, default: int, minimum: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigurationError(f"{name} must be at least {minimum}, got {value}")
    return value


def load_credentials_from_env() -> Credentials:
    """
    Read signing credentials from environment variables.

    Environment variables:
        OAUTH1_CONSUMER_KEY: Consumer key (required)
        OAUTH1_CONSUMER_SECRET: Consumer secret (required)
        OAUTH1_TOKEN: Token (default: empty)
        OAUTH1_TOKEN_SECRET: Token secret (default: empty)

    Returns:
        Credentials instance

    Raises:
        ConfigurationError: If a required variable is missing
    """
    missing = [
        name for name in ('OAUTH1_CONSUMER_KEY', 'OAUTH1_CONSUMER_SECRET')
        if name not in os.environ
    ]
    if missing:
        raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")

    return Credentials(
        consumer_key=os.environ['OAUTH1_CONSUMER_KEY'],
        consumer_secret=os.environ['OAUTH1_CONSUMER_SECRET'],
        token=os.environ.get('OAUTH1_TOKEN', ''),
        token_secret=os.environ.get('OAUTH1_TOKEN_SECRET', '')
    )


def get_nonce_bytes() -> int:
    """Number of random bytes per nonce (OAUTH1_NONCE_BYTES, default 16)."""
    return _get_int('OAUTH1_NONCE_BYTES', DEFAULT_NONCE_BYTES, minimum=8)


def get_timestamp_tolerance() -> int:
    """Verifier timestamp window in seconds (OAUTH1_TIMESTAMP_TOLERANCE, default 300)."""
    return _get_int('OAUTH1_TIMESTAMP_TOLERANCE', DEFAULT_TIMESTAMP_TOLERANCE, minimum=0)


def create_signer_from_env(credentials: Optional[Credentials] = None) -> OAuth1Signer:
    """
    Create a signer configured from environment variables.

    Args:
        credentials: Optional credentials (for testing). If None, read from env.

    Returns:
        OAuth1Signer instance

    Raises:
        ConfigurationError: If configuration is missing or invalid
    """
    if credentials is None:
        credentials = load_credentials_from_env()

    return OAuth1Signer(
        credentials,
        nonce_source=SecureNonceSource(num_bytes=get_nonce_bytes())
    )


def create_redis_client():
    """
    Create Redis client if configured.

    If REDIS_HOST is not configured, returns None.

    Environment variables:
        REDIS_HOST, REDIS_PORT (default 6379), REDIS_PASSWORD, REDIS_DB (default 0)

    Returns:
        Redis client instance or None if not configured
    """
    redis_host = os.environ.get('REDIS_HOST')

    if not redis_host:
        return None

    redis_port = int(os.environ.get('REDIS_PORT', 6379))
    redis_password = os.environ.get('REDIS_PASSWORD')
    redis_db = int(os.environ.get('REDIS_DB', 0))

    redis_client = redis.Redis(
        host=redis_host,
        port=redis_port,
        password=redis_password,
        db=redis_db,
        decode_responses=True
    )
    redis_client.ping()

    logger.info("Redis connection established", extra={
        'redis_host': redis_host,
        'redis_port': redis_port
    })

    return redis_client


def create_verifier_from_env(secret_provider: SecretProvider, redis_client=None) -> OAuth1Verifier:
    """
    Create a verifier with appropriate nonce storage.

    Uses Redis for nonce storage when available (multi-instance safe).
    Falls back to an in-memory dict otherwise.

    Args:
        secret_provider: Source of consumer and token secrets
        redis_client: Optional Redis client (for testing). If None, creates based on env.

    Returns:
        OAuth1Verifier instance
    """
    if redis_client is None:
        redis_client = create_redis_client()

    tolerance = get_timestamp_tolerance()

    if redis_client:
        nonce_storage = RedisNonceStorage(redis_client, ttl=max(DEFAULT_NONCE_TTL, tolerance * 2))
        logger.info("OAuth verifier initialized with Redis nonce storage (replay protection enabled)")
    else:
        nonce_storage = {}
        logger.warning("OAuth verifier using in-memory nonce storage (not safe for multi-instance)")

    return OAuth1Verifier(
        secret_provider,
        timestamp_tolerance=tolerance,
        nonce_storage=nonce_storage
    )
