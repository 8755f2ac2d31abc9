"""
Pytest configuration and fixtures for oauth1_header tests.
"""
import pytest

from oauth1_header.models import Credentials
from oauth1_header.auth import OAuth1Signer, FixedNonceSource, FixedClock


FIXED_NONCE = 'abc123'
FIXED_TIMESTAMP = 1700000000


@pytest.fixture
def credentials():
    """Credentials used throughout the examples."""
    return Credentials(
        consumer_key='some-consumer-key',
        consumer_secret='some-consumer-secret',
        token='some-token',
        token_secret='some-token-secret'
    )


@pytest.fixture
def fixed_signer(credentials):
    """Signer with a fixed nonce and timestamp for golden-value tests."""
    return OAuth1Signer(
        credentials,
        nonce_source=FixedNonceSource(FIXED_NONCE),
        clock=FixedClock(FIXED_TIMESTAMP)
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables so tests start from a known state."""
    for name in (
        'OAUTH1_CONSUMER_KEY',
        'OAUTH1_CONSUMER_SECRET',
        'OAUTH1_TOKEN',
        'OAUTH1_TOKEN_SECRET',
        'OAUTH1_NONCE_BYTES',
        'OAUTH1_TIMESTAMP_TOLERANCE',
        'REDIS_HOST',
        'REDIS_PORT',
        'REDIS_PASSWORD',
        'REDIS_DB',
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
