"""
Nonce and clock collaborators for the signer.

Production code uses SecureNonceSource and SystemClock. The fixed variants
make golden-value tests reproducible.
"""
import secrets
import time
from typing import Protocol

from oauth1_header.errors import SigningEnvironmentError

DEFAULT_NONCE_BYTES = 16


class NonceSource(Protocol):
    """Produces a fresh oauth_nonce for every call."""

    def nonce(self) -> str:
        ...


class Clock(Protocol):
    """Produces the oauth_timestamp as whole Unix seconds."""

    def timestamp(self) -> int:
        ...


class SecureNonceSource:
    """
    Nonce source backed by the operating system's secure random generator.

    Nonces are hex encoded, so num_bytes=16 gives 32 characters.
    """

    def __init__(self, num_bytes: int = DEFAULT_NONCE_BYTES):
        if num_bytes < 8:
            raise ValueError("num_bytes must be at least 8")
        self.num_bytes = num_bytes

    def nonce(self) -> str:
        return secrets.token_hex(self.num_bytes)


class SystemClock:
    """Wall-clock time in whole seconds."""

    def timestamp(self) -> int:
        return int(time.time())


class FixedNonceSource:
    """Always returns the same nonce. For tests only."""

    def __init__(self, value: str):
        self.value = value

    def nonce(self) -> str:
        return self.value


class FixedClock:
    """Always returns the same timestamp. For tests only."""

    def __init__(self, value: int):
        self.value = value

    def timestamp(self) -> int:
        return self.value


def read_nonce(source: NonceSource) -> str:
    """
    Get a nonce from a source, checking it is usable.

    Raises:
        SigningEnvironmentError: If the source fails or returns an empty or
                                 non-string nonce
    """
    try:
        value = source.nonce()
    except (OSError, NotImplementedError) as e:
        raise SigningEnvironmentError(f"Random source unavailable: {e}") from e

    if not isinstance(value, str) or not value:
        raise SigningEnvironmentError("Nonce source returned an empty or non-string nonce")
    return value


def read_timestamp(clock: Clock) -> int:
    """
    Get a timestamp from a clock, checking it is usable.

    Raises:
        SigningEnvironmentError: If the clock fails or returns a negative or
                                 non-integer timestamp
    """
    try:
        value = clock.timestamp()
    except (OSError, OverflowError, ValueError) as e:
        raise SigningEnvironmentError(f"Clock unavailable: {e}") from e

    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SigningEnvironmentError(f"Clock returned an invalid timestamp: {value!r}")
    return value
