"""
Credentials model for OAuth 1.0a request signing.
"""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """
    Consumer and token credentials used to sign a request.

    Empty strings are valid: request-token steps and two-legged flows sign
    with an empty token and token secret.

    Attributes:
        consumer_key: Identifies the client to the server
        consumer_secret: Shared secret paired with the consumer key
        token: Identifies the resource owner authorization (may be empty)
        token_secret: Shared secret paired with the token (may be empty)
    """
    consumer_key: str
    consumer_secret: str = field(repr=False)
    token: str = ''
    token_secret: str = field(default='', repr=False)

    def __post_init__(self) -> None:
        for name in ('consumer_key', 'consumer_secret', 'token', 'token_secret'):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"{name} must be a string, got {type(value).__name__}")

    @classmethod
    def from_dict(cls, data: dict) -> 'Credentials':
        """
        Create a Credentials instance from a dictionary.

        Args:
            data: Dictionary with consumer_key and consumer_secret, and
                  optionally token and token_secret

        Returns:
            Credentials instance
        """
        return cls(
            consumer_key=data['consumer_key'],
            consumer_secret=data['consumer_secret'],
            token=data.get('token', ''),
            token_secret=data.get('token_secret', '')
        )

    def to_dict(self) -> dict:
        """
        Convert to a dictionary safe for logging.

        Secrets are reported only as present or absent.

        Returns:
            Dictionary representation without secret values
        """
        return {
            'consumer_key': self.consumer_key,
            'token': self.token,
            'has_consumer_secret': bool(self.consumer_secret),
            'has_token_secret': bool(self.token_secret)
        }
