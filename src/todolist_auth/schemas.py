"""Auth schemas and data structures.

These are simple data classes used for transferring token data
between components.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The unique identifier of the user
    email
        The user's email address
    issued_at
        Token issuance timestamp
    exp
        Token expiration timestamp
    token_id
        Unique identifier of this token (``jti`` claim)
    """

    user_id: int
    email: str
    issued_at: datetime
    exp: datetime
    token_id: str


@dataclass(frozen=True)
class AccessToken:
    """A freshly issued bearer token and the moment it stops being valid."""

    token: str
    expires_at: datetime
