"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt

from todolist_auth.exceptions import InvalidTokenError
from todolist_auth.schemas import AccessToken, TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Tokens are stateless: nothing is stored server-side, so a token stays
    valid until it expires. There is no revocation and no logout
    invalidation.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key", ttl_seconds=3600)
    >>> issued = service.create_access_token(42, "user@example.com")
    >>> payload = service.verify_token(issued.token)
    >>> print(payload.user_id)
    42
    """

    DEFAULT_TTL_SECONDS = 3600
    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = ("sub", "email", "iat", "exp")

    def __init__(
        self,
        secret_key: str,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        ttl_seconds
            Seconds until an access token expires (default 3600)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)
        if ttl_seconds <= 0:
            msg = "JWT TTL must be a positive number of seconds"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._ttl = timedelta(seconds=ttl_seconds)

    @property
    def ttl_seconds(self) -> int:
        return int(self._ttl.total_seconds())

    def create_access_token(
        self,
        user_id: int,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> AccessToken:
        """Create a signed access token for a user.

        Parameters
        ----------
        user_id
            The user's unique identifier
        email
            The user's email address
        expires_delta
            Custom expiration time (optional, defaults to the configured TTL)

        Returns
        -------
        AccessToken with the encoded JWT and its expiry timestamp
        """
        # JWT timestamps have second precision
        now = datetime.now(tz=timezone.utc).replace(microsecond=0)
        expire = now + (expires_delta if expires_delta is not None else self._ttl)

        payload = {
            "sub": str(user_id),
            "email": email,
            "iat": now,
            "exp": expire,
            "jti": uuid4().hex,
        }

        token = jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
        return AccessToken(token=token, expires_at=expire)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        if not token:
            msg = "Token is empty"
            raise InvalidTokenError(msg)

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": list(self.REQUIRED_CLAIMS)},
            )

            return TokenPayload(
                user_id=int(payload["sub"]),
                email=str(payload["email"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                token_id=str(payload.get("jti", "")),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
