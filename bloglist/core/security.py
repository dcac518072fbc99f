# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

# Local application imports
from ..domain.exceptions import TokenError
from ..domain.models.token import TokenClaims

DEFAULT_BCRYPT_ROUNDS = 12


def hash_password(plain_password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt cost factor

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Malformed stored hash or over-long password
        return False


class TokenAuthority:
    """
    Signs and verifies bearer tokens.

    Tokens are HS256 JWTs carrying the subject id, the username, ``iat`` and
    ``exp``. The secret is fixed for the lifetime of the instance. There is
    no revocation list: a token stays valid until it expires.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", ttl_seconds: int = 3600) -> None:
        if not secret_key:
            raise ValueError("Token signing secret must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.ttl_seconds = ttl_seconds

    def sign(self, subject_id: str, username: str, ttl_seconds: Optional[int] = None) -> str:
        """
        Create a signed token for the given identity

        Args:
            subject_id: User ID the token is bound to
            username: Username of that user
            ttl_seconds: Lifetime override; defaults to the authority's TTL

        Returns:
            Encoded JWT token string
        """
        issued_at = int(time.time())
        expires_at = issued_at + (self.ttl_seconds if ttl_seconds is None else ttl_seconds)

        token_payload: Dict[str, Any] = {
            "sub": subject_id,
            "username": username,
            "iat": issued_at,
            "exp": expires_at,
        }
        return jwt.encode(token_payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> TokenClaims:
        """
        Decode and validate a token

        Args:
            token: The JWT token string to decode

        Returns:
            Claims embedded in the token

        Raises:
            TokenError: "token missing", "token invalid" or "token expired"
        """
        if not token:
            raise TokenError(TokenError.MISSING)

        try:
            decoded = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )
        except ExpiredSignatureError:
            raise TokenError(TokenError.EXPIRED)
        except InvalidTokenError:
            raise TokenError(TokenError.INVALID)

        subject_id = decoded.get("sub")
        username = decoded.get("username")
        if not isinstance(subject_id, str) or not subject_id or not isinstance(username, str):
            raise TokenError(TokenError.INVALID)

        return TokenClaims(
            subject_id=subject_id,
            username=username,
            issued_at=int(decoded["iat"]),
            expires_at=int(decoded["exp"]),
        )
