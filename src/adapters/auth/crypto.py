from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import jwt
from passlib.context import CryptContext


class PasslibPasswordHasher:
    """Argon2 password hashing through passlib."""

    def __init__(self, schemes: list[str] | None = None) -> None:
        self._context = CryptContext(schemes=schemes or ["argon2"], deprecated="auto")

    def hash_password(self, password: str) -> str:
        result: str = self._context.hash(password)
        return result

    def verify_password(self, plain: str, hashed: str) -> bool:
        try:
            result: bool = self._context.verify(plain, hashed)
        except ValueError:
            # Stored value is not a hash this context understands.
            return False
        return result


class JWTTokenIssuer:
    """Signs and reads session tokens."""

    def __init__(self, secret_key: str, ttl_minutes: int, algorithm: str = "HS256"):
        self.secret_key = secret_key
        self.ttl_minutes = ttl_minutes
        self.algorithm = algorithm

    def create_token(self, subject: str, now_utc: datetime | None = None) -> str:
        """
        Create a JWT for ``subject``.

        Args:
            subject: Value of the ``sub`` claim (the user id)
            now_utc: Current UTC time (for testing/determinism). Defaults to datetime.now(UTC).
        """
        current_time = now_utc if now_utc is not None else datetime.now(UTC)
        claims = {"sub": subject, "exp": current_time + timedelta(minutes=self.ttl_minutes)}
        encoded: str = jwt.encode(claims, self.secret_key, algorithm=self.algorithm)
        return encoded

    def decode_token(self, token: str) -> dict[str, Any] | None:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
            return cast(dict[str, Any], payload)
        except jwt.JWTError:
            return None
