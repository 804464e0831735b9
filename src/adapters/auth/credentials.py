"""
Credentials auth provider.

Implements AuthProviderPort for the "credentials" strategy: look the user up
by email, verify the password hash, then issue a session token and hand it to
the session writer supplied by the HTTP shell.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from src.components.auth import CREDENTIALS_SIGNIN, INVALID_PROVIDER, AuthError
from src.domain.entities import User

logger = logging.getLogger(__name__)


class UserLookupPort(Protocol):
    def get_by_email(self, email: str) -> User | None: ...


class PasswordVerifierPort(Protocol):
    def verify_password(self, plain: str, hashed: str) -> bool: ...


class TokenIssuerPort(Protocol):
    def create_token(self, subject: str) -> str: ...


class CredentialsAuthProvider:
    def __init__(
        self,
        user_repo: UserLookupPort,
        hasher: PasswordVerifierPort,
        tokens: TokenIssuerPort,
        session_writer: Callable[[str], None],
        strategy: str = "credentials",
        min_password_length: int = 6,
    ):
        self.user_repo = user_repo
        self.hasher = hasher
        self.tokens = tokens
        self.session_writer = session_writer
        self.strategy = strategy
        self.min_password_length = min_password_length

    def _read_credentials(self, form_data: Mapping[str, Any]) -> tuple[str, str] | None:
        email = form_data.get("email")
        password = form_data.get("password")
        if not isinstance(email, str) or not isinstance(password, str):
            return None

        email = email.strip()
        if "@" not in email or len(password) < self.min_password_length:
            return None
        return email, password

    def sign_in(self, strategy: str, form_data: Mapping[str, Any]) -> None:
        if strategy != self.strategy:
            raise AuthError(INVALID_PROVIDER, f"Unknown sign-in strategy: {strategy}")

        credentials = self._read_credentials(form_data)
        if credentials is None:
            raise AuthError(CREDENTIALS_SIGNIN)

        email, password = credentials
        # Store failures propagate as-is; they are not credential problems.
        user = self.user_repo.get_by_email(email)
        if user is None or not self.hasher.verify_password(password, user.password_hash):
            raise AuthError(CREDENTIALS_SIGNIN)

        token = self.tokens.create_token(user.id)
        self.session_writer(token)
        logger.info("User %s signed in", user.id)
