from collections.abc import Mapping
from typing import Any, Protocol


class AuthProviderPort(Protocol):
    """Verifies credentials and establishes the session on success."""

    def sign_in(self, strategy: str, form_data: Mapping[str, Any]) -> None:
        """
        Sign in using the named strategy.

        Raises:
            AuthError: If verification fails; ``type`` says why.
        """
        ...
