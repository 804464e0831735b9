from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

CREDENTIALS_SIGNIN = "CredentialsSignin"
INVALID_PROVIDER = "InvalidProvider"


class AuthError(Exception):
    """
    Authentication failure raised by an auth provider.

    ``type`` names the failure kind, e.g. ``CredentialsSignin``.
    """

    def __init__(self, error_type: str, message: str | None = None):
        super().__init__(message or error_type)
        self.type = error_type


@dataclass(frozen=True)
class AuthenticateInput:
    form_data: Mapping[str, Any]
    prev_state: str | None = None
