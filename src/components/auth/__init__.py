"""
Auth component - credentials sign-in action.

Delegates verification to an auth provider and maps its failures to
user-facing messages.
"""

from .component import CREDENTIALS_STRATEGY, run_authenticate
from .models import (
    CREDENTIALS_SIGNIN,
    INVALID_PROVIDER,
    AuthenticateInput,
    AuthError,
)
from .ports import AuthProviderPort

__all__ = [
    # Entry points
    "run_authenticate",
    "CREDENTIALS_STRATEGY",
    # Models
    "AuthenticateInput",
    "AuthError",
    "CREDENTIALS_SIGNIN",
    "INVALID_PROVIDER",
    # Ports
    "AuthProviderPort",
]
