import logging

from .models import CREDENTIALS_SIGNIN, AuthenticateInput, AuthError
from .ports import AuthProviderPort

logger = logging.getLogger(__name__)

CREDENTIALS_STRATEGY = "credentials"


def run_authenticate(
    inp: AuthenticateInput,
    provider: AuthProviderPort,
    strategy: str = CREDENTIALS_STRATEGY,
) -> str | None:
    """
    Sign in with the submitted form.

    Returns None on success, or a user-facing message for a known auth
    failure. Anything that is not an AuthError propagates unchanged.
    """
    try:
        provider.sign_in(strategy, inp.form_data)
    except AuthError as error:
        logger.info("Sign-in failed: %s", error.type)
        if error.type == CREDENTIALS_SIGNIN:
            return "Invalid credentials"
        return "Something Went Wrong"
    return None
