from typing import Annotated

from fastapi import APIRouter, Depends, Form, Response
from fastapi.responses import JSONResponse, RedirectResponse

from src.adapters.auth.credentials import CredentialsAuthProvider
from src.adapters.auth.crypto import JWTTokenIssuer, PasslibPasswordHasher
from src.adapters.sqlite.repos import SQLiteUserRepo
from src.api.deps import get_password_hasher, get_rules, get_token_issuer, get_user_repo
from src.components.auth import AuthenticateInput, run_authenticate
from src.rules.models import Rules

router = APIRouter()


@router.post("/login")
def login(
    email: Annotated[str | None, Form()] = None,
    password: Annotated[str | None, Form()] = None,
    user_repo: SQLiteUserRepo = Depends(get_user_repo),
    hasher: PasslibPasswordHasher = Depends(get_password_hasher),
    tokens: JWTTokenIssuer = Depends(get_token_issuer),
    rules: Rules = Depends(get_rules),
) -> Response:
    """Sign in with email and password; on success redirect with a session cookie."""
    auth_rules = rules.auth
    cookie = auth_rules.sessions.cookie
    response = RedirectResponse(auth_rules.post_login_path, status_code=303)

    def write_session(token: str) -> None:
        response.set_cookie(
            key=cookie.name,
            value=f"Bearer {token}",
            httponly=cookie.http_only,
            max_age=auth_rules.sessions.ttl_minutes * 60,
            samesite=cookie.same_site,  # type: ignore[arg-type]
            secure=cookie.secure,
        )

    provider = CredentialsAuthProvider(
        user_repo,
        hasher,
        tokens,
        write_session,
        strategy=auth_rules.strategy,
        min_password_length=auth_rules.min_password_length,
    )
    message = run_authenticate(
        AuthenticateInput(form_data={"email": email, "password": password}),
        provider,
        strategy=auth_rules.strategy,
    )
    if message is not None:
        return JSONResponse({"message": message})
    return response


@router.post("/logout")
def logout(response: Response, rules: Rules = Depends(get_rules)) -> dict[str, str]:
    """Log out user by clearing cookie."""
    response.delete_cookie(key=rules.auth.sessions.cookie.name)
    return {"status": "success"}
