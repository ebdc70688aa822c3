"""Auth Routes — admin login/logout backed by the signed cookie session.

Invariants:
    - Login succeeds only on an exact admin_password match (constant-time compare)
    - A failed login answers 401 with an empty body and leaves the session untouched
    - Logout clears the whole session and answers 204
"""

import logging

from fastapi import APIRouter, Request, Response, status

from blog.api.dependencies import SESSION_LOGGED_KEY
from blog.config import get_settings
from blog.core.auth import password_matches
from blog.core.errors import NotAuthenticatedError
from blog.schemas.auth import AuthCheckResponse, LoginRequest, LoginResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, request: Request):
    if not password_matches(body.password, get_settings().admin_password):
        logger.warning("Rejected admin login", extra={"path": request.url.path})
        raise NotAuthenticatedError()
    request.session[SESSION_LOGGED_KEY] = True
    return LoginResponse(success=True)


@router.get("/check", response_model=AuthCheckResponse)
async def check(request: Request):
    return AuthCheckResponse(
        logged=bool(request.session.get(SESSION_LOGGED_KEY)),
    )


@router.post(
    "/logout", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def logout(request: Request):
    request.session.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
