"""Request Gates — FastAPI dependencies that run before a post handler.

Invariants:
    - require_login (session gate) raises NotAuthenticatedError → 401, empty body
    - valid_post_id (identifier gate) raises InvalidPostIdError → 400 before any store access
    - Gates only read request state; they never touch the database
    - Route order on /{id} writes: session gate, then identifier gate

Design Decisions:
    - Gates as dependencies, not middleware: FastAPI resolves them before the
      body model is validated, so a logged-out caller sees 401, not 400
    - The session flag becomes an AuthContext here and is handed to the
      service explicitly
"""

from fastapi import Depends, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession

from blog.config import get_settings
from blog.core.auth import check_login
from blog.core.domain_types import AuthContext, PostId
from blog.core.errors import InvalidPostIdError
from blog.core.object_id import is_valid_post_id
from blog.infrastructure.database import get_db
from blog.infrastructure.post_repository import SqlPostRepository
from blog.services.post_service import PostService

SESSION_LOGGED_KEY = "logged"


def get_auth_context(request: Request) -> AuthContext:
    """Read the logged flag from the cookie session."""
    return AuthContext(
        logged_in=bool(request.session.get(SESSION_LOGGED_KEY)),
        enforced=get_settings().require_login_for_writes,
    )


def require_login(
    auth: AuthContext = Depends(get_auth_context),
) -> AuthContext:
    check_login(auth)
    return auth


def valid_post_id(id: str = Path(...)) -> PostId:
    if not is_valid_post_id(id):
        raise InvalidPostIdError(id)
    return PostId(id)


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(
        SqlPostRepository(db),
        count_filtered=get_settings().last_page_counts_filtered,
    )
