"""Post Routes — REST surface for create/list/read/update/delete.

Invariants:
    - POST, PATCH, DELETE pass the session gate first (require_login)
    - /{id} routes pass the identifier gate before the service is called
    - Only POST validates its body (PostCreate); PATCH takes any JSON object
    - GET list sets the Last-Page header; the body is a bare JSON array
    - DELETE answers 204 whether or not the post existed
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status

from blog.api.dependencies import get_post_service, require_login, valid_post_id
from blog.core.domain_types import AuthContext, PostId
from blog.core.post_listing import parse_page
from blog.schemas.post import PostCreate, PostResponse
from blog.services.post_service import PostService

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.post("", response_model=PostResponse)
async def write_post(
    auth: AuthContext = Depends(require_login),
    payload: PostCreate = Body(...),
    service: PostService = Depends(get_post_service),
):
    """Create a post from {title, body, tags}."""
    return await service.create(auth, payload.title, payload.body, payload.tags)


@router.get("", response_model=list[PostResponse])
async def list_posts(
    response: Response,
    page: str | None = Query(None),
    tag: str | None = Query(None),
    service: PostService = Depends(get_post_service),
):
    """Newest-first page of post excerpts."""
    result = await service.list(parse_page(page), tag)
    response.headers["Last-Page"] = str(result.last_page)
    return result.posts


@router.get("/{id}", response_model=PostResponse)
async def read_post(
    post_id: PostId = Depends(valid_post_id),
    service: PostService = Depends(get_post_service),
):
    return await service.read(post_id)


@router.delete(
    "/{id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def remove_post(
    auth: AuthContext = Depends(require_login),
    post_id: PostId = Depends(valid_post_id),
    service: PostService = Depends(get_post_service),
):
    await service.delete(auth, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{id}", response_model=PostResponse)
async def update_post(
    auth: AuthContext = Depends(require_login),
    post_id: PostId = Depends(valid_post_id),
    fields: dict[str, Any] = Body(default_factory=dict),
    service: PostService = Depends(get_post_service),
):
    """Overwrite the submitted fields and return the updated post."""
    return await service.update(auth, post_id, fields)
