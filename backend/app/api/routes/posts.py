"""Post Routes: HTTP surface for PostService.

Invariants:
    - Routes hold no business logic; every decision is made by PostService
    - Err results render as error.to_response() with error.http_status
    - Ok results render through PostResponse (imageURL on the wire)
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.dependencies import get_caller, get_post_service
from app.core.domain_types import PostId, Principal
from app.core.result import Err, Result
from app.schemas.post import CommentPayload, PostPayload, PostResponse
from app.services.post_service import PostService

router = APIRouter(prefix="/api/v1/posts", tags=["posts"])


def _respond(result: Result):
    if isinstance(result, Err):
        return JSONResponse(
            status_code=result.error.http_status,
            content=result.error.to_response(),
        )
    value = result.value
    if isinstance(value, list):
        return [PostResponse.from_domain(p) for p in value]
    return PostResponse.from_domain(value)


@router.post(
    "", response_model=PostResponse, status_code=status.HTTP_201_CREATED,
)
async def add_post(
    payload: PostPayload,
    caller: Principal = Depends(get_caller),
    service: PostService = Depends(get_post_service),
):
    """Create a post owned by the caller."""
    result = await service.add_post(caller, payload.to_content())
    return _respond(result)


@router.get("", response_model=list[PostResponse])
async def get_all_posts(service: PostService = Depends(get_post_service)):
    return _respond(await service.get_all_posts())


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str, service: PostService = Depends(get_post_service),
):
    return _respond(await service.get_post(PostId(post_id)))


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    payload: PostPayload,
    caller: Principal = Depends(get_caller),
    service: PostService = Depends(get_post_service),
):
    """Overwrite title, body and imageURL. Owner only."""
    result = await service.update_post(caller, PostId(post_id), payload.to_content())
    return _respond(result)


@router.delete("/{post_id}", response_model=PostResponse)
async def delete_post(
    post_id: str,
    caller: Principal = Depends(get_caller),
    service: PostService = Depends(get_post_service),
):
    """Delete a post and return it as it was. Owner only."""
    return _respond(await service.delete_post(caller, PostId(post_id)))


@router.post("/{post_id}/like", response_model=PostResponse)
async def like_post(
    post_id: str,
    caller: Principal = Depends(get_caller),
    service: PostService = Depends(get_post_service),
):
    """Add one like. Owners cannot like their own post."""
    return _respond(await service.like_post(caller, PostId(post_id)))


@router.post("/{post_id}/comments", response_model=PostResponse)
async def comment_on_post(
    post_id: str,
    payload: CommentPayload,
    caller: Principal = Depends(get_caller),
    service: PostService = Depends(get_post_service),
):
    return _respond(
        await service.comment_on_post(caller, PostId(post_id), payload.comment),
    )
