"""Request Dependencies: caller identity and a PostService bound to the request's DB session.

Invariants:
    - Caller identity is read only from the configured header (external trust boundary)
    - One SqlPostStore per request, sharing the request's AsyncSession
    - Every request-scoped PostService shares the process-wide write lock
"""

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.domain_types import Principal
from app.infrastructure.database import get_db
from app.infrastructure.post_store import SqlPostStore
from app.services.post_ids import PostIdGenerator
from app.services.post_service import PostService, shared_write_lock


def get_caller(request: Request) -> Principal:
    header = get_settings().caller_header
    value = request.headers.get(header, "").strip()
    if not value:
        raise HTTPException(
            status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing caller identity ({header} header)",
        )
    return Principal(value)


async def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    store = SqlPostStore(db)
    ids = PostIdGenerator(store, max_attempts=get_settings().post_id_max_attempts)
    return PostService(store, ids, lock=shared_write_lock())
