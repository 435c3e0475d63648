"""Post Service: request handlers for adding, reading, editing, liking and commenting on posts.

Invariants:
    - Every public method returns Ok/Err; no exception crosses this boundary
    - Preconditions are checked before any write, so failures leave the store unchanged
    - Exactly one store write per successful mutation
    - Read-check-write sequences hold the write lock: concurrent requests never
      interleave between reading a post and writing its next version
    - Caller identity is a Principal supplied by the request boundary

Design Decisions:
    - Rules live in core/enforce_posts.py and core/post_mutations.py (pure);
      this class only orchestrates store reads, checks, and writes
    - One write lock per event loop, shared by every PostService built for requests
      (see shared_write_lock); plain reads do not take it
    - clock is injectable so tests can pin created_at/updated_at
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable

from app.core.domain_types import Post, PostContent, PostId, Principal
from app.core.enforce_posts import (
    check_content,
    check_exists,
    validate_comment,
    validate_like,
    validate_owner_edit,
)
from app.core.errors import PostServiceError
from app.core.post_mutations import new_post, with_comment, with_content, with_like
from app.core.repository_protocols import PostStore
from app.core.result import Err, Ok, Result
from app.services.post_ids import PostIdGenerator

logger = logging.getLogger(__name__)

# (loop, lock): asyncio.Lock must not be shared across event loops
_write_lock: tuple[asyncio.AbstractEventLoop, asyncio.Lock] | None = None


def shared_write_lock() -> asyncio.Lock:
    """Process-wide write lock for the running event loop."""
    global _write_lock
    loop = asyncio.get_running_loop()
    if _write_lock is None or _write_lock[0] is not loop:
        _write_lock = (loop, asyncio.Lock())
    return _write_lock[1]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PostService:
    """Stateless handlers over a PostStore."""

    def __init__(
        self,
        store: PostStore,
        id_generator: PostIdGenerator | None = None,
        clock: Callable[[], datetime] = _utc_now,
        lock: asyncio.Lock | None = None,
    ):
        self._store = store
        self._ids = id_generator or PostIdGenerator(store)
        self._clock = clock
        self._lock = lock or asyncio.Lock()

    async def add_post(self, caller: Principal, content: PostContent) -> Result[Post]:
        error = check_content(content)
        if error:
            return self._fail("add", error, caller)
        try:
            async with self._lock:
                post_id = await self._ids.generate()
                post = new_post(post_id, caller, content, self._clock())
                await self._store.insert(post_id, post)
        except PostServiceError as e:
            return self._fail("add", e, caller)
        logger.info("Post created", extra={"post_id": post_id, "caller": str(caller)})
        return Ok(post)

    async def get_post(self, post_id: PostId) -> Result[Post]:
        try:
            post = await self._store.get(post_id)
        except PostServiceError as e:
            return self._fail("get", e)
        error = check_exists(post, post_id, "find")
        if error:
            return self._fail("get", error)
        return Ok(post)

    async def get_all_posts(self) -> Result[list[Post]]:
        try:
            posts = await self._store.values()
        except PostServiceError as e:
            return self._fail("get_all", e)
        return Ok(list(posts))

    async def update_post(
        self, caller: Principal, post_id: PostId, content: PostContent,
    ) -> Result[Post]:
        try:
            async with self._lock:
                post = await self._store.get(post_id)
                error = validate_owner_edit(post, post_id, caller, "update", content)
                if error:
                    return self._fail("update", error, caller)
                updated = with_content(post, content, self._clock())
                await self._store.insert(post_id, updated)
        except PostServiceError as e:
            return self._fail("update", e, caller)
        logger.info("Post updated", extra={"post_id": post_id, "caller": str(caller)})
        return Ok(updated)

    async def delete_post(self, caller: Principal, post_id: PostId) -> Result[Post]:
        try:
            async with self._lock:
                post = await self._store.get(post_id)
                error = validate_owner_edit(post, post_id, caller, "delete")
                if error:
                    return self._fail("delete", error, caller)
                removed = await self._store.remove(post_id)
        except PostServiceError as e:
            return self._fail("delete", e, caller)
        logger.info("Post deleted", extra={"post_id": post_id, "caller": str(caller)})
        return Ok(removed or post)

    async def like_post(self, caller: Principal, post_id: PostId) -> Result[Post]:
        try:
            async with self._lock:
                post = await self._store.get(post_id)
                error = validate_like(post, post_id, caller)
                if error:
                    return self._fail("like", error, caller)
                liked = with_like(post, self._clock())
                await self._store.insert(post_id, liked)
        except PostServiceError as e:
            return self._fail("like", e, caller)
        logger.info("Post liked", extra={"post_id": post_id, "caller": str(caller)})
        return Ok(liked)

    async def comment_on_post(
        self, caller: Principal, post_id: PostId, comment: str,
    ) -> Result[Post]:
        try:
            async with self._lock:
                post = await self._store.get(post_id)
                error = validate_comment(post, post_id, comment)
                if error:
                    return self._fail("comment", error, caller)
                commented = with_comment(post, comment)
                await self._store.insert(post_id, commented)
        except PostServiceError as e:
            return self._fail("comment", e, caller)
        logger.info("Comment added", extra={"post_id": post_id, "caller": str(caller)})
        return Ok(commented)

    def _fail(
        self, operation: str, error: PostServiceError, caller: Principal | None = None,
    ) -> Err:
        error.context.operation = operation
        if caller is not None and error.context.caller is None:
            error.context.caller = str(caller)
        log = logger.warning if error.http_status < 500 else logger.error
        log(
            f"Post {operation} failed: {error.message}",
            extra={
                "error_code": error.code,
                "operation": operation,
                "post_id": error.context.post_id,
                "caller": error.context.caller,
            },
        )
        return Err(error)
