"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any dict-backed fake
"""

from typing import Protocol, Sequence

from app.core.domain_types import Post, PostId


class PostStore(Protocol):
    """Durable ordered map from post id to Post."""
    async def insert(self, post_id: PostId, post: Post) -> None: ...
    async def get(self, post_id: PostId) -> Post | None: ...
    async def remove(self, post_id: PostId) -> Post | None: ...
    async def values(self) -> Sequence[Post]: ...
    async def contains(self, post_id: PostId) -> bool: ...
