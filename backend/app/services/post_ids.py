"""Post Id Generator: issues UUID4-based post ids verified unused against the store.

Invariants:
    - Every issued id was absent from the store when it was checked
    - Memory use is constant: uniqueness is checked against the store, not a set of issued ids
    - Gives up with IdGenerationError after max_attempts consecutive collisions
"""

import logging
import uuid
from typing import Callable

from app.core.domain_types import PostId
from app.core.errors import IdGenerationError
from app.core.repository_protocols import PostStore

logger = logging.getLogger(__name__)


def _uuid4_str() -> str:
    return str(uuid.uuid4())


class PostIdGenerator:
    def __init__(
        self,
        store: PostStore,
        max_attempts: int = 8,
        factory: Callable[[], str] = _uuid4_str,
    ):
        self._store = store
        self._max_attempts = max_attempts
        self._factory = factory

    async def generate(self) -> PostId:
        for attempt in range(1, self._max_attempts + 1):
            candidate = PostId(self._factory())
            if not await self._store.contains(candidate):
                return candidate
            logger.warning(
                f"Post id collision on attempt {attempt}",
                extra={"post_id": candidate},
            )
        raise IdGenerationError(self._max_attempts)
