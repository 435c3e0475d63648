"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - PostId wraps the string form of a UUID4; never parsed back into a UUID
    - Principal compares by value; two principals are the same caller iff equal
    - Post is immutable; every mutation produces a new Post via dataclasses.replace
    - updated_at is None until the first like/update, never a sentinel value

Design Decisions:
    - Principal as a frozen dataclass instead of str: ownership checks compare
      identities, not their formatted representations
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", str)


@dataclass(frozen=True)
class Principal:
    """Opaque caller identity supplied by the hosting environment."""
    value: str

    def __str__(self) -> str:
        return self.value


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class PostContent:
    """The owner-editable part of a post."""
    title: str
    body: str
    image_url: str


@dataclass(frozen=True)
class Post:
    """A blog entry: ownership, content and engagement fields."""
    id: PostId
    owner: Principal
    title: str
    body: str
    image_url: str
    created_at: datetime
    likes: int = 0
    comments: tuple[str, ...] = field(default_factory=tuple)
    updated_at: datetime | None = None

    def is_owned_by(self, caller: Principal) -> bool:
        return self.owner == caller
