"""Post ORM: one row per stored post, keyed by the generated post id.

Invariants:
    - id is the string primary key issued by PostIdGenerator (never server-generated)
    - owner is stored unbounded (Text) as the Principal's value and mapped back to Principal on read
    - comments is a JSON array appended to in order
    - created_at/updated_at are timezone-aware UTC on both write and read
"""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from app.core.domain_types import Post, PostId, Principal
from app.db.base import Base


class UTCDateTime(TypeDecorator):
    """DateTime that always comes back tz-aware (SQLite drops the offset)."""
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class PostRecord(Base):
    """Persisted blog post."""
    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    owner: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    comments: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime, nullable=True,
    )

    def to_domain(self) -> Post:
        return Post(
            id=PostId(self.id),
            owner=Principal(self.owner),
            title=self.title,
            body=self.body,
            image_url=self.image_url,
            likes=self.likes,
            comments=tuple(self.comments or ()),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_domain(cls, post: Post) -> "PostRecord":
        return cls(
            id=post.id,
            owner=post.owner.value,
            title=post.title,
            body=post.body,
            image_url=post.image_url,
            likes=post.likes,
            comments=list(post.comments),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
