"""Post Schemas: request payloads and response bodies for /api/v1/posts.

Invariants:
    - PostPayload requires title, body and imageURL to be present; emptiness is a
      service rule (InvalidInput), so empty strings pass schema validation
    - PostResponse is built only from a domain Post (from_domain)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.core.domain_types import Post, PostContent


class PostPayload(BaseModel):
    """Owner-editable fields for create and update."""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    body: str
    image_url: str = Field(alias="imageURL")

    def to_content(self) -> PostContent:
        return PostContent(
            title=self.title, body=self.body, image_url=self.image_url,
        )


class CommentPayload(BaseModel):
    comment: str


class PostResponse(BaseModel):
    """Public representation of a stored post."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    owner: str
    title: str
    body: str
    image_url: str = Field(alias="imageURL")
    likes: int
    comments: list[str]
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, post: Post) -> "PostResponse":
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
