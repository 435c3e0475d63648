"""Post Mutations: pure functions that compute the next version of a Post.

Invariants:
    - Inputs are never modified; each function returns a new Post
    - id, owner and created_at are carried over unchanged
    - likes only grows by exactly 1; comments only grow at the end
    - Preconditions are NOT checked here (see enforce_posts)
"""

from dataclasses import replace
from datetime import datetime

from app.core.domain_types import Post, PostContent, PostId, Principal


def new_post(
    post_id: PostId, owner: Principal, content: PostContent, now: datetime,
) -> Post:
    return Post(
        id=post_id,
        owner=owner,
        title=content.title,
        body=content.body,
        image_url=content.image_url,
        created_at=now,
    )


def with_like(post: Post, now: datetime) -> Post:
    return replace(post, likes=post.likes + 1, updated_at=now)


def with_content(post: Post, content: PostContent, now: datetime) -> Post:
    return replace(
        post,
        title=content.title,
        body=content.body,
        image_url=content.image_url,
        updated_at=now,
    )


def with_comment(post: Post, comment: str) -> Post:
    # updated_at tracks likes and edits only
    return replace(post, comments=(*post.comments, comment))
