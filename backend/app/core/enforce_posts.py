"""Post Rule Enforcement: validates every precondition before a post is written.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return the error on violation, None on success
    - Mutating operations check in order: existence, ownership, input (first error wins)
    - Identity checks compare Principal values, never their string forms
"""

from app.core.domain_types import Post, PostContent, Principal
from app.core.errors import (
    ErrorContext,
    ForbiddenError,
    InvalidInputError,
    PostNotFoundError,
    PostServiceError,
    UnauthorizedError,
)


def check_content(content: PostContent) -> InvalidInputError | None:
    """Title, body and image URL are all required and non-empty."""
    missing = [
        name for name, value in (
            ("title", content.title),
            ("body", content.body),
            ("imageURL", content.image_url),
        )
        if not value
    ]
    if missing:
        return InvalidInputError(missing)
    return None


def check_comment(comment: str) -> InvalidInputError | None:
    if not comment:
        return InvalidInputError(["comment"], "Comment cannot be empty")
    return None


def check_exists(
    post: Post | None, post_id: str, action: str,
) -> PostNotFoundError | None:
    if post is None:
        return PostNotFoundError(post_id, action)
    return None


def check_owner(
    post: Post, caller: Principal, action: str,
) -> UnauthorizedError | None:
    """Rule: only the creator may update or delete a post."""
    if not post.is_owned_by(caller):
        return UnauthorizedError(
            action, ErrorContext(post_id=post.id, caller=str(caller)),
        )
    return None


def check_not_owner(post: Post, caller: Principal) -> ForbiddenError | None:
    """Rule: owners cannot like their own post."""
    if post.is_owned_by(caller):
        return ForbiddenError(
            ErrorContext(post_id=post.id, caller=str(caller)),
        )
    return None


def validate_owner_edit(
    post: Post | None, post_id: str, caller: Principal,
    action: str, content: PostContent | None = None,
) -> PostServiceError | None:
    """Chain existence, ownership and (optionally) content checks for update/delete."""
    error = check_exists(post, post_id, action)
    if error:
        return error
    error = check_owner(post, caller, action)
    if error:
        return error
    if content is not None:
        return check_content(content)
    return None


def validate_like(
    post: Post | None, post_id: str, caller: Principal,
) -> PostServiceError | None:
    return check_exists(post, post_id, "like") or check_not_owner(post, caller)


def validate_comment(
    post: Post | None, post_id: str, comment: str,
) -> PostServiceError | None:
    return check_exists(post, post_id, "comment on") or check_comment(comment)
