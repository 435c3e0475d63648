"""Post Enforcement: tests for pure precondition checks.

Tests cover:
    - check_content flags every empty field
    - check_exists / check_owner / check_not_owner
    - validate_owner_edit ordering: NotFound, then Unauthorized, then InvalidInput
    - validate_like and validate_comment chains
"""

from datetime import datetime, timezone

from app.core.domain_types import Post, PostContent, PostId, Principal
from app.core.enforce_posts import (
    check_comment,
    check_content,
    check_exists,
    check_not_owner,
    check_owner,
    validate_comment,
    validate_like,
    validate_owner_edit,
)
from app.core.errors import (
    ForbiddenError,
    InvalidInputError,
    PostNotFoundError,
    UnauthorizedError,
)

ALICE = Principal("alice")
BOB = Principal("bob")
GOOD = PostContent(title="T", body="B", image_url="I")
EMPTY = PostContent(title="", body="", image_url="")


def _post() -> Post:
    return Post(
        id=PostId("p-1"), owner=ALICE, title="T", body="B", image_url="I",
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


# ─── check_content ───────────────────────────────────────────────

def test_check_content_accepts_complete_payload():
    assert check_content(GOOD) is None


def test_check_content_reports_all_missing_fields():
    error = check_content(EMPTY)
    assert isinstance(error, InvalidInputError)
    assert error.fields == ["title", "body", "imageURL"]
    assert error.message == "Missing required fields"
    assert error.http_status == 400


def test_check_content_flags_single_empty_field():
    error = check_content(PostContent(title="T", body="", image_url="I"))
    assert error.fields == ["body"]


def test_check_comment():
    assert check_comment("nice") is None
    assert isinstance(check_comment(""), InvalidInputError)


# ─── existence / ownership ──────────────────────────────────────

def test_check_exists_returns_not_found_for_none():
    error = check_exists(None, "missing", "update")
    assert isinstance(error, PostNotFoundError)
    assert error.message == "Couldn't update post with id=missing. Post not found"
    assert error.context.post_id == "missing"


def test_check_exists_passes_for_post():
    assert check_exists(_post(), "p-1", "update") is None


def test_check_owner_rejects_other_caller():
    error = check_owner(_post(), BOB, "delete")
    assert isinstance(error, UnauthorizedError)
    assert error.message == "Only the owner can delete the post"


def test_check_owner_accepts_owner():
    assert check_owner(_post(), ALICE, "delete") is None


def test_check_not_owner_forbids_self_like():
    error = check_not_owner(_post(), ALICE)
    assert isinstance(error, ForbiddenError)
    assert error.message == "Owners cannot like their own post"


def test_check_not_owner_allows_others():
    assert check_not_owner(_post(), BOB) is None


# ─── chains ─────────────────────────────────────────────────────

def test_validate_owner_edit_not_found_wins():
    error = validate_owner_edit(None, "x", BOB, "update", EMPTY)
    assert isinstance(error, PostNotFoundError)


def test_validate_owner_edit_ownership_before_input():
    error = validate_owner_edit(_post(), "p-1", BOB, "update", EMPTY)
    assert isinstance(error, UnauthorizedError)


def test_validate_owner_edit_checks_content_for_owner():
    error = validate_owner_edit(_post(), "p-1", ALICE, "update", EMPTY)
    assert isinstance(error, InvalidInputError)


def test_validate_owner_edit_without_content_passes_for_owner():
    assert validate_owner_edit(_post(), "p-1", ALICE, "delete") is None


def test_validate_like_chain():
    assert isinstance(validate_like(None, "x", BOB), PostNotFoundError)
    assert isinstance(validate_like(_post(), "p-1", ALICE), ForbiddenError)
    assert validate_like(_post(), "p-1", BOB) is None


def test_validate_comment_chain():
    assert isinstance(validate_comment(None, "x", "hi"), PostNotFoundError)
    assert isinstance(validate_comment(_post(), "p-1", ""), InvalidInputError)
    assert validate_comment(_post(), "p-1", "hi") is None
