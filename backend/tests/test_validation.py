"""Content validation rules."""

import pytest

from forum_app.core.errors import ErrorKind, ValidationError
from forum_app.models.forum import ForumThread, Post, Reply
from forum_app.modules.forum.validation import validate_post, validate_reply, validate_thread

# ==================== Threads ====================


@pytest.mark.parametrize("title", [None, "", "   ", "\t\n"])
def test_thread_title_required(title):
    with pytest.raises(ValidationError, match="Thread title cannot be empty."):
        validate_thread(ForumThread(title=title))


def test_thread_title_boundary():
    validate_thread(ForumThread(title="t" * 100))

    with pytest.raises(ValidationError, match="cannot exceed 100 characters"):
        validate_thread(ForumThread(title="t" * 101))


def test_thread_content_optional_with_boundary():
    validate_thread(ForumThread(title="ok", content=None))
    validate_thread(ForumThread(title="ok", content=""))
    validate_thread(ForumThread(title="ok", content="c" * 5000))

    with pytest.raises(ValidationError, match="Thread content cannot exceed 5000"):
        validate_thread(ForumThread(title="ok", content="c" * 5001))


def test_missing_thread_rejected():
    with pytest.raises(ValidationError):
        validate_thread(None)


# ==================== Posts / Replies ====================


@pytest.mark.parametrize(
    ("validate", "model", "label"),
    [(validate_post, Post, "Post"), (validate_reply, Reply, "Reply")],
)
def test_message_content_rules(validate, model, label):
    for blank in (None, "", "  "):
        with pytest.raises(ValidationError, match=f"{label} content cannot be empty."):
            validate(model(content=blank))

    validate(model(content="x" * 5000))

    with pytest.raises(ValidationError, match=f"{label} content cannot exceed 5000"):
        validate(model(content="x" * 5001))


def test_validation_error_kind():
    with pytest.raises(ValidationError) as exc_info:
        validate_post(Post(content=""))
    assert exc_info.value.kind is ErrorKind.VALIDATION
