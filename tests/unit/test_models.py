"""
Unit tests for comment, error, result and state models.
"""

import pytest
from pydantic import ValidationError

from commentcard.models import (
    Comment,
    CommentView,
    ErrorCategory,
    ErrorKind,
    FetchResult,
    UIState,
    error_message,
    to_comment_view,
    to_comment_views,
)


@pytest.fixture
def sample_comment() -> Comment:
    """Create a comment whose body spans several lines."""
    return Comment(
        id=1,
        postId=1,
        name="id labore ex et quam laborum",
        email="Eliseo@gardner.biz",
        body="laudantium enim quasi est\nquidem magnam voluptate\r\nipsam eos",
    )


class TestComment:
    """Test the remote comment model."""

    def test_parses_api_field_names(self):
        """Test that postId from the JSON payload maps to post_id."""
        comment = Comment.model_validate(
            {"id": 3, "postId": 7, "name": "n", "email": "e", "body": "b"}
        )

        assert comment.post_id == 7
        assert comment.id == 3

    def test_is_immutable(self, sample_comment):
        """Test that a comment cannot be modified in place."""
        with pytest.raises(ValidationError):
            sample_comment.name = "changed"

    def test_rejects_missing_fields(self):
        """Test that a payload without a body is rejected."""
        with pytest.raises(ValidationError):
            Comment.model_validate({"id": 1, "postId": 1, "name": "n", "email": "e"})


class TestCommentView:
    """Test mapping comments to presentation views."""

    def test_collapses_line_breaks(self, sample_comment):
        """Test that every kind of line break becomes a single space."""
        view = to_comment_view(sample_comment)

        assert view.body == "laudantium enim quasi est quidem magnam voluptate ipsam eos"
        assert "\n" not in view.body
        assert "\r" not in view.body

    def test_copies_identity_fields(self, sample_comment):
        """Test that id, name and email are carried over unchanged."""
        view = to_comment_view(sample_comment)

        assert view.id == sample_comment.id
        assert view.name == sample_comment.name
        assert view.email == sample_comment.email
        assert view.avatar_ref is None

    def test_mapping_is_idempotent(self, sample_comment):
        """Test that mapping the same comment twice yields equal views."""
        assert to_comment_view(sample_comment) == to_comment_view(sample_comment)

    def test_normalized_body_is_stable(self, sample_comment):
        """Test that a normalized body survives another normalization pass."""
        view = to_comment_view(sample_comment)
        remapped = to_comment_view(sample_comment.model_copy(update={"body": view.body}))

        assert remapped == view

    def test_preserves_order(self):
        """Test that views keep the order of the fetched comments."""
        comments = [
            Comment(id=i, postId=1, name=f"n{i}", email="e", body="b")
            for i in (3, 1, 2)
        ]

        views = to_comment_views(comments)

        assert isinstance(views, tuple)
        assert [view.id for view in views] == [3, 1, 2]

    def test_with_avatar_returns_copy(self):
        """Test that attaching an avatar leaves the original view untouched."""
        view = CommentView(id=1, name="n", email="e", body="b")

        updated = view.with_avatar("file:///tmp/avatar.png")

        assert updated.avatar_ref == "file:///tmp/avatar.png"
        assert view.avatar_ref is None
        assert updated.model_copy(update={"avatar_ref": None}) == view


class TestErrorKind:
    """Test the error taxonomy."""

    def test_constructors_set_category(self):
        """Test that each constructor produces its category."""
        assert ErrorKind.not_found().category is ErrorCategory.NOT_FOUND
        assert ErrorKind.forbidden().category is ErrorCategory.FORBIDDEN
        assert ErrorKind.server_unavailable().category is ErrorCategory.SERVER_UNAVAILABLE
        assert ErrorKind.no_connectivity().category is ErrorCategory.NO_CONNECTIVITY
        assert ErrorKind.timeout().category is ErrorCategory.TIMEOUT
        assert ErrorKind.data_parsing().category is ErrorCategory.DATA_PARSING
        assert ErrorKind.unexpected(418).code == 418

    def test_equal_by_value(self):
        """Test that two errors of the same kind compare equal."""
        assert ErrorKind.not_found() == ErrorKind(category=ErrorCategory.NOT_FOUND)
        assert ErrorKind.unexpected(418) != ErrorKind.unexpected()

    def test_code_only_allowed_for_unexpected(self):
        """Test that a status code cannot be attached to other categories."""
        with pytest.raises(ValidationError):
            ErrorKind(category=ErrorCategory.NOT_FOUND, code=404)


class TestErrorMessage:
    """Test the error to message mapping."""

    @pytest.mark.parametrize("category", list(ErrorCategory))
    def test_every_category_has_message(self, category):
        """Test that the mapping is total."""
        message = error_message(ErrorKind(category=category))

        assert isinstance(message, str)
        assert message

    def test_not_found_message(self):
        """Test the not found message."""
        assert error_message(ErrorKind.not_found()) == "The requested content could not be found."

    def test_unexpected_with_code_includes_code(self):
        """Test that an unexpected status code is shown to the user."""
        assert "418" in error_message(ErrorKind.unexpected(418))

    def test_unexpected_without_code(self):
        """Test the catch-all message."""
        assert error_message(ErrorKind.unexpected()) == "An unexpected error occurred."


class TestFetchResult:
    """Test the fetch result model."""

    def test_success(self):
        """Test building a successful result."""
        comment = Comment(id=1, postId=1, name="n", email="e", body="b")

        result = FetchResult.success([comment])

        assert result.is_success
        assert result.comments == (comment,)
        assert result.error is None

    def test_success_with_no_comments(self):
        """Test that an empty list is still a success."""
        result = FetchResult.success([])

        assert result.is_success
        assert result.comments == ()

    def test_failure(self):
        """Test building a failed result."""
        result = FetchResult.failure(ErrorKind.timeout())

        assert not result.is_success
        assert result.comments is None
        assert result.error == ErrorKind.timeout()

    def test_rejects_both_outcomes(self):
        """Test that a result cannot hold comments and an error."""
        with pytest.raises(ValidationError):
            FetchResult(comments=(), error=ErrorKind.timeout())

    def test_rejects_no_outcome(self):
        """Test that a result must hold one outcome."""
        with pytest.raises(ValidationError):
            FetchResult()


class TestUIState:
    """Test the UI state snapshot."""

    def test_initial_state(self):
        """Test the default snapshot."""
        state = UIState()

        assert state.is_loading is False
        assert state.comments == ()
        assert state.error is None

    def test_is_immutable(self):
        """Test that a snapshot cannot be modified in place."""
        state = UIState()

        with pytest.raises(ValidationError):
            state.is_loading = True

    def test_find_comment(self):
        """Test looking up a displayed comment by id."""
        view = CommentView(id=5, name="n", email="e", body="b")
        state = UIState(comments=(view,))

        assert state.find_comment(5) == view
        assert state.find_comment(6) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
