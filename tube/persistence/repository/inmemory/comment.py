"""In-memory comment repository for testing."""

from typing import Optional

from tube.domain.model.comment import Comment
from tube.domain.repository.comment import CommentRepository
from tube.domain.value import CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment. Existing counters are kept on update."""
        existing = self._comments.get(comment.id)
        if existing:
            comment = existing.model_copy(update={"content": comment.content})
        self._comments[comment.id] = comment
        return comment

    def snapshot(self) -> dict[CommentId, Comment]:
        """Copy of the current state (models are immutable)."""
        return dict(self._comments)

    def restore(self, state: dict[CommentId, Comment]) -> None:
        """Reset to a snapshot."""
        self._comments = dict(state)
