"""Add comment use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel

from chirp.domain.model.comment import Comment
from chirp.domain.model.common import utcnow
from chirp.domain.service import PostService
from chirp.domain.service.post_service import normalize_comment_text
from chirp.domain.value import Caller, CommentId, PostId, parse_id

from chirp.application.usecase.post.views import PostView


class AddCommentRequest(BaseModel):
    """Add comment request."""

    caller: Caller
    post_id: str
    text: str


class AddCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize add comment use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: AddCommentRequest) -> PostView:
        """Execute add comment flow.

        Steps:
        1. Validate the post id and comment text
        2. Check the caller can see the post
        3. Append the comment with the caller's id, username and server time
        4. Return the post with the new comment at the end

        Args:
            request: Add comment request

        Returns:
            The post including the new comment

        Raises:
            ValidationError: If the id or the text is invalid
            NotFoundError: If the post doesn't exist or is hidden from the caller
        """
        post_id = parse_id(PostId, request.post_id, "post id")
        text = normalize_comment_text(request.text)
        caller = request.caller

        with logfire.span(
            "add_comment.execute", post_id=str(post_id), user_id=str(caller.user_id)
        ):
            await self.post_service.get_visible_post(post_id, caller.user_id)

            comment = Comment(
                id=CommentId(uuid4()),
                author_id=caller.user_id,
                author_username=caller.username,
                text=text,
                created_at=utcnow(),
            )
            await self.post_service.append_comment(post_id, comment)

            post = await self.post_service.get_visible_post(post_id, caller.user_id)
            return PostView.from_post(post, caller.user_id)
