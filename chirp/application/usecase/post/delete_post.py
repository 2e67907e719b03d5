"""Delete post use case."""

import logfire
from pydantic import BaseModel

from chirp.domain.error import ForbiddenError, NotFoundError
from chirp.domain.service import PostService
from chirp.domain.value import Caller, PostId, parse_id


class DeletePostRequest(BaseModel):
    """Delete post request."""

    caller: Caller
    post_id: str


class DeletePostResponse(BaseModel):
    """Delete post response."""

    message: str = "Post deleted"
    post_id: str


class DeletePostUseCase:
    """Use case for deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Delete a post owned by the caller.

        Raises:
            ValidationError: If the post id is malformed
            NotFoundError: If the post doesn't exist
            ForbiddenError: If the caller doesn't own the post
        """
        post_id = parse_id(PostId, request.post_id, "post id")
        caller = request.caller

        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", request.post_id)

        if not post.is_owned_by(caller.user_id):
            logfire.warn(
                "Post delete rejected",
                post_id=request.post_id,
                user_id=str(caller.user_id),
            )
            raise ForbiddenError("post", request.post_id, str(caller.user_id))

        await self.post_service.delete_post(post_id)

        return DeletePostResponse(post_id=str(post_id))
