"""Get post use case."""

from pydantic import BaseModel

from chirp.domain.service import PostService
from chirp.domain.value import Caller, PostId, parse_id

from .views import PostView


class GetPostRequest(BaseModel):
    """Get post request."""

    caller: Caller
    post_id: str


class GetPostUseCase:
    """Use case for getting a single post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Load a post the caller can see.

        Raises:
            ValidationError: If the post id is malformed
            NotFoundError: If the post doesn't exist or is another user's
                private post
        """
        post_id = parse_id(PostId, request.post_id, "post id")
        post = await self.post_service.get_visible_post(post_id, request.caller.user_id)
        return PostView.from_post(post, request.caller.user_id)
