"""Create post use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel

from chirp.domain.model.common import utcnow
from chirp.domain.model.post import Post
from chirp.domain.service import PostService
from chirp.domain.service.post_service import normalize_content
from chirp.domain.value import Caller, PostId

from .views import PostView


class CreatePostRequest(BaseModel):
    """Create post request."""

    caller: Caller
    content: str
    is_public: bool = True


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Steps:
        1. Trim and validate the content
        2. Build the Post owned by the caller, snapshotting their username
        3. Save post (via PostService)

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValidationError: If the content is empty or too long
        """
        content = normalize_content(request.content)
        caller = request.caller

        with logfire.span(
            "create_post.execute",
            author_id=str(caller.user_id),
            is_public=request.is_public,
        ):
            now = utcnow()
            post = Post(
                id=PostId(uuid4()),
                author_id=caller.user_id,
                author_username=caller.username,
                content=content,
                is_public=request.is_public,
                created_at=now,
                updated_at=now,
            )

            saved_post = await self.post_service.save_post(post)

            logfire.info("Post created successfully", post_id=str(saved_post.id))

            return PostView.from_post(saved_post, caller.user_id)
