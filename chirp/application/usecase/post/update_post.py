"""Update post use case."""

import logfire
from pydantic import BaseModel

from chirp.domain.error import ForbiddenError, NotFoundError, ValidationError
from chirp.domain.model.common import utcnow
from chirp.domain.service import PostService
from chirp.domain.service.post_service import normalize_content
from chirp.domain.value import Caller, PostId, parse_id

from .views import PostView


class UpdatePostRequest(BaseModel):
    """Update post request.

    At least one of content and is_public must be given.
    """

    caller: Caller
    post_id: str
    content: str | None = None
    is_public: bool | None = None


class UpdatePostUseCase:
    """Use case for editing a post's content or visibility."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostView:
        """Execute update post flow.

        Args:
            request: Update post request

        Returns:
            Updated post

        Raises:
            ValidationError: If the id or new content is invalid, or nothing
                to update was given
            NotFoundError: If the post doesn't exist
            ForbiddenError: If the caller doesn't own the post
        """
        post_id = parse_id(PostId, request.post_id, "post id")
        caller = request.caller

        # 1. Validate input before touching the store
        if request.content is None and request.is_public is None:
            raise ValidationError("Nothing to update")

        changes: dict = {}
        if request.content is not None:
            changes["content"] = normalize_content(request.content)
        if request.is_public is not None:
            changes["is_public"] = request.is_public

        # 2. Retrieve existing post
        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", request.post_id)

        # 3. Check authorization (caller owns post)
        if not post.is_owned_by(caller.user_id):
            logfire.warn(
                "Post update rejected",
                post_id=request.post_id,
                user_id=str(caller.user_id),
            )
            raise ForbiddenError("post", request.post_id, str(caller.user_id))

        # 4. Apply changes; created_at and author fields stay as they are
        changes["updated_at"] = utcnow()
        updated_post = await self.post_service.save_post(post.model_copy(update=changes))

        return PostView.from_post(updated_post, caller.user_id)
