"""Post domain service."""

import logfire

from chirp.domain.error import NotFoundError, ValidationError
from chirp.domain.model.comment import MAX_COMMENT_LENGTH, Comment
from chirp.domain.model.post import MAX_CONTENT_LENGTH, Post
from chirp.domain.repository import PostRepository
from chirp.domain.value import PostId, UserId

from .base import Service

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def normalize_content(content: str) -> str:
    """Trim post content and check its length.

    Raises:
        ValidationError: If the trimmed content is empty or too long
    """
    content = content.strip()
    if not content:
        raise ValidationError("Content is required")
    if len(content) > MAX_CONTENT_LENGTH:
        raise ValidationError(
            f"Content must be at most {MAX_CONTENT_LENGTH} characters"
        )
    return content


def normalize_comment_text(text: str) -> str:
    """Trim comment text and check its length.

    Raises:
        ValidationError: If the trimmed text is empty or too long
    """
    text = text.strip()
    if not text:
        raise ValidationError("Comment text is required")
    if len(text) > MAX_COMMENT_LENGTH:
        raise ValidationError(
            f"Comment must be at most {MAX_COMMENT_LENGTH} characters"
        )
    return text


def normalize_pagination(limit: int | None, offset: int | None) -> tuple[int, int]:
    """Clamp limit to 1..MAX_PAGE_SIZE and check the offset.

    Raises:
        ValidationError: If offset is negative
    """
    if limit is None:
        limit = DEFAULT_PAGE_SIZE
    limit = max(1, min(limit, MAX_PAGE_SIZE))

    if offset is None:
        offset = 0
    if offset < 0:
        raise ValidationError("Offset must be zero or greater")

    return limit, offset


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span("post_service.save_post", post_id=str(post.id)):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if not post:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_visible_post(self, post_id: PostId, viewer_id: UserId) -> Post:
        """Get a post the viewer is allowed to see.

        Another user's private post is reported as missing so that its
        existence isn't revealed.

        Args:
            post_id: Post ID
            viewer_id: User asking for the post

        Returns:
            The post

        Raises:
            NotFoundError: If the post doesn't exist or is hidden from the viewer
        """
        post = await self.get_post_by_id(post_id)
        if post is None or not post.is_visible_to(viewer_id):
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_public(self, limit: int, offset: int) -> tuple[list[Post], int]:
        """List public posts, newest first.

        Args:
            limit: Page size (already clamped)
            offset: Number of posts to skip

        Returns:
            Page of posts and the total number of public posts
        """
        with logfire.span("post_service.list_public", limit=limit, offset=offset):
            posts = await self.post_repository.find_all(
                public_only=True, limit=limit, offset=offset
            )
            total = await self.post_repository.count(public_only=True)
            logfire.info("Listed public posts", count=len(posts), total=total)
            return posts, total

    async def list_by_author(
        self, author_id: UserId, include_private: bool, limit: int, offset: int
    ) -> tuple[list[Post], int]:
        """List an author's posts, newest first.

        Args:
            author_id: Author whose posts to list
            include_private: Whether private posts are included
            limit: Page size (already clamped)
            offset: Number of posts to skip

        Returns:
            Page of posts and the total number of matching posts
        """
        with logfire.span(
            "post_service.list_by_author",
            author_id=str(author_id),
            include_private=include_private,
        ):
            posts = await self.post_repository.find_by_author(
                author_id, include_private=include_private, limit=limit, offset=offset
            )
            total = await self.post_repository.count_by_author(
                author_id, include_private=include_private
            )
            logfire.info(
                "Listed author posts",
                author_id=str(author_id),
                count=len(posts),
                total=total,
            )
            return posts, total

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post with its likes and comments.

        Raises:
            NotFoundError: If the post no longer exists
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            deleted = await self.post_repository.delete(post_id)
            if not deleted:
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post deleted", post_id=str(post_id))

    async def toggle_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Add the user's like, or remove it if already present.

        Args:
            post_id: Post ID
            user_id: User toggling the like

        Returns:
            True if the post is now liked by the user
        """
        with logfire.span(
            "post_service.toggle_like", post_id=str(post_id), user_id=str(user_id)
        ):
            liked = await self.post_repository.toggle_like(post_id, user_id)
            logfire.info(
                "Like toggled", post_id=str(post_id), user_id=str(user_id), liked=liked
            )
            return liked

    async def append_comment(self, post_id: PostId, comment: Comment) -> Comment:
        """Append a comment to a post.

        Args:
            post_id: Post ID
            comment: Comment to append

        Returns:
            The stored comment
        """
        with logfire.span(
            "post_service.append_comment",
            post_id=str(post_id),
            comment_id=str(comment.id),
        ):
            saved = await self.post_repository.append_comment(post_id, comment)
            logfire.info(
                "Comment added", post_id=str(post_id), comment_id=str(saved.id)
            )
            return saved
