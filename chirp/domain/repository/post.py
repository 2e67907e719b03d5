"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from chirp.domain.model.comment import Comment
from chirp.domain.model.post import Post
from chirp.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.

    Listings are ordered by created_at descending. Posts created at the same
    instant keep the order in which they were stored.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, including its likes and comments.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        public_only: bool = True,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts, newest first.

        Args:
            public_only: Whether to leave out private posts
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, public_only: bool = True) -> int:
        """Count posts.

        Args:
            public_only: Whether to leave out private posts

        Returns:
            Total number of posts matching the criteria
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        include_private: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts by a specific author, newest first.

        Args:
            author_id: The author's user ID
            include_private: Whether to include the author's private posts
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts by the author
        """
        pass

    @abstractmethod
    async def count_by_author(
        self, author_id: UserId, include_private: bool = False
    ) -> int:
        """Count posts by a specific author.

        Args:
            author_id: The author's user ID
            include_private: Whether to include the author's private posts

        Returns:
            Total number of posts by the author
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Only the post's own fields are written; likes and comments are
        changed through toggle_like and append_comment.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post together with its likes and comments.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was removed, False if it didn't exist
        """
        pass

    @abstractmethod
    async def toggle_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Atomically add or remove a user's like.

        Args:
            post_id: The post ID
            user_id: The user toggling the like

        Returns:
            True if the post is now liked by the user, False if the like
            was removed
        """
        pass

    @abstractmethod
    async def append_comment(self, post_id: PostId, comment: Comment) -> Comment:
        """Atomically append a comment to a post.

        Args:
            post_id: The post ID
            comment: The comment to append

        Returns:
            The stored comment
        """
        pass
