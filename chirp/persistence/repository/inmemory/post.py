"""In-memory post repository for testing."""

from typing import Optional

from chirp.domain.error import NotFoundError
from chirp.domain.model.comment import Comment
from chirp.domain.model.post import Post
from chirp.domain.repository.post import PostRepository
from chirp.domain.value import PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Dict insertion order stands in for the database's seq column.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    @staticmethod
    def _newest_first(posts: list[Post]) -> list[Post]:
        # sort() is stable with reverse=True, ties keep insertion order
        return sorted(posts, key=lambda p: p.created_at, reverse=True)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(
        self,
        public_only: bool = True,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts, newest first."""
        posts = [p for p in self._posts.values() if p.is_public or not public_only]
        return self._newest_first(posts)[offset : offset + limit]

    async def count(self, public_only: bool = True) -> int:
        """Count posts."""
        return sum(1 for p in self._posts.values() if p.is_public or not public_only)

    async def find_by_author(
        self,
        author_id: UserId,
        include_private: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts by a specific author, newest first."""
        posts = [
            p
            for p in self._posts.values()
            if p.author_id == author_id and (p.is_public or include_private)
        ]
        return self._newest_first(posts)[offset : offset + limit]

    async def count_by_author(
        self, author_id: UserId, include_private: bool = False
    ) -> int:
        """Count posts by a specific author."""
        return sum(
            1
            for p in self._posts.values()
            if p.author_id == author_id and (p.is_public or include_private)
        )

    async def save(self, post: Post) -> Post:
        """Save or update a post, keeping stored likes and comments."""
        existing = self._posts.get(post.id)
        if existing is not None:
            post = post.model_copy(
                update={"likes": existing.likes, "comments": existing.comments}
            )
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None

    async def toggle_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Add or remove a user's like."""
        post = self._get_or_raise(post_id)
        if user_id in post.likes:
            likes = tuple(u for u in post.likes if u != user_id)
            liked = False
        else:
            likes = post.likes + (user_id,)
            liked = True
        self._posts[post_id] = post.model_copy(update={"likes": likes})
        return liked

    async def append_comment(self, post_id: PostId, comment: Comment) -> Comment:
        """Append a comment to a post."""
        post = self._get_or_raise(post_id)
        self._posts[post_id] = post.model_copy(
            update={"comments": post.comments + (comment,)}
        )
        return comment

    def _get_or_raise(self, post_id: PostId) -> Post:
        post = self._posts.get(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post
