"""Response models for posts and comments."""

from datetime import datetime

from pydantic import BaseModel

from chirp.domain.model import Comment, Post
from chirp.domain.value import UserId


class CommentView(BaseModel):
    """A comment as returned by the API."""

    id: str
    author_id: str
    author_username: str
    text: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentView":
        return cls(
            id=str(comment.id),
            author_id=str(comment.author_id),
            author_username=comment.author_username,
            text=comment.text,
            created_at=comment.created_at,
        )


class PostView(BaseModel):
    """A post as seen by a particular caller."""

    id: str
    author_id: str
    author_username: str
    content: str
    is_public: bool
    likes: list[str]
    like_count: int
    liked_by_me: bool
    comments: list[CommentView]
    comment_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post, viewer_id: UserId) -> "PostView":
        return cls(
            id=str(post.id),
            author_id=str(post.author_id),
            author_username=post.author_username,
            content=post.content,
            is_public=post.is_public,
            likes=[str(user_id) for user_id in post.likes],
            like_count=len(post.likes),
            liked_by_me=post.is_liked_by(viewer_id),
            comments=[CommentView.from_comment(c) for c in post.comments],
            comment_count=len(post.comments),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class PostListResponse(BaseModel):
    """One page of posts."""

    posts: list[PostView]
    total: int
    limit: int
    offset: int
