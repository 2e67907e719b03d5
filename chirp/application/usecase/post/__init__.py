"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsUseCase
from .list_user_posts import ListUserPostsRequest, ListUserPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase
from .views import CommentView, PostListResponse, PostView

__all__ = [
    "CommentView",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsUseCase",
    "ListUserPostsRequest",
    "ListUserPostsUseCase",
    "PostListResponse",
    "PostView",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
