"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase

__all__ = ["AddCommentRequest", "AddCommentUseCase"]
