"""Like use cases."""

from .toggle_like import ToggleLikeRequest, ToggleLikeUseCase

__all__ = ["ToggleLikeRequest", "ToggleLikeUseCase"]
