"""HTTP layer for todo lists."""

from .routes import router

__all__ = ["router"]
