"""Version 1 API routers."""

from . import health, similarity

__all__ = ["health", "similarity"]
