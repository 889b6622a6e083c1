from .base import GeneCacheClient

__all__ = ["GeneCacheClient"]
