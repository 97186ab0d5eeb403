"""In-process repository implementations."""

from mgnrega.repositories.memory.cache_repo import InMemoryCacheRepository

__all__ = ["InMemoryCacheRepository"]
