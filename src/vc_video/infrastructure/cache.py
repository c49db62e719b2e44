"""Redis cache for the default catalog listing.

Only the viewer-independent ``VideoPage`` is cached; purchase, subscription
and cart overlays are recomputed per request. Redis being unreachable
degrades to a cache miss.

Key: f"catalog:default:{page}:{category or '*'}:{sort or '*'}"
"""

import logging

import redis.asyncio as aioredis
from pydantic import TypeAdapter, ValidationError
from redis.exceptions import RedisError

from config.settings import settings
from src.vc_video.domain.models import VideoPage

logger = logging.getLogger(__name__)

_PAGE_ADAPTER = TypeAdapter(VideoPage)


def cache_key(page: int, category_name: str | None, sort: str | None) -> str:
    return f"catalog:default:{page}:{category_name or '*'}:{sort or '*'}"


class CatalogCache:
    def __init__(self, redis: aioredis.Redis, ttl_seconds: int | None = None) -> None:
        self._redis = redis
        self._ttl = ttl_seconds if ttl_seconds is not None else settings.CATALOG_CACHE_TTL_SECONDS

    async def get_page(self, key: str) -> VideoPage | None:
        try:
            raw = await self._redis.get(key)
        except RedisError as e:
            logger.warning("Catalog cache read failed: key=%s err=%s", key, e)
            return None
        if raw is None:
            return None
        try:
            return _PAGE_ADAPTER.validate_json(raw)
        except ValidationError:
            logger.warning("Dropping unreadable catalog cache entry: key=%s", key)
            await self._redis.delete(key)
            return None

    async def put_page(self, key: str, page: VideoPage) -> None:
        try:
            await self._redis.set(key, _PAGE_ADAPTER.dump_json(page), ex=self._ttl)
        except RedisError as e:
            logger.warning("Catalog cache write failed: key=%s err=%s", key, e)
