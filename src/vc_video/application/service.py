"""CatalogApplicationService — composes the paginated catalog listing.

Read-only; the caller owns the db session and its transaction.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from src.vc_video.application.queries import CatalogFilterQuery
from src.vc_video.application.schemas import CatalogPageResponse
from src.vc_video.domain.models import VideoPage
from src.vc_video.domain.repository import MediaUrlProviderProtocol, VideoRepositoryProtocol
from src.vc_video.infrastructure.cache import CatalogCache, cache_key
from src.vc_video.infrastructure.media import StaticMediaUrlProvider

logger = logging.getLogger(__name__)


class CatalogApplicationService:
    def __init__(
        self,
        repo: VideoRepositoryProtocol,
        media: MediaUrlProviderProtocol | None = None,
        cache: CatalogCache | None = None,
    ) -> None:
        self._repo = repo
        self._media: MediaUrlProviderProtocol = media or StaticMediaUrlProvider()
        self._cache = cache

    async def list_videos(self, db: AsyncSession, query: CatalogFilterQuery) -> CatalogPageResponse:
        videos = await self._load_page(db, query)
        member_id = query.login_member_id

        if member_id is None:
            purchased = [False] * len(videos.content)
            subscribed = [False] * len(videos.content)
            cart_ids: list[int] = []
        else:
            purchased = await self._repo.purchased_flags(db, member_id, videos.video_ids)
            subscribed = await self._repo.subscribed_flags(
                db, member_id, [v.channel.member_id for v in videos.content]
            )
            cart_ids = await self._repo.cart_video_ids(db, member_id)

        urls = self._media.urls_for(videos.content)
        return CatalogPageResponse.of(videos, purchased, subscribed, urls, cart_ids)

    async def _load_page(self, db: AsyncSession, query: CatalogFilterQuery) -> VideoPage:
        if self._cache is None or not query.is_default():
            return await self._repo.find_page(db, query.to_data_request())

        data_request = query.to_data_request()
        key = cache_key(data_request.page, data_request.category_name, data_request.sort)
        cached = await self._cache.get_page(key)
        if cached is not None:
            logger.debug("Catalog cache hit: key=%s", key)
            return cached

        page = await self._repo.find_page(db, data_request)
        await self._cache.put_page(key, page)
        logger.info("Catalog cache filled: %s total=%d", query, page.total_elements)
        return page
