# src/vc_video/domain/repository.py
"""Repository Protocols — dependency inversion for testability.

Unit tests inject mocks that conform to these Protocols; the query layer
that executes SQL lives outside this package.
"""

from dataclasses import dataclass
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.vc_video.domain.models import Video, VideoPage


@dataclass(frozen=True)
class VideoDataRequest:
    """Filtered, paginated listing request handed to the data-access layer."""

    login_member_id: int | None
    page: int
    size: int
    category_name: str | None
    sort: str | None
    subscribe: bool
    free: bool | None
    is_purchased: bool

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def limit(self) -> int:
        return self.size


class VideoRepositoryProtocol(Protocol):
    async def find_page(self, db: AsyncSession, request: VideoDataRequest) -> VideoPage: ...

    async def get_by_ids(self, db: AsyncSession, video_ids: list[int]) -> list[Video]: ...

    async def purchased_flags(
        self, db: AsyncSession, member_id: int, video_ids: list[int]
    ) -> list[bool]: ...

    async def subscribed_flags(
        self, db: AsyncSession, member_id: int, channel_member_ids: list[int]
    ) -> list[bool]: ...

    async def cart_video_ids(self, db: AsyncSession, member_id: int) -> list[int]: ...


class MediaUrlProviderProtocol(Protocol):
    def urls_for(self, videos: list[Video]) -> list[dict[str, str]]:
        """One {"thumbnailUrl", "imageUrl"} mapping per video, same order."""
        ...
