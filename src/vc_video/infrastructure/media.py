"""Media URL provider backed by a static media host."""

from config.settings import settings
from src.vc_video.domain.models import Video


class StaticMediaUrlProvider:
    """Builds thumbnail and channel-avatar URLs under MEDIA_BASE_URL."""

    def __init__(self, base_url: str | None = None) -> None:
        self._base = (base_url or settings.MEDIA_BASE_URL).rstrip("/")

    def urls_for(self, videos: list[Video]) -> list[dict[str, str]]:
        return [
            {
                "thumbnailUrl": f"{self._base}/videos/{v.id}/thumbnail.png",
                "imageUrl": f"{self._base}/members/{v.channel.member_id}/profile.png",
            }
            for v in videos
        ]
