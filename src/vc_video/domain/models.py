"""Domain models for vc_video — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass, field

from src.vc_common.audit import AuditInfo


@dataclass
class Category:
    id: int
    name: str


@dataclass
class Channel:
    member_id: int
    channel_name: str
    subscribers: int = 0


@dataclass
class Video:
    id: int
    name: str
    price: int
    channel: Channel
    views: int = 0
    star: float = 0.0
    description: str | None = None
    categories: list[Category] = field(default_factory=list)
    audit: AuditInfo = field(default_factory=AuditInfo.now)


@dataclass
class VideoPage:
    """One page of a data-access query plus its pagination metadata."""

    content: list[Video]
    page: int
    size: int
    total_elements: int

    @property
    def video_ids(self) -> list[int]:
        return [v.id for v in self.content]
