"""Pydantic schemas for the catalog listing.

JSON keys are camelCase (alias generator); Python attributes stay snake_case.

Page assembly merges four per-viewer lookups into the video page:
  purchased / subscribed / urls  -> aligned by index with page.content
  cart_video_ids                 -> membership test on video id
"""

from collections.abc import Collection, Mapping, Sequence

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.vc_common.errors import CatalogLookupMismatchError
from src.vc_video.domain.models import Category, Channel, Video, VideoPage


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class CategoryOut(_CamelModel):
    category_id: int
    category_name: str

    @classmethod
    def from_domain(cls, c: Category) -> "CategoryOut":
        return cls(category_id=c.id, category_name=c.name)


class ChannelOut(_CamelModel):
    member_id: int
    channel_name: str
    subscribes: int
    is_subscribed: bool
    image_url: str | None

    @classmethod
    def from_domain(cls, ch: Channel, is_subscribed: bool, image_url: str | None) -> "ChannelOut":
        return cls(
            member_id=ch.member_id,
            channel_name=ch.channel_name,
            subscribes=ch.subscribers,
            is_subscribed=is_subscribed,
            image_url=image_url,
        )


class CatalogPage(_CamelModel):
    """One display-ready row of the catalog listing."""

    video_id: int
    video_name: str
    thumbnail_url: str | None
    views: int
    price: int
    star: float
    is_purchased: bool
    is_in_cart: bool
    description: str | None
    categories: list[CategoryOut]
    channel: ChannelOut
    created_date: str

    @classmethod
    def from_video(
        cls,
        video: Video,
        is_purchased: bool,
        is_subscribed: bool,
        urls: Mapping[str, str],
        is_in_cart: bool,
    ) -> "CatalogPage":
        return cls(
            video_id=video.id,
            video_name=video.name,
            thumbnail_url=urls.get("thumbnailUrl"),
            views=video.views,
            price=video.price,
            star=video.star,
            is_purchased=is_purchased,
            is_in_cart=is_in_cart,
            description=video.description,
            categories=[CategoryOut.from_domain(c) for c in video.categories],
            channel=ChannelOut.from_domain(video.channel, is_subscribed, urls.get("imageUrl")),
            created_date=video.audit.created_at.isoformat(),
        )


class CatalogPageResponse(_CamelModel):
    content: list[CatalogPage]
    page: int
    size: int
    total_elements: int
    total_pages: int
    has_next: bool

    @classmethod
    def of(
        cls,
        videos: VideoPage,
        purchased: Sequence[bool],
        subscribed: Sequence[bool],
        urls: Sequence[Mapping[str, str]],
        cart_video_ids: Collection[int],
    ) -> "CatalogPageResponse":
        expected = len(videos.content)
        for name, lookup in (("purchased", purchased), ("subscribed", subscribed), ("urls", urls)):
            if len(lookup) != expected:
                raise CatalogLookupMismatchError(name, expected, len(lookup))

        in_cart = set(cart_video_ids)
        rows = [
            CatalogPage.from_video(video, is_purchased, is_subscribed, url_map, video.id in in_cart)
            for video, is_purchased, is_subscribed, url_map in zip(
                videos.content, purchased, subscribed, urls
            )
        ]

        total_pages = -(-videos.total_elements // videos.size) if videos.size else 0
        return cls(
            content=rows,
            page=videos.page,
            size=videos.size,
            total_elements=videos.total_elements,
            total_pages=total_pages,
            has_next=videos.page + 1 < total_pages,
        )
