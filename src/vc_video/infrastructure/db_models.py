"""SQLAlchemy ORM models for videos, channels and categories.

DDL reference; alembic/versions/001_create_catalog.py is authoritative.
"""

from datetime import datetime

from sqlalchemy import BigInteger, Column, DateTime, Float, ForeignKey, Integer, String, Table, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.vc_common.audit import AuditInfo
from src.vc_common.database import Base
from src.vc_video.domain.models import Category, Channel, Video

video_categories = Table(
    "video_categories",
    Base.metadata,
    Column("video_id", BigInteger, ForeignKey("videos.video_id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", BigInteger, ForeignKey("categories.category_id"), primary_key=True),
)


class CategoryORM(Base):
    __tablename__ = "categories"

    category_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    category_name: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)


class ChannelORM(Base):
    __tablename__ = "channels"

    channel_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    member_id: Mapped[int] = mapped_column(BigInteger, nullable=False, unique=True)
    channel_name: Mapped[str] = mapped_column(String(100), nullable=False)
    subscribers: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class VideoORM(Base):
    __tablename__ = "videos"

    video_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    video_name: Mapped[str] = mapped_column(String(200), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    view: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    star: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    description: Mapped[str | None] = mapped_column(Text)
    channel_id: Mapped[int] = mapped_column(ForeignKey("channels.channel_id"), nullable=False)
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    modified_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    channel: Mapped[ChannelORM] = relationship(lazy="joined")
    categories: Mapped[list[CategoryORM]] = relationship(secondary=video_categories, lazy="selectin")

    def to_domain(self) -> Video:
        return Video(
            id=self.video_id,
            name=self.video_name,
            price=self.price,
            views=self.view,
            star=self.star,
            description=self.description,
            channel=Channel(
                member_id=self.channel.member_id,
                channel_name=self.channel.channel_name,
                subscribers=self.channel.subscribers,
            ),
            categories=[Category(id=c.category_id, name=c.category_name) for c in self.categories],
            audit=AuditInfo(created_at=self.created_date, updated_at=self.modified_date),
        )
