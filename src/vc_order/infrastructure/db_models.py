# src/vc_order/infrastructure/db_models.py
"""SQLAlchemy ORM models for orders and order_videos (DDL reference only)."""
from datetime import datetime

from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.vc_common.database import Base
from src.vc_common.enums import OrderStatus
from src.vc_order.domain.models import Order, OrderLine


class OrderORM(Base):
    __tablename__ = "orders"

    order_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    member_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    payment_key: Mapped[str | None] = mapped_column(String(200))
    total_pay_amount: Mapped[int] = mapped_column(Integer, nullable=False)
    remain_refund_amount: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    reward: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    remain_refund_reward: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    complete_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    order_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=OrderStatus.ORDERED.value
    )
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    modified_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    order_videos: Mapped[list["OrderVideoORM"]] = relationship(
        back_populates="order", cascade="all, delete-orphan"
    )


class OrderVideoORM(Base):
    __tablename__ = "order_videos"

    order_video_id: Mapped[str] = mapped_column(String(32), primary_key=True)
    order_id: Mapped[str] = mapped_column(ForeignKey("orders.order_id"), nullable=False)
    video_id: Mapped[int] = mapped_column(ForeignKey("videos.video_id"), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    order_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=OrderStatus.ORDERED.value
    )
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    modified_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    order: Mapped[OrderORM] = relationship(back_populates="order_videos")

    @classmethod
    def from_domain(cls, line: OrderLine) -> "OrderVideoORM":
        return cls(
            order_video_id=line.id,
            order_id=line.order_id,
            video_id=line.video.id,
            price=line.price,
            order_status=line.status.value,
            created_date=line.audit.created_at,
            modified_date=line.audit.updated_at,
        )


def order_to_orm(order: Order) -> OrderORM:
    """Map an Order aggregate and its lines to fresh ORM rows."""
    return OrderORM(
        order_id=order.id,
        member_id=order.member.id,
        payment_key=order.payment_key,
        total_pay_amount=order.total_pay_amount,
        remain_refund_amount=order.remain_refund_amount,
        reward=order.reward,
        remain_refund_reward=order.remain_refund_reward,
        complete_date=order.complete_date,
        order_status=order.status.value,
        created_date=order.audit.created_at,
        modified_date=order.audit.updated_at,
        order_videos=[OrderVideoORM.from_domain(line) for line in order.lines],
    )
