# src/vc_order/application/schemas.py
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.vc_common.enums import OrderStatus
from src.vc_common.validation import EachPositive
from src.vc_order.domain.models import Order, OrderLine, Refund


class CreateOrderRequest(BaseModel):
    video_ids: EachPositive
    reward: int = Field(0, ge=0)

    @field_validator("video_ids")
    @classmethod
    def not_empty(cls, v: list[int] | None) -> list[int]:
        if not v:
            raise ValueError("video_ids must not be empty")
        if len(set(v)) != len(v):
            raise ValueError("video_ids must not contain duplicates")
        return v


class OrderLineResponse(BaseModel):
    id: str
    video_id: int
    video_name: str
    price: int
    status: OrderStatus

    @classmethod
    def from_domain(cls, line: OrderLine) -> "OrderLineResponse":
        return cls(
            id=line.id,
            video_id=line.video.id,
            video_name=line.video.name,
            price=line.price,
            status=line.status,
        )


class OrderResponse(BaseModel):
    id: str
    member_id: int
    total_pay_amount: int
    reward: int
    status: OrderStatus
    lines: list[OrderLineResponse]
    payment_key: str | None = None
    complete_date: datetime | None = None
    created_at: datetime

    @classmethod
    def from_domain(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            member_id=order.member.id,
            total_pay_amount=order.total_pay_amount,
            reward=order.reward,
            status=order.status,
            lines=[OrderLineResponse.from_domain(line) for line in order.lines],
            payment_key=order.payment_key,
            complete_date=order.complete_date,
            created_at=order.audit.created_at,
        )


class RefundResponse(BaseModel):
    order_id: str
    order_status: OrderStatus
    refund_amount: int
    refund_reward: int

    @classmethod
    def from_domain(cls, order: Order, refund: Refund) -> "RefundResponse":
        return cls(
            order_id=order.id,
            order_status=order.status,
            refund_amount=refund.refund_amount,
            refund_reward=refund.refund_reward,
        )
