# src/vc_order/application/service.py
"""OrderApplicationService — order creation and cancellation flows.

The caller owns the db session and commits after a successful call.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from src.vc_common.errors import (
    OrderForbiddenError,
    OrderLineNotFoundError,
    OrderNotFoundError,
    VideoNotFoundError,
)
from src.vc_member.domain.models import Member
from src.vc_order.application.schemas import CreateOrderRequest, OrderResponse, RefundResponse
from src.vc_order.domain.models import Order
from src.vc_order.domain.repository import OrderRepositoryProtocol
from src.vc_video.domain.repository import VideoRepositoryProtocol

logger = logging.getLogger(__name__)


class OrderApplicationService:
    def __init__(
        self,
        order_repo: OrderRepositoryProtocol,
        video_repo: VideoRepositoryProtocol,
    ) -> None:
        self._orders = order_repo
        self._videos = video_repo

    async def create_order(
        self, req: CreateOrderRequest, member: Member, db: AsyncSession
    ) -> OrderResponse:
        video_ids = req.video_ids or []
        videos = await self._videos.get_by_ids(db, video_ids)
        found = {v.id for v in videos}
        missing = [vid for vid in video_ids if vid not in found]
        if missing:
            raise VideoNotFoundError(missing)

        by_id = {v.id: v for v in videos}
        order = Order.create(member, [by_id[vid] for vid in video_ids], req.reward)
        await self._orders.save(order, db)
        logger.info(
            "Order created: id=%s member=%s lines=%d total=%d",
            order.id, member.id, len(order.lines), order.total_pay_amount,
        )
        return OrderResponse.from_domain(order)

    async def cancel_order(
        self, order_id: str, member_id: int, db: AsyncSession
    ) -> RefundResponse:
        order = await self._load_owned(order_id, member_id, db)
        order.check_already_canceled()

        refund = order.cancel_all()
        await self._orders.save(order, db)
        logger.info(
            "Order canceled: id=%s refund_amount=%d refund_reward=%d",
            order.id, refund.refund_amount, refund.refund_reward,
        )
        return RefundResponse.from_domain(order, refund)

    async def cancel_order_line(
        self, order_id: str, line_id: str, member_id: int, db: AsyncSession
    ) -> RefundResponse:
        order = await self._load_owned(order_id, member_id, db)
        order.check_already_canceled()

        line = order.find_line(line_id)
        if line is None:
            raise OrderLineNotFoundError(order_id, line_id)
        line.ensure_not_canceled()

        refund = order.cancel_line(line)
        await self._orders.save(order, db)
        logger.info(
            "Order line canceled: order=%s line=%s refund_amount=%d refund_reward=%d",
            order.id, line.id, refund.refund_amount, refund.refund_reward,
        )
        return RefundResponse.from_domain(order, refund)

    async def _load_owned(self, order_id: str, member_id: int, db: AsyncSession) -> Order:
        order = await self._orders.get_by_id(order_id, db)
        if order is None:
            raise OrderNotFoundError(order_id)
        if order.member.id != member_id:
            raise OrderForbiddenError(order_id)
        return order
