# tests/unit/test_order_service.py
"""Unit tests for OrderApplicationService using mock repositories."""
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.vc_common.enums import OrderStatus
from src.vc_common.errors import (
    OrderAlreadyCanceledError,
    OrderForbiddenError,
    OrderLineNotFoundError,
    OrderNotFoundError,
    RewardExceedError,
    VideoNotFoundError,
)
from src.vc_member.domain.models import Member
from src.vc_order.application.schemas import CreateOrderRequest
from src.vc_order.application.service import OrderApplicationService
from src.vc_order.domain.models import Order
from src.vc_video.domain.models import Channel, Video


def _make_video(video_id: int, price: int = 1000) -> Video:
    return Video(
        id=video_id, name=f"video-{video_id}", price=price,
        channel=Channel(member_id=77, channel_name="ch"),
    )


def _completed_order(member: Member, reward: int = 0) -> Order:
    order = Order.create(member, [_make_video(1), _make_video(2)], reward)
    order.complete_order(datetime.now(UTC), "paymentKey")
    return order


@pytest.fixture
def db():
    return MagicMock()


@pytest.fixture
def order_repo():
    repo = MagicMock()
    repo.save = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def video_repo():
    repo = MagicMock()
    repo.get_by_ids = AsyncMock(return_value=[])
    return repo


class TestCreateOrder:
    @pytest.mark.asyncio
    async def test_creates_and_saves(self, db, order_repo, video_repo):
        # repository order differs from request order
        video_repo.get_by_ids = AsyncMock(return_value=[_make_video(2, 300), _make_video(1, 500)])
        svc = OrderApplicationService(order_repo, video_repo)
        member = Member(id=5, reward=100)

        resp = await svc.create_order(CreateOrderRequest(video_ids=[1, 2], reward=100), member, db)

        assert resp.member_id == 5
        assert resp.total_pay_amount == 700
        assert [ln.video_id for ln in resp.lines] == [1, 2]
        assert [ln.price for ln in resp.lines] == [500, 300]
        order_repo.save.assert_awaited_once()
        saved = order_repo.save.call_args.args[0]
        assert saved.id == resp.id

    @pytest.mark.asyncio
    async def test_missing_video_raises(self, db, order_repo, video_repo):
        video_repo.get_by_ids = AsyncMock(return_value=[_make_video(1)])
        svc = OrderApplicationService(order_repo, video_repo)

        with pytest.raises(VideoNotFoundError) as exc_info:
            await svc.create_order(CreateOrderRequest(video_ids=[1, 3]), Member(id=5), db)

        assert "3" in exc_info.value.message
        order_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_reward_exceeding_total_raises(self, db, order_repo, video_repo):
        video_repo.get_by_ids = AsyncMock(return_value=[_make_video(1, 100)])
        svc = OrderApplicationService(order_repo, video_repo)

        with pytest.raises(RewardExceedError):
            await svc.create_order(
                CreateOrderRequest(video_ids=[1], reward=500), Member(id=5, reward=500), db
            )
        order_repo.save.assert_not_awaited()


class TestCancelOrder:
    @pytest.mark.asyncio
    async def test_cancels_and_returns_refund(self, db, order_repo, video_repo):
        member = Member(id=5)
        order = _completed_order(member)
        order_repo.get_by_id = AsyncMock(return_value=order)
        svc = OrderApplicationService(order_repo, video_repo)

        resp = await svc.cancel_order(order.id, 5, db)

        assert resp.order_status == OrderStatus.CANCELED
        assert resp.refund_amount == 2000
        assert resp.refund_reward == 0
        order_repo.save.assert_awaited_once_with(order, db)

    @pytest.mark.asyncio
    async def test_not_found(self, db, order_repo, video_repo):
        svc = OrderApplicationService(order_repo, video_repo)
        with pytest.raises(OrderNotFoundError):
            await svc.cancel_order("missing", 5, db)

    @pytest.mark.asyncio
    async def test_other_member_forbidden(self, db, order_repo, video_repo):
        order = _completed_order(Member(id=5))
        order_repo.get_by_id = AsyncMock(return_value=order)
        svc = OrderApplicationService(order_repo, video_repo)

        with pytest.raises(OrderForbiddenError):
            await svc.cancel_order(order.id, 6, db)

    @pytest.mark.asyncio
    async def test_second_cancel_raises_already_canceled(self, db, order_repo, video_repo):
        order = _completed_order(Member(id=5))
        order_repo.get_by_id = AsyncMock(return_value=order)
        svc = OrderApplicationService(order_repo, video_repo)

        await svc.cancel_order(order.id, 5, db)
        with pytest.raises(OrderAlreadyCanceledError):
            await svc.cancel_order(order.id, 5, db)
        assert order_repo.save.await_count == 1


class TestCancelOrderLine:
    @pytest.mark.asyncio
    async def test_cancels_single_line(self, db, order_repo, video_repo):
        member = Member(id=5, reward=500)
        order = _completed_order(member, reward=500)
        order_repo.get_by_id = AsyncMock(return_value=order)
        svc = OrderApplicationService(order_repo, video_repo)
        line = order.lines[0]

        resp = await svc.cancel_order_line(order.id, line.id, 5, db)

        assert line.status == OrderStatus.CANCELED
        assert resp.order_status == OrderStatus.COMPLETED
        assert resp.refund_amount == 1000
        assert resp.refund_reward == 0
        order_repo.save.assert_awaited_once_with(order, db)

    @pytest.mark.asyncio
    async def test_canceled_line_raises(self, db, order_repo, video_repo):
        order = _completed_order(Member(id=5))
        order.lines[0].cancel()
        order_repo.get_by_id = AsyncMock(return_value=order)
        svc = OrderApplicationService(order_repo, video_repo)

        with pytest.raises(OrderAlreadyCanceledError):
            await svc.cancel_order_line(order.id, order.lines[0].id, 5, db)
        order_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_line_raises(self, db, order_repo, video_repo):
        order = _completed_order(Member(id=5))
        order_repo.get_by_id = AsyncMock(return_value=order)
        svc = OrderApplicationService(order_repo, video_repo)

        with pytest.raises(OrderLineNotFoundError):
            await svc.cancel_order_line(order.id, "nope", 5, db)

    @pytest.mark.asyncio
    async def test_canceled_order_raises(self, db, order_repo, video_repo):
        order = _completed_order(Member(id=5))
        order.cancel_all()
        order_repo.get_by_id = AsyncMock(return_value=order)
        svc = OrderApplicationService(order_repo, video_repo)

        with pytest.raises(OrderAlreadyCanceledError):
            await svc.cancel_order_line(order.id, order.lines[0].id, 5, db)
