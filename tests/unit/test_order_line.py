"""OrderLine lifecycle: create, attach, cancel, complete, ensure_not_canceled."""
import pytest

from src.vc_common.enums import OrderStatus
from src.vc_common.errors import OrderAlreadyCanceledError
from src.vc_member.domain.models import Member
from src.vc_order.domain.models import Order, OrderLine
from src.vc_video.domain.models import Channel, Video


def _make_video(video_id: int = 1, price: int = 1000) -> Video:
    return Video(
        id=video_id,
        name=f"video-{video_id}",
        price=price,
        channel=Channel(member_id=10, channel_name="channel"),
    )


def _make_order(order_id: str = "order-1") -> Order:
    return Order(id=order_id, member=Member(id=1), total_pay_amount=0, reward=0)


class TestCreate:
    @pytest.mark.parametrize("price", [0, 1, 500, 99_999])
    def test_created_line_is_ordered(self, price: int) -> None:
        line = OrderLine.create(_make_order(), _make_video(), price)
        assert line.status == OrderStatus.ORDERED

    def test_price_is_a_snapshot(self) -> None:
        video = _make_video(price=1000)
        line = OrderLine.create(_make_order(), video, 700)
        video.price = 2000
        assert line.price == 700

    def test_negative_price_is_accepted(self) -> None:
        line = OrderLine.create(_make_order(), _make_video(), -100)
        assert line.price == -100

    def test_price_cannot_be_reassigned(self) -> None:
        line = OrderLine.create(None, _make_video(), 100)
        with pytest.raises(AttributeError):
            line.price = 5
        assert line.price == 100

    def test_video_cannot_be_reassigned(self) -> None:
        video = _make_video(1)
        line = OrderLine.create(None, video, 100)
        with pytest.raises(AttributeError):
            line.video = _make_video(2)
        assert line.video is video

    def test_ids_are_unique(self) -> None:
        order = _make_order()
        ids = {OrderLine.create(order, _make_video(), 100).id for _ in range(50)}
        assert len(ids) == 50

    def test_create_binds_order(self) -> None:
        line = OrderLine.create(_make_order("order-9"), _make_video(), 100)
        assert line.order_id == "order-9"


class TestAttachToOrder:
    def test_two_phase_construction(self) -> None:
        line = OrderLine.create(None, _make_video(), 100)
        assert line.order_id is None

        line.attach_to_order(_make_order("order-2"))

        assert line.order_id == "order-2"

    def test_rebinding_is_not_guarded(self) -> None:
        line = OrderLine.create(_make_order("order-1"), _make_video(), 100)
        line.attach_to_order(_make_order("order-2"))
        assert line.order_id == "order-2"


class TestTransitions:
    def test_cancel(self) -> None:
        line = OrderLine.create(_make_order(), _make_video(), 100)
        line.cancel()
        assert line.status == OrderStatus.CANCELED

    def test_cancel_twice_stays_canceled(self) -> None:
        line = OrderLine.create(_make_order(), _make_video(), 100)
        line.cancel()
        line.cancel()
        assert line.status == OrderStatus.CANCELED

    def test_complete(self) -> None:
        line = OrderLine.create(_make_order(), _make_video(), 100)
        line.complete()
        assert line.status == OrderStatus.COMPLETED

    def test_complete_after_cancel_overwrites_status(self) -> None:
        # current behavior: no guard against leaving CANCELED
        line = OrderLine.create(_make_order(), _make_video(), 100)
        line.cancel()
        line.complete()
        assert line.status == OrderStatus.COMPLETED

    def test_cancel_after_complete_overwrites_status(self) -> None:
        line = OrderLine.create(_make_order(), _make_video(), 100)
        line.complete()
        line.cancel()
        assert line.status == OrderStatus.CANCELED


class TestEnsureNotCanceled:
    def test_raises_after_cancel(self) -> None:
        line = OrderLine.create(_make_order(), _make_video(), 100)
        line.cancel()
        with pytest.raises(OrderAlreadyCanceledError) as exc_info:
            line.ensure_not_canceled()
        assert exc_info.value.code == 3003

    def test_fresh_line_does_not_raise(self) -> None:
        line = OrderLine.create(_make_order(), _make_video(), 100)
        line.ensure_not_canceled()

    def test_completed_line_does_not_raise(self) -> None:
        line = OrderLine.create(_make_order(), _make_video(), 100)
        line.complete()
        line.ensure_not_canceled()
