"""Order aggregate and its lines — pure dataclasses, no SQLAlchemy dependency.

Refund bookkeeping:
  - ``remain_refund_amount`` / ``remain_refund_reward`` start at 0 and are
    set to the paid amount / used reward when the order completes.
  - Every refund or reward conversion draws down these two remainders; they
    never go negative.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from src.vc_common.audit import AuditInfo, as_utc, utc_now
from src.vc_common.enums import OrderStatus
from src.vc_common.errors import (
    OrderAlreadyCanceledError,
    OrderNotValidError,
    PriceNotMatchError,
    RewardExceedError,
    RewardNotEnoughError,
)
from src.vc_member.domain.models import Member
from src.vc_video.domain.models import Video

REFUND_PERIOD = timedelta(days=14)

_LINE_READ_ONLY = frozenset({"video", "price"})


@dataclass(frozen=True)
class Refund:
    refund_amount: int
    refund_reward: int


@dataclass
class OrderLine:
    """One purchased video inside an order.

    Transitions are not guarded: ``cancel()`` and ``complete()`` overwrite
    whatever status is current. Call ``ensure_not_canceled()`` first when a
    second cancel must be rejected.

    ``video`` and ``price`` are fixed once the line exists.
    """

    id: str
    video: Video
    price: int
    order_id: str | None = None
    status: OrderStatus = OrderStatus.ORDERED
    audit: AuditInfo = field(default_factory=AuditInfo.now)

    def __setattr__(self, name: str, value: object) -> None:
        if name in _LINE_READ_ONLY and name in self.__dict__:
            raise AttributeError(f"OrderLine.{name} is read-only")
        super().__setattr__(name, value)

    @classmethod
    def create(cls, order: "Order | None", video: Video, price: int) -> "OrderLine":
        return cls(
            id=uuid.uuid4().hex,
            video=video,
            price=price,
            order_id=order.id if order is not None else None,
        )

    def attach_to_order(self, order: "Order") -> None:
        self.order_id = order.id

    def cancel(self) -> None:
        self.status = OrderStatus.CANCELED
        self.audit.touch()

    def complete(self) -> None:
        self.status = OrderStatus.COMPLETED
        self.audit.touch()

    def ensure_not_canceled(self) -> None:
        if self.status == OrderStatus.CANCELED:
            raise OrderAlreadyCanceledError()


@dataclass
class Order:
    id: str
    member: Member
    total_pay_amount: int
    reward: int
    status: OrderStatus = OrderStatus.ORDERED
    remain_refund_amount: int = 0
    remain_refund_reward: int = 0
    payment_key: str | None = None
    complete_date: datetime | None = None
    lines: list[OrderLine] = field(default_factory=list)
    audit: AuditInfo = field(default_factory=AuditInfo.now)

    @classmethod
    def create(cls, member: Member, videos: list[Video], reward: int) -> "Order":
        total_pay_amount = sum(v.price for v in videos) - reward
        if total_pay_amount < 0:
            raise RewardExceedError()
        member.check_reward(reward)

        order = cls(
            id=str(uuid.uuid4()),
            member=member,
            total_pay_amount=total_pay_amount,
            reward=reward,
        )
        for video in videos:
            order.add_line(OrderLine.create(None, video, video.price))
        return order

    def add_line(self, line: OrderLine) -> None:
        self.lines.append(line)
        line.attach_to_order(self)

    def videos(self) -> list[Video]:
        return [line.video for line in self.lines]

    def find_line(self, line_id: str) -> OrderLine | None:
        return next((line for line in self.lines if line.id == line_id), None)

    # -- payment ---------------------------------------------------------------

    def check_valid_order(self, amount: int) -> None:
        if self.status != OrderStatus.ORDERED:
            raise OrderNotValidError()
        if self.total_pay_amount != amount:
            raise PriceNotMatchError(self.total_pay_amount, amount)

    def complete_order(self, complete_date: datetime, payment_key: str) -> None:
        self.member.minus_reward(self.reward)
        self.complete_date = complete_date
        self.payment_key = payment_key
        self.status = OrderStatus.COMPLETED
        for line in self.lines:
            line.complete()
        self.remain_refund_amount = self.total_pay_amount
        self.remain_refund_reward = self.reward
        self.audit.touch()

    def is_complete(self) -> bool:
        return self.status == OrderStatus.COMPLETED

    def is_expired(self, now: datetime | None = None) -> bool:
        """Naive datetimes are read as UTC."""
        if self.complete_date is None:
            return False
        return as_utc(self.complete_date) + REFUND_PERIOD < as_utc(now or utc_now())

    # -- cancellation ----------------------------------------------------------

    def check_already_canceled(self) -> None:
        if self.status == OrderStatus.CANCELED:
            raise OrderAlreadyCanceledError()

    def cancel_all(self) -> Refund:
        for line in self.lines:
            line.cancel()

        # reward is only debited on completion, so only then is it returned
        if self.is_complete():
            self.member.add_reward(self.remain_refund_reward)

        self.status = OrderStatus.CANCELED
        self.audit.touch()

        refund = Refund(self.remain_refund_amount, self.remain_refund_reward)
        self.remain_refund_amount = 0
        self.remain_refund_reward = 0
        return refund

    def cancel_line(self, line: OrderLine) -> Refund:
        line.cancel()

        if all(ln.status == OrderStatus.CANCELED for ln in self.lines):
            return self.cancel_all()

        refund_amount = self._draw_refund_amount(line.price)
        refund_reward = self._draw_refund_reward(line.price - refund_amount)
        self.member.add_reward(refund_reward)
        self.audit.touch()
        return Refund(refund_amount, refund_reward)

    def convert_amount_to_reward(self, amount: int) -> None:
        """Move ``amount`` into the member's reward, reward remainder first."""
        available = self.remain_refund_reward + self.remain_refund_amount
        if available < amount:
            raise RewardNotEnoughError(amount, available)

        from_reward = min(amount, self.remain_refund_reward)
        self.remain_refund_reward -= from_reward
        self.remain_refund_amount -= amount - from_reward
        self.member.add_reward(amount)
        self.audit.touch()

    def _draw_refund_amount(self, wanted: int) -> int:
        drawn = min(wanted, self.remain_refund_amount)
        self.remain_refund_amount -= drawn
        return drawn

    def _draw_refund_reward(self, wanted: int) -> int:
        drawn = min(wanted, self.remain_refund_reward)
        self.remain_refund_reward -= drawn
        return drawn
