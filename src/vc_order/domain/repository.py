# src/vc_order/domain/repository.py
"""OrderRepository Protocol — interface contract for the persistence layer.

``save`` writes the order row and all of its lines; status updates are
atomic per order.
"""
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.vc_order.domain.models import Order


class OrderRepositoryProtocol(Protocol):
    async def save(self, order: Order, db: AsyncSession) -> None: ...

    async def get_by_id(self, order_id: str, db: AsyncSession) -> Order | None: ...
