"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Member / reward
  2xxx: Video / catalog
  3xxx: Order
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Member / reward ---

class RewardNotEnoughError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            1002,
            f"Not enough reward: required {required}, available {available}",
            422,
        )


class RewardExceedError(AppError):
    def __init__(self) -> None:
        super().__init__(1003, "Reward exceeds the order amount", 422)


# --- 2xxx: Video / catalog ---

class VideoNotFoundError(AppError):
    def __init__(self, video_ids: list[int]) -> None:
        joined = ", ".join(str(v) for v in video_ids)
        super().__init__(2001, f"Video not found: {joined}", 404)


class CatalogLookupMismatchError(AppError):
    def __init__(self, lookup: str, expected: int, actual: int) -> None:
        super().__init__(
            2002,
            f"Catalog lookup '{lookup}' has {actual} entries, expected {expected}",
            500,
        )


# --- 3xxx: Order ---

class OrderNotFoundError(AppError):
    def __init__(self, order_id: str) -> None:
        super().__init__(3001, f"Order not found: {order_id}", 404)


class OrderLineNotFoundError(AppError):
    def __init__(self, order_id: str, line_id: str) -> None:
        super().__init__(3002, f"Order line {line_id} not found in order {order_id}", 404)


class OrderAlreadyCanceledError(AppError):
    def __init__(self) -> None:
        super().__init__(3003, "Order is already canceled", 409)


class OrderNotValidError(AppError):
    def __init__(self) -> None:
        super().__init__(3004, "Order is not valid", 422)


class PriceNotMatchError(AppError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            3005,
            f"Requested amount {actual} does not match order amount {expected}",
            422,
        )


class OrderForbiddenError(AppError):
    def __init__(self, order_id: str) -> None:
        super().__init__(3006, f"Order {order_id} does not belong to the requester", 403)
