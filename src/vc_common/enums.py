"""Shared enums — values are stored as VARCHAR and checked by DB constraints."""

from enum import Enum


class OrderStatus(str, Enum):
    ORDERED = "ORDERED"
    CANCELED = "CANCELED"
    COMPLETED = "COMPLETED"


class CatalogSort(str, Enum):
    """Sort keys accepted by the catalog listing."""
    CREATED_DATE = "created-date"
    VIEW = "view"
    STAR = "star"
    PRICE = "price"
