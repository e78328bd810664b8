"""Fluent builders for test entities."""

from .base import BaseBuilder
from .user_builder import UserBuilder
from .address_builder import AddressBuilder
from .product_builder import ProductBuilder
from .order_builder import OrderBuilder

__all__ = [
    "BaseBuilder",
    "UserBuilder",
    "AddressBuilder",
    "ProductBuilder",
    "OrderBuilder",
]
