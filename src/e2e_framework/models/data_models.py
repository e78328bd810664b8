"""Test data entity models.

This module defines the immutable value objects produced by the data builders:
users, addresses, products and orders. They are consumed by UI-filling code
(page objects) and by API tests, where they are serialized as request bodies.

PATTERN: Attributes use snake_case, serialization uses camelCase aliases so a
dumped entity matches the JSON shape the application under test expects.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class OrderStatus(str, Enum):
    """Order lifecycle states."""

    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class EntityModel(BaseModel):
    """Base class for built test entities.

    CRITICAL: Entities are frozen once built. Use a builder to derive a
    variation instead of mutating an existing entity.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_payload(self) -> dict:
        """Serialize to a camelCase dict suitable for a JSON request body."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class User(EntityModel):
    """Application user."""

    first_name: str = Field(description="First name")
    last_name: str = Field(description="Last name")
    email: str = Field(description="Login email")
    password: str = Field(description="Login password")
    phone: Optional[str] = Field(default=None, description="Phone number")


class Address(EntityModel):
    """Postal address."""

    street: str = Field(description="Street line")
    city: str = Field(description="City")
    state: str = Field(description="State or region")
    zip_code: str = Field(description="Postal code")
    country: str = Field(description="Country name")


class Product(EntityModel):
    """Catalog product."""

    name: str = Field(description="Product name")
    description: str = Field(description="Product description")
    price: float = Field(description="Unit price")
    sku: str = Field(description="Stock keeping unit")
    category: str = Field(description="Catalog department")
    in_stock: bool = Field(description="Availability flag")
    quantity: Optional[int] = Field(default=None, description="Units on hand")


class OrderItem(EntityModel):
    """Single order line."""

    product: Product = Field(description="Ordered product")
    quantity: int = Field(description="Units ordered")
    price: float = Field(description="Unit price charged")


class Order(EntityModel):
    """Customer order.

    GOTCHA: ``total`` is computed from ``items`` and cannot be supplied. Any
    ``total`` key passed to the constructor is ignored.
    """

    order_number: str = Field(description="Order reference")
    user: User = Field(description="Ordering user")
    items: Tuple[OrderItem, ...] = Field(description="Order lines")
    shipping_address: Address = Field(description="Delivery address")
    billing_address: Optional[Address] = Field(
        default=None, description="Billing address when different"
    )
    status: OrderStatus = Field(default=OrderStatus.PENDING, description="Order state")
    payment_method: str = Field(default="Credit Card", description="Payment method")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> float:
        """Sum of price times quantity over all items."""
        return sum(item.price * item.quantity for item in self.items)
