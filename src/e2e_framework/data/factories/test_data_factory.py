"""Test data factory.

Central place to create common test data shapes. Each method builds a fresh
builder, applies only the override keys that are present, and builds.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic.alias_generators import to_snake

from ...models.data_models import Address, Order, Product, User
from ..builders import AddressBuilder, BaseBuilder, OrderBuilder, ProductBuilder, UserBuilder
from ..random_provider import RandomProvider

logger = logging.getLogger(__name__)

Overrides = Mapping[str, Any]

_USER_SETTERS: Dict[str, str] = {
    "email": "with_email",
    "password": "with_password",
    "first_name": "with_first_name",
    "last_name": "with_last_name",
    "phone": "with_phone",
}
_ADDRESS_SETTERS: Dict[str, str] = {
    "street": "with_street",
    "city": "with_city",
    "state": "with_state",
    "zip_code": "with_zip_code",
    "country": "with_country",
}
_PRODUCT_SETTERS: Dict[str, str] = {
    "name": "with_name",
    "description": "with_description",
    "price": "with_price",
    "sku": "with_sku",
    "category": "with_category",
    "in_stock": "with_stock_status",
    "quantity": "with_quantity",
}
_ORDER_SETTERS: Dict[str, str] = {
    "order_number": "with_order_number",
    "user": "with_user",
    "items": "with_items",
    "shipping_address": "with_shipping_address",
    "billing_address": "with_billing_address",
    "status": "with_status",
    "payment_method": "with_payment_method",
}


def apply_overrides(
    builder: BaseBuilder, overrides: Optional[Overrides], setters: Dict[str, str]
) -> BaseBuilder:
    """Apply a partial override mapping to a builder.

    Keys may be snake_case or camelCase. Keys that are absent keep the
    builder default; keys that are present are applied even when falsy.

    Raises:
        ValueError: If a key does not name a settable field
    """
    if not overrides:
        return builder

    for key, value in overrides.items():
        field = to_snake(key)
        setter = setters.get(field)
        if setter is None:
            raise ValueError(
                f"Unknown override '{key}' for {type(builder).__name__}. "
                f"Settable fields: {', '.join(sorted(setters))}"
            )
        getattr(builder, setter)(value)

    return builder


class TestDataFactory:
    """Stateless helpers for common test entities.

    GOTCHA: Bulk methods call the singular method repeatedly and make no
    uniqueness guarantee. Use distinct overrides when uniqueness matters.
    """

    __test__ = False

    @staticmethod
    def create_user(
        overrides: Optional[Overrides] = None,
        provider: Optional[RandomProvider] = None,
    ) -> User:
        builder = UserBuilder(provider)
        return apply_overrides(builder, overrides, _USER_SETTERS).build()

    @staticmethod
    def create_admin_user(provider: Optional[RandomProvider] = None) -> User:
        return (
            UserBuilder(provider)
            .with_email("admin@example.com")
            .with_password("AdminPass123!")
            .with_first_name("Admin")
            .with_last_name("User")
            .build()
        )

    @staticmethod
    def create_address(
        overrides: Optional[Overrides] = None,
        provider: Optional[RandomProvider] = None,
    ) -> Address:
        builder = AddressBuilder(provider)
        return apply_overrides(builder, overrides, _ADDRESS_SETTERS).build()

    @staticmethod
    def create_us_address(provider: Optional[RandomProvider] = None) -> Address:
        return AddressBuilder(provider).build_us()

    @staticmethod
    def create_product(
        overrides: Optional[Overrides] = None,
        provider: Optional[RandomProvider] = None,
    ) -> Product:
        builder = ProductBuilder(provider)
        return apply_overrides(builder, overrides, _PRODUCT_SETTERS).build()

    @staticmethod
    def create_in_stock_product(provider: Optional[RandomProvider] = None) -> Product:
        return ProductBuilder(provider).build_in_stock()

    @staticmethod
    def create_out_of_stock_product(
        provider: Optional[RandomProvider] = None,
    ) -> Product:
        return ProductBuilder(provider).build_out_of_stock()

    @staticmethod
    def create_order(
        overrides: Optional[Overrides] = None,
        provider: Optional[RandomProvider] = None,
    ) -> Order:
        """Create an order.

        Raises:
            ValueError: If overrides include ``total``, which is always derived
        """
        builder = OrderBuilder(provider)
        return apply_overrides(builder, overrides, _ORDER_SETTERS).build()

    @staticmethod
    def create_simple_order(provider: Optional[RandomProvider] = None) -> Order:
        return OrderBuilder(provider).build_simple()

    @classmethod
    def create_users(
        cls, count: int, provider: Optional[RandomProvider] = None
    ) -> List[User]:
        """Create ``count`` independently generated users."""
        logger.debug(f"Creating {count} users")
        return [cls.create_user(provider=provider) for _ in range(count)]

    @classmethod
    def create_products(
        cls,
        count: int,
        category: Optional[str] = None,
        provider: Optional[RandomProvider] = None,
    ) -> List[Product]:
        """Create ``count`` products, optionally all in one category."""
        overrides = {"category": category} if category is not None else None
        logger.debug(f"Creating {count} products (category={category})")
        return [
            cls.create_product(overrides, provider=provider) for _ in range(count)
        ]
