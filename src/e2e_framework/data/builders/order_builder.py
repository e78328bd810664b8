"""Order builder for checkout flow tests.

The order builder composes the other builders: when the user, items or
shipping address are not supplied it builds them with the same provider, so
one seed reproduces the whole order graph.
"""

from typing import Sequence, Tuple, Union

from ...models.data_models import Order, OrderItem, OrderStatus, Product, User, Address
from .address_builder import AddressBuilder
from .base import BaseBuilder
from .product_builder import ProductBuilder
from .user_builder import UserBuilder

ORDER_NUMBER_PREFIX = "ORD-"
DEFAULT_PAYMENT_METHOD = "Credit Card"

SIMPLE_ORDER_PRICE = 29.99


class OrderBuilder(BaseBuilder[Order]):
    """Build test orders.

    PATTERN: Composite builder. Missing children are built on demand.
    CRITICAL: ``total`` has no setter. It is always derived from the items.
    """

    def with_order_number(self, order_number: str) -> "OrderBuilder":
        return self._set("order_number", order_number)

    def with_user(self, user: User) -> "OrderBuilder":
        return self._set("user", user)

    def with_items(self, items: Sequence[OrderItem]) -> "OrderBuilder":
        return self._set("items", tuple(items))

    def with_shipping_address(self, address: Address) -> "OrderBuilder":
        return self._set("shipping_address", address)

    def with_billing_address(self, address: Address) -> "OrderBuilder":
        return self._set("billing_address", address)

    def with_status(self, status: Union[OrderStatus, str]) -> "OrderBuilder":
        """Set the order status.

        Raises:
            ValueError: If ``status`` is not a known order status
        """
        return self._set("status", OrderStatus(status))

    def with_payment_method(self, method: str) -> "OrderBuilder":
        return self._set("payment_method", method)

    def _default_items(self) -> Tuple[OrderItem, ...]:
        """One in-stock product line, charged at the product's price."""
        product = (
            ProductBuilder(self.provider)
            .with_price(self.provider.price(10, 100))
            .build_in_stock()
        )
        quantity = self.provider.integer(1, 5)
        return (OrderItem(product=product, quantity=quantity, price=product.price),)

    def _default_order_number(self) -> str:
        return ORDER_NUMBER_PREFIX + self.provider.alphanumeric(8).upper()

    def build(self) -> Order:
        """Build the order.

        Returns:
            Order whose total is the sum of price times quantity over items
        """
        items = self._resolve("items", self._default_items)

        return Order(
            order_number=self._resolve("order_number", self._default_order_number),
            user=self._resolve("user", lambda: UserBuilder(self.provider).build()),
            items=items,
            shipping_address=self._resolve(
                "shipping_address", lambda: AddressBuilder(self.provider).build_us()
            ),
            billing_address=self._overrides.get("billing_address"),
            status=self._resolve("status", lambda: OrderStatus.PENDING),
            payment_method=self._resolve(
                "payment_method", lambda: DEFAULT_PAYMENT_METHOD
            ),
        )

    def build_simple(self) -> Order:
        """Build an order with one fixed $29.99 item.

        Useful for assertions on totals that must not depend on the seed.
        """
        product = Product(
            name="Test Product",
            description="A test product",
            price=SIMPLE_ORDER_PRICE,
            sku="TEST-001",
            category="Test",
            in_stock=True,
        )
        return self.with_items(
            [OrderItem(product=product, quantity=1, price=SIMPLE_ORDER_PRICE)]
        ).build()
