"""Product builder for catalog and checkout tests."""

from ...models.data_models import Product
from .base import BaseBuilder

DEFAULT_MIN_PRICE = 10.0
DEFAULT_MAX_PRICE = 1000.0
SKU_LENGTH = 10


class ProductBuilder(BaseBuilder[Product]):
    """Build test products.

    Generated prices are positive with two decimals and generated SKUs are
    uppercase alphanumeric tokens. Overrides are not validated, so a negative
    price can be set on purpose for negative tests.
    """

    def with_name(self, name: str) -> "ProductBuilder":
        return self._set("name", name)

    def with_description(self, description: str) -> "ProductBuilder":
        return self._set("description", description)

    def with_price(self, price: float) -> "ProductBuilder":
        return self._set("price", price)

    def with_sku(self, sku: str) -> "ProductBuilder":
        return self._set("sku", sku)

    def with_category(self, category: str) -> "ProductBuilder":
        return self._set("category", category)

    def with_stock_status(self, in_stock: bool) -> "ProductBuilder":
        return self._set("in_stock", in_stock)

    def with_quantity(self, quantity: int) -> "ProductBuilder":
        return self._set("quantity", quantity)

    def build(self) -> Product:
        return Product(
            name=self._resolve("name", self.provider.product_name),
            description=self._resolve("description", self.provider.product_description),
            price=self._resolve(
                "price",
                lambda: self.provider.price(DEFAULT_MIN_PRICE, DEFAULT_MAX_PRICE),
            ),
            sku=self._resolve(
                "sku", lambda: self.provider.alphanumeric(SKU_LENGTH).upper()
            ),
            category=self._resolve("category", self.provider.department),
            in_stock=self._resolve("in_stock", self.provider.boolean),
            quantity=self._overrides.get("quantity"),
        )

    def build_in_stock(self) -> Product:
        return self.with_stock_status(True).build()

    def build_out_of_stock(self) -> Product:
        return self.with_stock_status(False).build()
