"""Tests for the test data factory."""

import pytest

from e2e_framework.data import TestDataFactory, set_seed
from e2e_framework.data.random_provider import RandomProvider
from e2e_framework.models.data_models import OrderItem, OrderStatus


@pytest.fixture
def provider():
    return RandomProvider(seed=3003)


class TestUsers:
    """User factories."""

    def test_create_admin_user(self):
        admin = TestDataFactory.create_admin_user()

        assert admin.email == "admin@example.com"
        assert admin.password == "AdminPass123!"
        assert admin.first_name == "Admin"
        assert admin.last_name == "User"

    def test_partial_overrides(self, provider):
        user = TestDataFactory.create_user({"email": "x@example.com"}, provider=provider)

        assert user.email == "x@example.com"
        assert user.first_name and user.last_name and user.password
        assert user.phone is None

    def test_camel_case_override_keys(self, provider):
        user = TestDataFactory.create_user(
            {"firstName": "Ann", "lastName": "Lee"}, provider=provider
        )
        assert (user.first_name, user.last_name) == ("Ann", "Lee")

    def test_unknown_override_fails_fast(self, provider):
        with pytest.raises(ValueError, match="Unknown override 'nickname'"):
            TestDataFactory.create_user({"nickname": "al"}, provider=provider)

    def test_create_users(self, provider):
        users = TestDataFactory.create_users(5, provider=provider)
        assert len(users) == 5
        assert all(u.email for u in users)

    def test_create_users_zero(self):
        assert TestDataFactory.create_users(0) == []

    def test_bulk_is_reproducible_under_seed(self):
        set_seed(55)
        first = TestDataFactory.create_users(3)
        set_seed(55)
        assert TestDataFactory.create_users(3) == first


class TestAddresses:
    """Address factories."""

    def test_create_address_overrides(self, provider):
        address = TestDataFactory.create_address(
            {"city": "Austin", "zipCode": "73301"}, provider=provider
        )
        assert address.city == "Austin"
        assert address.zip_code == "73301"
        assert address.street and address.country

    def test_create_us_address(self, provider):
        assert TestDataFactory.create_us_address(provider).country == "United States"


class TestProducts:
    """Product factories."""

    def test_falsy_overrides_are_applied(self, provider):
        product = TestDataFactory.create_product(
            {"in_stock": False, "price": 0.0}, provider=provider
        )
        assert product.in_stock is False
        assert product.price == 0.0

    def test_in_and_out_of_stock(self, provider):
        assert TestDataFactory.create_in_stock_product(provider).in_stock is True
        assert TestDataFactory.create_out_of_stock_product(provider).in_stock is False

    def test_create_products_with_category(self, provider):
        products = TestDataFactory.create_products(4, "Books", provider=provider)
        assert len(products) == 4
        assert {p.category for p in products} == {"Books"}

    def test_create_products_without_category(self, provider):
        products = TestDataFactory.create_products(3, provider=provider)
        assert all(p.category for p in products)


class TestOrders:
    """Order factories."""

    def test_create_order_overrides(self, provider):
        user = TestDataFactory.create_admin_user(provider)
        order = TestDataFactory.create_order(
            {"user": user, "status": "delivered"}, provider=provider
        )

        assert order.user == user
        assert order.status == OrderStatus.DELIVERED
        assert order.total == sum(i.price * i.quantity for i in order.items)

    def test_create_order_with_items(self, provider):
        product = TestDataFactory.create_product({"price": 5.0}, provider=provider)
        items = [OrderItem(product=product, quantity=3, price=5.0)]

        order = TestDataFactory.create_order({"items": items}, provider=provider)

        assert order.total == 15.0

    def test_total_cannot_be_overridden(self, provider):
        with pytest.raises(ValueError, match="Unknown override 'total'"):
            TestDataFactory.create_order({"total": 1.0}, provider=provider)

    def test_create_simple_order(self):
        order = TestDataFactory.create_simple_order()
        assert order.total == 29.99
        assert order.items[0].quantity == 1
