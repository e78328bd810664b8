"""Tests for the user, address and product builders."""

import re

import pytest

from e2e_framework.data import set_seed
from e2e_framework.data.builders import AddressBuilder, ProductBuilder, UserBuilder
from e2e_framework.data.random_provider import RandomProvider
from e2e_framework.models.data_models import Address, Product, User


@pytest.fixture
def provider():
    return RandomProvider(seed=1001)


class TestUserBuilder:
    """User builder behaviour."""

    def test_overrides_and_defaults(self):
        user = UserBuilder().with_email("a@x.com").with_password("P1").build()

        assert isinstance(user, User)
        assert user.email == "a@x.com"
        assert user.password == "P1"
        assert user.first_name
        assert user.last_name
        assert user.phone is None

    def test_all_defaults_populated(self, provider):
        user = UserBuilder(provider).build()

        assert user.first_name and user.last_name
        assert "@" in user.email
        assert len(user.password) == 12
        assert user.phone is None

    def test_with_phone(self, provider):
        user = UserBuilder(provider).with_phone("555-123-4567").build()
        assert user.phone == "555-123-4567"

    def test_fluent_methods_return_same_builder(self):
        builder = UserBuilder()
        assert builder.with_email("a@x.com") is builder
        assert builder.with_first_name("Ann") is builder
        assert builder.reset() is builder

    def test_every_override_is_applied(self, provider):
        user = (
            UserBuilder(provider)
            .with_first_name("Ann")
            .with_last_name("Lee")
            .with_email("ann@example.com")
            .with_password("Secret1!")
            .with_phone("555-000-1111")
            .build()
        )

        assert user == User(
            first_name="Ann",
            last_name="Lee",
            email="ann@example.com",
            password="Secret1!",
            phone="555-000-1111",
        )

    def test_invalid_values_are_accepted(self, provider):
        user = UserBuilder(provider).with_email("not-an-email").build()
        assert user.email == "not-an-email"

    def test_empty_string_override_is_kept(self, provider):
        user = UserBuilder(provider).with_first_name("").build()
        assert user.first_name == ""

    def test_repeated_build_regenerates_unset_fields(self, provider):
        builder = UserBuilder(provider).with_email("fixed@example.com")

        users = [builder.build() for _ in range(5)]

        assert {u.email for u in users} == {"fixed@example.com"}
        assert len({u.password for u in users}) > 1

    def test_seeded_sequence_is_reproducible(self):
        set_seed(314)
        first = [UserBuilder().build(), UserBuilder().build()]
        set_seed(314)
        second = [UserBuilder().build(), UserBuilder().build()]

        assert first == second

    def test_reset_clears_overrides(self, provider):
        builder = UserBuilder(provider).with_email("a@x.com").with_phone("1")
        builder.reset()

        assert builder.overrides == {}
        user = builder.build()
        assert user.email != "a@x.com"
        assert user.phone is None

    def test_overrides_lists_explicit_none_and_is_a_copy(self, provider):
        builder = UserBuilder(provider).with_phone(None)

        assert builder.overrides == {"phone": None}
        builder.overrides["email"] = "x@y.com"
        assert "email" not in builder.overrides

    def test_reset_does_not_touch_seed(self):
        provider = RandomProvider(seed=8)
        UserBuilder(provider).with_email("a@x.com").reset()
        assert provider.seed == 8


class TestAddressBuilder:
    """Address builder behaviour."""

    def test_build_defaults(self, provider):
        address = AddressBuilder(provider).build()

        assert isinstance(address, Address)
        for value in (
            address.street,
            address.city,
            address.state,
            address.zip_code,
            address.country,
        ):
            assert value

    def test_build_us_pins_country(self, provider):
        for _ in range(10):
            address = AddressBuilder(provider).build_us()
            assert address.country == "United States"
            assert len(address.state) == 2

    def test_build_us_ignores_country_override(self, provider):
        address = AddressBuilder(provider).with_country("Canada").build_us()
        assert address.country == "United States"

    def test_build_us_keeps_state_override(self, provider):
        address = AddressBuilder(provider).with_state("California").build_us()
        assert address.state == "California"

    def test_overrides(self, provider):
        address = (
            AddressBuilder(provider)
            .with_street("1 Main St")
            .with_city("Springfield")
            .with_state("IL")
            .with_zip_code("62701")
            .with_country("USA")
            .build()
        )

        assert address == Address(
            street="1 Main St",
            city="Springfield",
            state="IL",
            zip_code="62701",
            country="USA",
        )

    def test_seeded_build_is_reproducible(self):
        assert (
            AddressBuilder(RandomProvider(seed=12)).build()
            == AddressBuilder(RandomProvider(seed=12)).build()
        )


class TestProductBuilder:
    """Product builder behaviour."""

    def test_build_defaults(self, provider):
        product = ProductBuilder(provider).build()

        assert isinstance(product, Product)
        assert product.name
        assert product.description
        assert product.category
        assert 10 <= product.price <= 1000
        assert re.fullmatch(r"[A-Z0-9]{10}", product.sku)
        assert isinstance(product.in_stock, bool)
        assert product.quantity is None

    def test_sku_is_uppercase_alphanumeric(self, provider):
        for _ in range(20):
            sku = ProductBuilder(provider).build().sku
            assert sku == sku.upper()
            assert sku.isalnum()

    def test_build_in_stock(self, provider):
        assert ProductBuilder(provider).build_in_stock().in_stock is True

    def test_build_out_of_stock(self, provider):
        assert ProductBuilder(provider).build_out_of_stock().in_stock is False

    def test_false_stock_override_is_kept(self, provider):
        for _ in range(10):
            assert ProductBuilder(provider).with_stock_status(False).build().in_stock is False

    def test_negative_price_is_accepted(self, provider):
        assert ProductBuilder(provider).with_price(-5.0).build().price == -5.0

    def test_quantity_only_when_set(self, provider):
        assert ProductBuilder(provider).with_quantity(0).build().quantity == 0

    def test_overrides(self, provider):
        product = (
            ProductBuilder(provider)
            .with_name("Widget")
            .with_description("A widget")
            .with_price(12.5)
            .with_sku("WID-1")
            .with_category("Tools")
            .with_stock_status(True)
            .with_quantity(3)
            .build()
        )

        assert product == Product(
            name="Widget",
            description="A widget",
            price=12.5,
            sku="WID-1",
            category="Tools",
            in_stock=True,
            quantity=3,
        )

    def test_reset_then_build_matches_fresh_builder(self):
        used = ProductBuilder(RandomProvider(seed=77)).with_name("Widget").with_price(1.0)
        used.reset()

        assert used.overrides == {}
        assert used.build() == ProductBuilder(RandomProvider(seed=77)).build()
