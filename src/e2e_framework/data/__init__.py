"""Test data generation: seeded random provider, builders and factory.

This package has no browser dependency. Every entity it produces is a frozen
pydantic model from ``e2e_framework.models``.
"""

from .random_provider import (
    RandomProvider,
    get_default_provider,
    set_seed,
    reset_seed,
    random_email,
    random_phone,
)
from .builders import (
    BaseBuilder,
    UserBuilder,
    AddressBuilder,
    ProductBuilder,
    OrderBuilder,
)
from .factories import TestDataFactory

__all__ = [
    "RandomProvider",
    "get_default_provider",
    "set_seed",
    "reset_seed",
    "random_email",
    "random_phone",
    "BaseBuilder",
    "UserBuilder",
    "AddressBuilder",
    "ProductBuilder",
    "OrderBuilder",
    "TestDataFactory",
]
