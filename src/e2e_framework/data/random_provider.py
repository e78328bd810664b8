"""Seeded random value provider for test data.

All builders draw their default values from a ``RandomProvider``. Seeding a
provider makes every builder that shares it produce the same sequence of
values for the same sequence of calls, which is how flaky-data failures are
reproduced.

PATTERN: One Faker instance per provider with its own random state
(``seed_instance``), so reseeding one provider never disturbs another.
CRITICAL: The module-level default provider is process-wide mutable state
with no locking. Seed it only under serialized execution, or inject a
dedicated provider per test.
"""

import logging
import string
from typing import Optional

import faker_commerce
from faker import Faker

logger = logging.getLogger(__name__)

PHONE_FORMAT = "###-###-####"
_ALPHANUMERIC = tuple(string.ascii_letters + string.digits)


class RandomProvider:
    """Generate realistic field values from a seedable Faker instance.

    Example:
        provider = RandomProvider(seed=42)
        provider.email()
        provider.set_seed(42)  # replays the same sequence
    """

    def __init__(self, seed: Optional[int] = None, locale: str = "en_US"):
        """Initialize the provider.

        Args:
            seed: Optional seed for deterministic output
            locale: Faker locale used for person and location data
        """
        self.faker = Faker(locale)
        # Commerce data (product names, categories)
        self.faker.add_provider(faker_commerce.Provider)
        self.seed: Optional[int] = None
        if seed is None:
            self.reset_seed()
        else:
            self.set_seed(seed)

    def set_seed(self, seed: int) -> None:
        """Reseed so subsequent calls replay a fixed sequence.

        Args:
            seed: Integer seed
        """
        self.faker.seed_instance(seed)
        self.seed = seed
        logger.debug(f"Random provider seeded with {seed}")

    def reset_seed(self) -> None:
        """Reseed from system entropy, restoring non-deterministic output."""
        self.faker.seed_instance()
        self.seed = None
        logger.debug("Random provider reseeded from system entropy")

    # Person

    def first_name(self) -> str:
        return self.faker.first_name()

    def last_name(self) -> str:
        return self.faker.last_name()

    def email(self) -> str:
        return self.faker.email()

    def password(self, length: int = 12) -> str:
        """Generate a password containing upper, lower, digit and special chars."""
        return self.faker.password(length=length)

    def phone(self) -> str:
        """Generate a phone number in ``###-###-####`` format."""
        return self.faker.numerify(PHONE_FORMAT)

    # Location

    def street_address(self) -> str:
        return self.faker.street_address()

    def city(self) -> str:
        return self.faker.city()

    def state(self, abbreviated: bool = False) -> str:
        if abbreviated:
            return self.faker.state_abbr()
        return self.faker.state()

    def zip_code(self) -> str:
        return self.faker.postcode()

    def country(self) -> str:
        return self.faker.country()

    # Commerce

    def product_name(self) -> str:
        """Generate a name such as ``Ergonomic Steel Chair``."""
        return self.faker.ecommerce_name()

    def product_description(self) -> str:
        return self.faker.paragraph(nb_sentences=2)

    def department(self) -> str:
        return self.faker.ecommerce_category()

    def price(self, min_value: float = 1.0, max_value: float = 1000.0) -> float:
        """Generate a price rounded to cents.

        Args:
            min_value: Lower bound (inclusive)
            max_value: Upper bound (inclusive)

        Returns:
            Price with two decimal places

        Raises:
            ValueError: If min_value is greater than max_value
        """
        if min_value > max_value:
            raise ValueError(
                f"Invalid price range: min {min_value} is greater than max {max_value}"
            )
        cents = self.faker.random_int(
            min=int(round(min_value * 100)), max=int(round(max_value * 100))
        )
        return round(cents / 100, 2)

    # Primitives

    def alphanumeric(self, length: int) -> str:
        """Generate a random mixed-case alphanumeric token."""
        return "".join(
            self.faker.random_choices(
                elements=_ALPHANUMERIC, length=length
            )
        )

    def boolean(self) -> bool:
        return self.faker.pybool()

    def integer(self, min_value: int = 0, max_value: int = 9999) -> int:
        """Generate an integer in the inclusive range.

        Raises:
            ValueError: If min_value is greater than max_value
        """
        if min_value > max_value:
            raise ValueError(
                f"Invalid integer range: min {min_value} is greater than max {max_value}"
            )
        return self.faker.random_int(min=min_value, max=max_value)


_default_provider = RandomProvider()


def get_default_provider() -> RandomProvider:
    """Return the process-wide provider used when none is injected."""
    return _default_provider


def set_seed(seed: int) -> None:
    """Seed the default provider.

    Call at the start of a test to get deterministic data from every builder
    that uses the default provider.
    """
    _default_provider.set_seed(seed)


def reset_seed() -> None:
    """Restore non-deterministic output on the default provider."""
    _default_provider.reset_seed()


def random_email() -> str:
    """Generate an email from the default provider."""
    return _default_provider.email()


def random_phone() -> str:
    """Generate a ``###-###-####`` phone number from the default provider."""
    return _default_provider.phone()
