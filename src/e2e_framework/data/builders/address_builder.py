"""Address builder for forms that need postal data."""

from ...models.data_models import Address
from .base import BaseBuilder

UNITED_STATES = "United States"


class AddressBuilder(BaseBuilder[Address]):
    """Build test addresses.

    Two terminal methods are available: ``build()`` generates a fully random
    address, ``build_us()`` pins the country to the United States and
    generates an abbreviated state.
    """

    def with_street(self, street: str) -> "AddressBuilder":
        return self._set("street", street)

    def with_city(self, city: str) -> "AddressBuilder":
        return self._set("city", city)

    def with_state(self, state: str) -> "AddressBuilder":
        return self._set("state", state)

    def with_zip_code(self, zip_code: str) -> "AddressBuilder":
        return self._set("zip_code", zip_code)

    def with_country(self, country: str) -> "AddressBuilder":
        return self._set("country", country)

    def build(self) -> Address:
        """Build an address with random country and full state name."""
        return Address(
            street=self._resolve("street", self.provider.street_address),
            city=self._resolve("city", self.provider.city),
            state=self._resolve("state", self.provider.state),
            zip_code=self._resolve("zip_code", self.provider.zip_code),
            country=self._resolve("country", self.provider.country),
        )

    def build_us(self) -> Address:
        """Build a US address.

        CRITICAL: Country is always ``United States``, even when a country
        override was set. An explicit state override is kept as given.
        """
        return Address(
            street=self._resolve("street", self.provider.street_address),
            city=self._resolve("city", self.provider.city),
            state=self._resolve("state", lambda: self.provider.state(abbreviated=True)),
            zip_code=self._resolve("zip_code", self.provider.zip_code),
            country=UNITED_STATES,
        )
