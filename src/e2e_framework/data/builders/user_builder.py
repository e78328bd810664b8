"""User builder."""

from ...models.data_models import User
from .base import BaseBuilder


class UserBuilder(BaseBuilder[User]):
    """Build test users with Faker defaults and fluent overrides.

    Example:
        # Defaults for everything
        user = UserBuilder().build()

        # Override what the test cares about
        admin = (
            UserBuilder()
            .with_email("admin@example.com")
            .with_password("SecurePass123!")
            .build()
        )
    """

    def with_email(self, email: str) -> "UserBuilder":
        return self._set("email", email)

    def with_password(self, password: str) -> "UserBuilder":
        return self._set("password", password)

    def with_first_name(self, first_name: str) -> "UserBuilder":
        return self._set("first_name", first_name)

    def with_last_name(self, last_name: str) -> "UserBuilder":
        return self._set("last_name", last_name)

    def with_phone(self, phone: str) -> "UserBuilder":
        """Set a phone number. Without this call the user has no phone."""
        return self._set("phone", phone)

    def build(self) -> User:
        """Build the user.

        Returns:
            User with generated names, email and a 12 character password
            for any field not overridden. ``phone`` is only set on request.
        """
        return User(
            first_name=self._resolve("first_name", self.provider.first_name),
            last_name=self._resolve("last_name", self.provider.last_name),
            email=self._resolve("email", self.provider.email),
            password=self._resolve("password", lambda: self.provider.password(12)),
            phone=self._overrides.get("phone"),
        )
