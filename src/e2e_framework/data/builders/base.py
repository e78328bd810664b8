"""Base class for fluent test data builders.

Builders accumulate field overrides through ``with_*`` methods and resolve
every field that was not overridden from a ``RandomProvider`` when built.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from ..random_provider import RandomProvider, get_default_provider

T = TypeVar("T")
B = TypeVar("B", bound="BaseBuilder")


class BaseBuilder(ABC, Generic[T]):
    """Abstract fluent builder.

    PATTERN: Overrides live in a dict keyed by field name, so an override of
    ``None`` or ``False`` is distinguishable from a field that was never set.
    GOTCHA: Defaults are generated on every ``build()`` call. Two builds from
    the same builder share overrides but not generated values.
    """

    def __init__(self, provider: Optional[RandomProvider] = None):
        """Initialize the builder.

        Args:
            provider: Random provider for defaults (process default if omitted)
        """
        self.provider = provider or get_default_provider()
        self._overrides: Dict[str, Any] = {}

    def _set(self: B, field: str, value: Any) -> B:
        self._overrides[field] = value
        return self

    def _resolve(self, field: str, default: Callable[[], Any]) -> Any:
        """Return the override for ``field`` or a freshly generated default."""
        if field in self._overrides:
            return self._overrides[field]
        return default()

    @property
    def overrides(self) -> Dict[str, Any]:
        """Copy of the overrides accumulated so far."""
        return dict(self._overrides)

    @abstractmethod
    def build(self) -> T:
        """Build the entity, generating every field that was not overridden."""

    def reset(self: B) -> B:
        """Clear all overrides. The provider seed is left untouched."""
        self._overrides = {}
        return self
