"""Models package for the e2e framework."""

from .data_models import (
    OrderStatus,
    EntityModel,
    User,
    Address,
    Product,
    OrderItem,
    Order,
)
from .browser_models import (
    BrowserType,
    Viewport,
    BrowserOptions,
    MockResponse,
    AccessibilityIssue,
    AccessibilityReport,
    PerformanceMetrics,
    ResourceTiming,
)

__all__ = [
    # Data models
    "OrderStatus",
    "EntityModel",
    "User",
    "Address",
    "Product",
    "OrderItem",
    "Order",
    # Browser models
    "BrowserType",
    "Viewport",
    "BrowserOptions",
    "MockResponse",
    "AccessibilityIssue",
    "AccessibilityReport",
    "PerformanceMetrics",
    "ResourceTiming",
]
