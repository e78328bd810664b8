"""Browser automation models for the Playwright layer.

This module defines the Pydantic models used to configure browsers, contexts
and network mocks.
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class BrowserType(str, Enum):
    """Supported browser engines."""

    CHROMIUM = "chromium"
    FIREFOX = "firefox"
    WEBKIT = "webkit"


class Viewport(BaseModel):
    """Browser viewport configuration."""

    width: int = Field(default=1280, description="Viewport width")
    height: int = Field(default=720, description="Viewport height")
    device_scale_factor: float = Field(default=1.0, description="Device pixel ratio")
    is_mobile: bool = Field(default=False, description="Mobile viewport")
    has_touch: bool = Field(default=False, description="Touch support")


class BrowserOptions(BaseModel):
    """Launch and context options shared by a test run."""

    browser: BrowserType = Field(
        default=BrowserType.CHROMIUM, description="Browser to launch"
    )
    headless: bool = Field(default=True, description="Run without a window")
    base_url: Optional[str] = Field(default=None, description="Context base URL")
    storage_state: Optional[str] = Field(
        default=None, description="Storage state file to restore"
    )
    viewport: Optional[Viewport] = Field(default=None, description="Viewport settings")

    # Timeouts
    action_timeout_ms: int = Field(default=10000, description="Default action timeout")
    navigation_timeout_ms: int = Field(
        default=30000, description="Default navigation timeout"
    )


class MockResponse(BaseModel):
    """Canned response for a mocked API route."""

    status: int = Field(default=200, description="Response status code")
    body: Optional[Any] = Field(default=None, description="JSON response body")
    headers: Dict[str, str] = Field(
        default_factory=dict, description="Extra response headers"
    )


class AccessibilityIssue(BaseModel):
    """One element violating one axe-core rule."""

    id: str = Field(description="Issue ID (rule ID and node index)")
    impact: Literal["minor", "moderate", "serious", "critical"] = Field(
        description="Impact level"
    )
    rule_id: str = Field(description="axe-core rule ID")
    description: str = Field(description="Issue description")
    help_text: str = Field(description="How to fix")

    # Location
    selector: str = Field(description="Element selector")
    html: str = Field(default="", description="Element HTML")

    # WCAG info
    wcag_criteria: List[str] = Field(default_factory=list, description="WCAG criteria")
    wcag_level: Literal["A", "AA", "AAA"] = Field(description="WCAG level")


class AccessibilityReport(BaseModel):
    """Result of the built-in accessibility checks."""

    heading_hierarchy: bool = Field(description="Headings never skip a level")
    images_without_alt: List[str] = Field(
        default_factory=list, description="Sources of images missing alt text"
    )
    inputs_without_labels: List[str] = Field(
        default_factory=list, description="Names of form controls without a label"
    )

    @property
    def passed(self) -> bool:
        return (
            self.heading_hierarchy
            and not self.images_without_alt
            and not self.inputs_without_labels
        )


class PerformanceMetrics(BaseModel):
    """Navigation and resource timing of the current page, in milliseconds."""

    load_time: float = Field(description="fetchStart to loadEventEnd")
    dom_content_loaded: float = Field(
        description="fetchStart to domContentLoadedEventEnd"
    )
    ttfb: float = Field(default=0.0, description="Time to first byte")
    first_paint: Optional[float] = Field(default=None, description="First paint")
    first_contentful_paint: Optional[float] = Field(
        default=None, description="First contentful paint"
    )
    network_requests: int = Field(default=0, description="Resource entries")
    total_transfer_size: int = Field(default=0, description="Bytes transferred")


class ResourceTiming(BaseModel):
    """Timing of one loaded resource."""

    name: str = Field(description="Resource URL")
    duration: float = Field(description="Load duration (ms)")
    size: int = Field(default=0, description="Transfer size in bytes")
