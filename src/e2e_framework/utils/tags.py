"""Test tags as pytest markers.

Tag tests with ``@pytest.mark.smoke`` etc. and select with ``-m``:

    pytest -m smoke
    pytest -m "smoke and not flaky"
"""

import re
from typing import Dict


class TestTags:
    """Marker names for organizing and filtering tests."""

    __test__ = False

    SMOKE = "smoke"
    REGRESSION = "regression"
    CRITICAL = "critical"
    INTEGRATION = "integration"
    API = "api"
    UI = "ui"
    SLOW = "slow"
    FLAKY = "flaky"
    SKIP_CI = "skip_ci"
    AUTH = "auth"
    VISUAL = "visual"


TAG_DESCRIPTIONS: Dict[str, str] = {
    TestTags.SMOKE: "quick checks that core functionality works",
    TestTags.REGRESSION: "comprehensive coverage of existing functionality",
    TestTags.CRITICAL: "must pass for the app to be considered working",
    TestTags.INTEGRATION: "multiple components working together",
    TestTags.API: "hits APIs directly",
    TestTags.UI: "interacts with the user interface",
    TestTags.SLOW: "long running",
    TestTags.FLAKY: "known to be unstable",
    TestTags.SKIP_CI: "only runs locally",
    TestTags.AUTH: "login, logout and session handling",
    TestTags.VISUAL: "screenshot comparison",
}


class TagCombinations:
    """Common ``-m`` expressions."""

    CRITICAL_SMOKE = f"{TestTags.CRITICAL} and {TestTags.SMOKE}"
    FULL_REGRESSION = f"{TestTags.REGRESSION} and not {TestTags.FLAKY}"
    FAST_FEEDBACK = f"{TestTags.SMOKE} and not {TestTags.FLAKY} and not {TestTags.SLOW}"


def create_tag(name: str) -> str:
    """Normalize a free-form name into a marker name, e.g. ``Check Out`` -> ``check_out``."""
    return re.sub(r"[^a-z0-9]+", "_", name.strip().lower()).strip("_")


def register_markers(config) -> None:
    """Register every tag with pytest so ``--strict-markers`` accepts them."""
    for tag, description in TAG_DESCRIPTIONS.items():
        config.addinivalue_line("markers", f"{tag}: {description}")
