"""Accessibility checks.

Two levels are offered. The built-in checks (heading order, image alt text,
form labels) need nothing but the page. ``run_axe_audit`` injects axe-core
and reports WCAG violations per element.
"""

import logging
from typing import Any, Dict, List, Literal

from playwright.async_api import Page

from ..models.browser_models import AccessibilityIssue, AccessibilityReport

logger = logging.getLogger(__name__)

AXE_CORE_CDN = "https://cdnjs.cloudflare.com/ajax/libs/axe-core/4.7.2/axe.min.js"

# WCAG level to axe-core tag mapping
WCAG_TAG_MAPPING: Dict[str, List[str]] = {
    "A": ["wcag2a"],
    "AA": ["wcag2a", "wcag2aa"],
    "AAA": ["wcag2a", "wcag2aa", "wcag2aaa"],
}

HEADING_SELECTOR = "h1, h2, h3, h4, h5, h6"
FORM_CONTROL_SELECTOR = (
    'input:not([type="hidden"]):not([type="submit"]):not([type="button"]), '
    "textarea, select"
)

_HEADINGS_SCRIPT = """
(elements) => elements.map((el) => ({
    level: parseInt(el.tagName.charAt(1)),
    text: (el.textContent || '').trim(),
}))
"""

_IMAGES_WITHOUT_ALT_SCRIPT = """
(images) => images
    .filter((img) => !img.alt || img.alt.trim() === '')
    .map((img) => img.src || 'unknown source')
"""

_INPUTS_WITHOUT_LABELS_SCRIPT = """
(inputs) => inputs
    .filter((input) => {
        if (input.getAttribute('aria-label') || input.getAttribute('aria-labelledby')) {
            return false;
        }
        if (input.id && document.querySelector(`label[for="${input.id}"]`)) {
            return false;
        }
        return !input.closest('label');
    })
    .map((input) => input.name || input.id || 'unnamed input')
"""

_AXE_RUN_SCRIPT = """
(tags) => axe.run(document, { runOnly: { type: 'tag', values: tags } })
"""


async def check_heading_hierarchy(page: Page) -> bool:
    """Return False if a heading skips a level (e.g. an h3 right after an h1)."""
    headings = await page.locator(HEADING_SELECTOR).evaluate_all(_HEADINGS_SCRIPT)

    previous_level = 0
    for heading in headings:
        if heading["level"] > previous_level + 1:
            logger.warning(
                f"Heading hierarchy issue: Found h{heading['level']} after "
                f"h{previous_level}. Text: {heading['text'][:50]}"
            )
            return False
        previous_level = heading["level"]

    return True


async def check_image_alt_text(page: Page) -> List[str]:
    """Return the sources of images without alt text."""
    missing = await page.locator("img").evaluate_all(_IMAGES_WITHOUT_ALT_SCRIPT)
    if missing:
        logger.warning(f"Found {len(missing)} images without alt text")
    return missing


async def check_form_labels(page: Page) -> List[str]:
    """Return the names of form controls with no label or aria label."""
    unlabeled = await page.locator(FORM_CONTROL_SELECTOR).evaluate_all(
        _INPUTS_WITHOUT_LABELS_SCRIPT
    )
    if unlabeled:
        logger.warning(f"Found {len(unlabeled)} form inputs without labels")
    return unlabeled


async def run_accessibility_checks(page: Page) -> AccessibilityReport:
    """Run the built-in checks and collect them into one report."""
    logger.info("Running accessibility checks...")
    return AccessibilityReport(
        heading_hierarchy=await check_heading_hierarchy(page),
        images_without_alt=await check_image_alt_text(page),
        inputs_without_labels=await check_form_labels(page),
    )


async def inject_axe(page: Page) -> None:
    """Load axe-core into the page.

    Raises:
        RuntimeError: If the script cannot be loaded
    """
    try:
        await page.add_script_tag(url=AXE_CORE_CDN)
        is_loaded = await page.evaluate("() => typeof axe !== 'undefined'")
    except Exception as e:
        logger.error(f"Failed to inject axe-core: {e}")
        raise RuntimeError(f"Failed to inject axe-core: {e}") from e

    if not is_loaded:
        raise RuntimeError("Failed to inject axe-core: library did not load")
    logger.debug("axe-core library injected")


async def run_axe_audit(
    page: Page,
    wcag_level: Literal["A", "AA", "AAA"] = "AA",
    include_best_practices: bool = True,
) -> List[AccessibilityIssue]:
    """Run an axe-core audit on the page.

    PATTERN: Use evaluate() to run JavaScript libraries in browser context.

    Args:
        page: Playwright page instance
        wcag_level: WCAG conformance level (A, AA, or AAA)
        include_best_practices: Include best practice rules

    Returns:
        One issue per violating element

    Raises:
        RuntimeError: If axe-core cannot be injected
    """
    await inject_axe(page)

    tags = list(WCAG_TAG_MAPPING[wcag_level])
    if include_best_practices:
        tags.append("best-practice")

    logger.info(f"Running axe audit with WCAG level {wcag_level} (tags: {tags})")
    results = await page.evaluate(_AXE_RUN_SCRIPT, tags)

    issues = parse_violations(results.get("violations", []))
    logger.info(f"Accessibility audit completed: {len(issues)} issues found")
    return issues


def _issue_level(tags: List[str]) -> str:
    if any(tag.endswith("aaa") for tag in tags if tag.startswith("wcag")):
        return "AAA"
    if any(tag.endswith("aa") for tag in tags if tag.startswith("wcag")):
        return "AA"
    return "A"


def parse_violations(violations: List[Dict[str, Any]]) -> List[AccessibilityIssue]:
    """Flatten axe-core violations into one issue per affected element."""
    issues = []

    for violation in violations:
        rule_id = violation.get("id", "unknown")
        tags = violation.get("tags", [])
        help_text = violation.get("help", "")
        help_url = violation.get("helpUrl", "")

        for idx, node in enumerate(violation.get("nodes", [])):
            target = node.get("target", [])
            issues.append(
                AccessibilityIssue(
                    id=f"{rule_id}_{idx}",
                    impact=violation.get("impact") or "moderate",
                    rule_id=rule_id,
                    description=violation.get("description", ""),
                    help_text=f"{help_text}. More info: {help_url}",
                    selector=target[0] if target else "unknown",
                    html=node.get("html", ""),
                    wcag_criteria=[tag for tag in tags if tag.startswith("wcag")],
                    wcag_level=_issue_level(tags),
                )
            )

    return issues
