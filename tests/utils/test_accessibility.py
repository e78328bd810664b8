"""Tests for accessibility checks."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from e2e_framework.utils.accessibility import (
    AXE_CORE_CDN,
    FORM_CONTROL_SELECTOR,
    check_form_labels,
    check_heading_hierarchy,
    check_image_alt_text,
    inject_axe,
    parse_violations,
    run_accessibility_checks,
    run_axe_audit,
)


def make_page(results_by_selector=None, evaluate=None):
    """Page whose locator(selector).evaluate_all returns canned results."""
    results_by_selector = results_by_selector or {}
    page = MagicMock()

    def locator(selector):
        loc = MagicMock()
        loc.evaluate_all = AsyncMock(return_value=results_by_selector.get(selector, []))
        return loc

    page.locator.side_effect = locator
    page.add_script_tag = AsyncMock()
    page.evaluate = AsyncMock(side_effect=evaluate)
    return page


def headings(*levels):
    return [{"level": level, "text": f"Heading {level}"} for level in levels]


AXE_RESULTS = {
    "violations": [
        {
            "id": "color-contrast",
            "impact": "serious",
            "tags": ["cat.color", "wcag2aa", "wcag143"],
            "description": "Elements must have sufficient color contrast",
            "help": "Elements must meet minimum contrast",
            "helpUrl": "https://dequeuniversity.com/rules/axe/color-contrast",
            "nodes": [
                {"target": ["#submit"], "html": "<button id='submit'>Go</button>"},
                {"target": [".note"], "html": "<p class='note'>x</p>"},
            ],
        },
        {
            "id": "region",
            "impact": None,
            "tags": ["best-practice"],
            "description": "Content should be in landmarks",
            "help": "All content in landmarks",
            "helpUrl": "https://dequeuniversity.com/rules/axe/region",
            "nodes": [{"target": []}],
        },
    ]
}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "levels, expected",
    [
        ((1, 2, 3, 2, 3), True),
        ((1, 3), False),
        ((2,), False),
        ((), True),
    ],
)
async def test_check_heading_hierarchy(levels, expected):
    page = make_page({"h1, h2, h3, h4, h5, h6": headings(*levels)})

    assert await check_heading_hierarchy(page) is expected


@pytest.mark.asyncio
async def test_check_image_alt_text_returns_sources():
    page = make_page({"img": ["https://app.test/logo.png"]})

    assert await check_image_alt_text(page) == ["https://app.test/logo.png"]


@pytest.mark.asyncio
async def test_run_accessibility_checks_builds_report():
    page = make_page({"h1, h2, h3, h4, h5, h6": headings(1, 2)})

    report = await run_accessibility_checks(page)

    assert report.heading_hierarchy is True
    assert report.images_without_alt == []
    assert report.passed


@pytest.mark.asyncio
async def test_report_fails_with_unlabeled_inputs():
    page = make_page({FORM_CONTROL_SELECTOR: ["email"]})

    assert await check_form_labels(page) == ["email"]

    report = await run_accessibility_checks(page)
    assert report.inputs_without_labels == ["email"]
    assert not report.passed


@pytest.mark.asyncio
async def test_inject_axe_loads_script():
    page = make_page(evaluate=[True])

    await inject_axe(page)

    page.add_script_tag.assert_awaited_once_with(url=AXE_CORE_CDN)


@pytest.mark.asyncio
async def test_inject_axe_raises_when_library_missing():
    page = make_page(evaluate=[False])

    with pytest.raises(RuntimeError, match="Failed to inject axe-core"):
        await inject_axe(page)


@pytest.mark.asyncio
async def test_inject_axe_wraps_load_errors():
    page = make_page()
    page.add_script_tag.side_effect = Exception("net::ERR_BLOCKED_BY_CLIENT")

    with pytest.raises(RuntimeError, match="ERR_BLOCKED_BY_CLIENT"):
        await inject_axe(page)


@pytest.mark.asyncio
async def test_run_axe_audit_passes_wcag_tags():
    page = make_page(evaluate=[True, AXE_RESULTS])

    issues = await run_axe_audit(page, wcag_level="A", include_best_practices=False)

    assert len(issues) == 3
    run_call = page.evaluate.await_args_list[1]
    assert run_call.args[1] == ["wcag2a"]


@pytest.mark.asyncio
async def test_run_axe_audit_adds_best_practices():
    page = make_page(evaluate=[True, {"violations": []}])

    assert await run_axe_audit(page) == []
    assert page.evaluate.await_args_list[1].args[1] == ["wcag2a", "wcag2aa", "best-practice"]


def test_parse_violations_one_issue_per_node():
    issues = parse_violations(AXE_RESULTS["violations"])

    contrast = issues[0]
    assert contrast.id == "color-contrast_0"
    assert issues[1].id == "color-contrast_1"
    assert contrast.impact == "serious"
    assert contrast.selector == "#submit"
    assert contrast.wcag_criteria == ["wcag2aa", "wcag143"]
    assert contrast.wcag_level == "AA"
    assert contrast.help_text.endswith(
        "More info: https://dequeuniversity.com/rules/axe/color-contrast"
    )


def test_parse_violations_defaults():
    region = parse_violations(AXE_RESULTS["violations"])[2]

    assert region.impact == "moderate"
    assert region.selector == "unknown"
    assert region.wcag_criteria == []
    assert region.wcag_level == "A"
