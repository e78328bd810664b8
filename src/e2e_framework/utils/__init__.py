"""Utility helpers for logging, retries, waits, auth, network and page checks."""

from .logger import configure_logging, resolve_log_level
from .retry import retry, retry_with_backoff, retry_until, with_retry
from .tags import TestTags, TagCombinations, create_tag
from .wait import wait_for_element_to_disappear, wait_for_network_requests, wait_for_text
from .auth import (
    save_auth_state,
    load_auth_state,
    get_auth_token,
    set_auth_token,
    clear_auth_state,
)
from .network import (
    mock_api_response,
    block_url,
    wait_for_api_request,
    capture_api_requests,
    slow_down_network,
)
from .accessibility import run_accessibility_checks, run_axe_audit
from .performance import (
    collect_performance_metrics,
    assert_page_load_time,
    measure_api_response_time,
    get_slowest_resources,
)
from .assertions import (
    assert_contains_text,
    assert_url_matches,
    assert_element_ready,
    assert_field_value,
    assert_element_count,
    assert_api_success,
)
from .viewport import VIEWPORT_PRESETS, get_preset, set_viewport, run_at_viewports
from .error_helpers import capture_full_error_context, with_error_capture
from .file_upload import upload_file, upload_files, clear_file_input, drag_and_drop_file

__all__ = [
    "configure_logging",
    "resolve_log_level",
    "retry",
    "retry_with_backoff",
    "retry_until",
    "with_retry",
    "TestTags",
    "TagCombinations",
    "create_tag",
    "wait_for_element_to_disappear",
    "wait_for_network_requests",
    "wait_for_text",
    "save_auth_state",
    "load_auth_state",
    "get_auth_token",
    "set_auth_token",
    "clear_auth_state",
    "mock_api_response",
    "block_url",
    "wait_for_api_request",
    "capture_api_requests",
    "slow_down_network",
    "run_accessibility_checks",
    "run_axe_audit",
    "collect_performance_metrics",
    "assert_page_load_time",
    "measure_api_response_time",
    "get_slowest_resources",
    "assert_contains_text",
    "assert_url_matches",
    "assert_element_ready",
    "assert_field_value",
    "assert_element_count",
    "assert_api_success",
    "VIEWPORT_PRESETS",
    "get_preset",
    "set_viewport",
    "run_at_viewports",
    "capture_full_error_context",
    "with_error_capture",
    "upload_file",
    "upload_files",
    "clear_file_input",
    "drag_and_drop_file",
]
