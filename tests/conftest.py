"""
Playwright Test Configuration and Fixtures

Shared fixtures, configuration and hooks for the browser (tests/e2e),
API (tests/api) and offline (tests/unit) suites.

Browser and API suites talk to the live site. They are marked ``live`` and
skipped unless AE_RUN_LIVE=true and the site answers a reachability probe.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Generator

import pytest
import requests
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from automation_exercise.config import E2EConfig
from automation_exercise.helpers.api_helpers import ApiClient
from automation_exercise.helpers.download_cleanup import DownloadCleanup
from automation_exercise.helpers.fixtures import PageObjects, build_page_objects, clean_downloads
from automation_exercise.helpers.user_data import UserData, generate_unique_user

logger = logging.getLogger(__name__)


# =============================================================================
# Live site gate
# =============================================================================


def _site_reachable() -> bool:
    """Probe the home page once; any HTTP answer below 500 counts as up."""
    try:
        resp = requests.get(E2EConfig.BASE_URL, timeout=E2EConfig.PROBE_TIMEOUT_SECONDS)
    except requests.exceptions.RequestException as e:
        logger.warning(f"Site probe failed for {E2EConfig.BASE_URL}: {e}")
        return False
    return resp.status_code < 500


def _live_skip_reason() -> str:
    if not E2EConfig.RUN_LIVE:
        return "Live site tests disabled (set AE_RUN_LIVE=true)"
    if not _site_reachable():
        return f"Site not reachable: {E2EConfig.BASE_URL}"
    return ""


# =============================================================================
# Browser Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: Dict[str, Any]) -> Dict[str, Any]:
    """Browser launch arguments; --headed and --slowmo win over AE_* settings."""
    return E2EConfig.launch_args(browser_type_launch_args)


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: Dict[str, Any]) -> Dict[str, Any]:
    """Browser context arguments."""
    return {
        **browser_context_args,
        "base_url": E2EConfig.BASE_URL,
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
        "accept_downloads": True,
    }


@pytest.fixture
def context(context):
    """Apply suite-wide timeouts to pytest-playwright's per-test context."""
    context.set_default_timeout(E2EConfig.DEFAULT_TIMEOUT)
    context.set_default_navigation_timeout(E2EConfig.NAVIGATION_TIMEOUT)
    return context


# =============================================================================
# Page Object Fixtures
# =============================================================================


@pytest.fixture
def downloads() -> Generator[DownloadCleanup, None, None]:
    """Empty downloads directory for the duration of one test."""
    with clean_downloads(DownloadCleanup(E2EConfig.DOWNLOADS_DIR)) as cleanup:
        yield cleanup


@pytest.fixture
def pages(page, downloads: DownloadCleanup) -> PageObjects:
    """All page objects bound to the test's browser page."""
    return build_page_objects(page, E2EConfig.BASE_URL, downloads)


@pytest.fixture
def user() -> UserData:
    """A freshly generated user that does not exist on the site yet."""
    return generate_unique_user()


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def api_request(playwright):
    """Playwright request context shared by the API suite."""
    request_context = playwright.request.new_context(
        ignore_https_errors=True, timeout=E2EConfig.DEFAULT_TIMEOUT
    )
    yield request_context
    request_context.dispose()


@pytest.fixture
def api_client(api_request) -> ApiClient:
    return ApiClient(api_request, E2EConfig.API_URL)


# =============================================================================
# Hooks
# =============================================================================


def _save_failure_screenshot(item) -> None:
    page = item.funcargs.get("page")
    if not isinstance(page, Page):
        return

    E2EConfig.ARTIFACTS_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    test_name = item.name.replace("/", "_").replace(":", "_")
    screenshot_path = E2EConfig.ARTIFACTS_DIR / f"failure_{test_name}_{timestamp}.png"
    try:
        page.screenshot(path=str(screenshot_path), full_page=True)
    except (PlaywrightError, OSError) as e:
        logger.warning(f"Could not capture failure screenshot: {e}")
        return
    logger.info(f"Screenshot saved: {screenshot_path}")


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store test results on the item and screenshot failed browser tests."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)

    if rep.when == "call" and rep.failed and E2EConfig.SCREENSHOT_ON_FAILURE:
        _save_failure_screenshot(item)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "e2e: browser tests against the live site")
    config.addinivalue_line("markers", "api: REST API tests against the live site")
    config.addinivalue_line("markers", "live: needs network access to the site under test")
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "smoke: marks tests as smoke tests")


def pytest_report_header(config):
    return f"automation-exercise: {E2EConfig.to_dict()}"


def pytest_collection_modifyitems(config, items):
    """Mark tests by location and skip live tests when the site is unavailable."""
    live_items = []
    for item in items:
        suite = item.path.parent.name
        if suite == "e2e":
            item.add_marker(pytest.mark.e2e)
            item.add_marker(pytest.mark.live)
        elif suite == "api":
            item.add_marker(pytest.mark.api)
            item.add_marker(pytest.mark.live)

        if "live" in item.keywords:
            live_items.append(item)

    if not live_items:
        return

    reason = _live_skip_reason()
    if reason:
        skip_live = pytest.mark.skip(reason=reason)
        for item in live_items:
            item.add_marker(skip_live)
