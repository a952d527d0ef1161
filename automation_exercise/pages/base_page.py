"""
Base Page Object

Provides common functionality for all page objects.
"""
import logging
import re
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page, expect

from ..config import E2EConfig
from ..helpers.consent_helper import ConsentHelper

logger = logging.getLogger(__name__)


class BasePage:
    """Base class for all page objects."""

    PATH = "/"

    def __init__(self, page: Page, base_url: str = E2EConfig.BASE_URL):
        self.page = page
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.PATH}"

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self, path: str = "") -> None:
        """Navigate to a path relative to base URL."""
        self.page.goto(f"{self.base_url}{path}")

    def navigate(self) -> "BasePage":
        """Navigate to this page's own path."""
        self.goto(self.PATH)
        return self

    def reload(self) -> None:
        self.page.reload()

    def current_url(self) -> str:
        return self.page.url

    def wait_for_url(self, url_pattern: str, timeout: int = None) -> None:
        self.page.wait_for_url(url_pattern, timeout=timeout)

    def dismiss_consent(self) -> bool:
        """Dismiss the consent overlay if the site shows one."""
        return ConsentHelper(self.page).dismiss_consent_modal()

    # =========================================================================
    # Element Interaction
    # =========================================================================

    def safe_click(self, selector: str, timeout: int = None) -> None:
        """Wait for the element to be visible, then click it."""
        self.page.wait_for_selector(selector, state="visible", timeout=timeout)
        self.page.click(selector)

    def click_and_wait_for_navigation(self, selector: str) -> None:
        """Click an element and wait for the resulting navigation."""
        with self.page.expect_navigation():
            self.page.click(selector)

    def get_trimmed_text(self, selector: str) -> Optional[str]:
        """Trimmed text content, or None when the element has none."""
        try:
            text = self.page.text_content(selector)
        except PlaywrightError as e:
            logger.warning(f"Could not read text of {selector}: {e}")
            return None
        return text.strip() if text is not None else None

    def locator(self, selector: str) -> Locator:
        return self.page.locator(selector)

    # =========================================================================
    # Safe queries
    # =========================================================================

    def _is_visible(self, locator: Locator) -> bool:
        """Visibility that treats any lookup failure as not visible."""
        try:
            return locator.is_visible()
        except PlaywrightError as e:
            logger.warning(f"Visibility check failed: {e}")
            return False

    def _text(self, locator: Locator, timeout: int = None) -> str:
        """Text content of the first match, or "" when it cannot be read."""
        try:
            return locator.first.text_content(timeout=timeout) or ""
        except PlaywrightError as e:
            logger.warning(f"Could not read text: {e}")
            return ""

    def _wait_visible(self, locator: Locator, timeout: int) -> bool:
        """Wait up to ``timeout`` ms for the first match to show; never raises."""
        try:
            locator.first.wait_for(state="visible", timeout=timeout)
            return True
        except PlaywrightError:
            return False

    def _count(self, locator: Locator) -> int:
        try:
            return locator.count()
        except PlaywrightError as e:
            logger.warning(f"Could not count elements: {e}")
            return 0

    # =========================================================================
    # Waiting
    # =========================================================================

    def wait_for_load_state(self, state: str = "domcontentloaded", timeout: int = None) -> None:
        self.page.wait_for_load_state(state, timeout=timeout)

    def wait(self, milliseconds: int) -> None:
        """Wait for specified time (use sparingly)."""
        self.page.wait_for_timeout(milliseconds)

    # =========================================================================
    # Assertions
    # =========================================================================

    def expect_url(self, pattern: str) -> None:
        """Assert URL matches pattern."""
        expect(self.page).to_have_url(re.compile(pattern))

    def expect_title(self, title: str) -> None:
        expect(self.page).to_have_title(title)

    def screenshot(self, path: str = None, full_page: bool = False) -> bytes:
        return self.page.screenshot(path=path, full_page=full_page)
