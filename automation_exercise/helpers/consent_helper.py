"""
Consent Helper

Dismisses the cookie/privacy consent dialog the site shows on first visit.
"""
import logging
from urllib.parse import urlparse

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from ..config import E2EConfig

logger = logging.getLogger(__name__)


class ConsentHelper:
    """Centralized handling of consent modals and privacy banners."""

    CONSENT_BUTTON = 'button:has-text("Consent")'
    CONSENT_MODAL = '[role="dialog"], .modal'

    APPEAR_DELAY_MS = 1000
    BUTTON_TIMEOUT_MS = 3000
    SETTLE_DELAY_MS = 500

    def __init__(self, page: Page):
        self.page = page

    def dismiss_consent_modal(self) -> bool:
        """Click the consent button if it shows up; return whether it did."""
        try:
            self.page.wait_for_timeout(self.APPEAR_DELAY_MS)
            button = self.page.locator(self.CONSENT_BUTTON).first
            button.wait_for(state="visible", timeout=self.BUTTON_TIMEOUT_MS)
            button.click()
            logger.info("Consent modal dismissed")
            self.page.wait_for_timeout(self.SETTLE_DELAY_MS)
            return True
        except PlaywrightError:
            logger.debug("No consent modal found")
            return False

    def set_consent_cookies(self, base_url: str = E2EConfig.BASE_URL) -> None:
        """Pre-grant consent so later navigations skip the dialog."""
        domain = urlparse(base_url).hostname or "automationexercise.com"
        self.page.context.add_cookies(
            [{"name": "consent", "value": "granted", "domain": domain, "path": "/"}]
        )

    def is_consent_modal_visible(self) -> bool:
        try:
            return self.page.locator(self.CONSENT_MODAL).first.is_visible()
        except PlaywrightError:
            return False

    def navigate_with_consent_handling(self, url: str) -> None:
        self.page.goto(url)
        self.dismiss_consent_modal()
