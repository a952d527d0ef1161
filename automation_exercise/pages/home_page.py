"""
Home Page Object

Encapsulates the landing page, header navigation, footer subscription and
recommended items.
"""
import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator

from ..config import E2EConfig
from .base_page import BasePage

logger = logging.getLogger(__name__)


class HomePage(BasePage):
    """Page object for the home page and the shared site header."""

    PATH = "/"
    SITE_TITLE = E2EConfig.SITE_TITLE

    # Header
    NAV_BAR = "ul.nav.navbar-nav"
    PRODUCTS_LINK = 'a[href="/products"]'
    CONTACT_LINK = 'a[href="/contact_us"]'
    LOGGED_IN_NAME = ".shop-menu .fa-user + b"

    # Footer subscription
    SUBSCRIPTION_SECTION = "#footer .single-widget"
    SUBSCRIPTION_EMAIL_INPUT = "input#susbscribe_email"
    SUBSCRIBE_BUTTON = "button#subscribe"
    SUBSCRIPTION_SUCCESS = ".alert-success"
    SUBSCRIPTION_HEADER = "text=Subscription"

    # Recommended items
    RECOMMENDED_SECTION = ".recommended_items"
    RECOMMENDED_PRODUCTS = ".recommended_items .item"
    RECOMMENDED_ADD_TO_CART = ".recommended_items .add-to-cart"

    # Carousel
    CAROUSEL = "#slider"

    # =========================================================================
    # Locators
    # =========================================================================

    @property
    def nav_bar(self) -> Locator:
        return self.locator(self.NAV_BAR)

    @property
    def carousel(self) -> Locator:
        return self.locator(self.CAROUSEL)

    @property
    def signup_login_link(self) -> Locator:
        return self.page.get_by_role("link", name="Signup / Login").first

    @property
    def cart_link(self) -> Locator:
        return self.page.get_by_role("link", name="Cart").first

    @property
    def logout_link(self) -> Locator:
        return self.page.get_by_role("link", name="Logout")

    @property
    def delete_account_link(self) -> Locator:
        return self.page.get_by_role("link", name="Delete Account")

    @property
    def test_cases_link(self) -> Locator:
        return self.locator("li").get_by_role("link", name="Test Cases")

    @property
    def user_name(self) -> Locator:
        return self.locator(self.LOGGED_IN_NAME)

    def logged_in_as_text(self, user_name: str) -> Locator:
        return self.page.get_by_text(f"Logged in as {user_name}")

    # =========================================================================
    # Navigation
    # =========================================================================

    def navigate(self) -> "HomePage":
        """Open the home page and clear the consent overlay."""
        self.goto(self.PATH)
        self.dismiss_consent()
        return self

    def go_to_login(self) -> None:
        self.signup_login_link.click()

    def go_to_products(self) -> None:
        self.locator(self.PRODUCTS_LINK).first.click()
        self.wait_for_load_state("domcontentloaded")

    def go_to_cart(self) -> None:
        self.cart_link.click()
        self.wait_for_load_state("domcontentloaded")

    def go_to_contact(self) -> None:
        self.locator(self.CONTACT_LINK).first.click()

    def go_to_test_cases(self) -> None:
        self.test_cases_link.first.click()

    def logout(self) -> None:
        self.logout_link.click()

    def delete_account(self) -> None:
        self.delete_account_link.click()

    # =========================================================================
    # State
    # =========================================================================

    def is_user_logged_in(self, expected_name: str = "") -> bool:
        """Logout, Delete Account and the greeting must all be visible."""
        logged_in = (
            self._is_visible(self.logout_link)
            and self._is_visible(self.delete_account_link)
            and (not expected_name or self._is_visible(self.logged_in_as_text(expected_name)))
        )
        if not logged_in:
            return False

        if expected_name:
            return self._text(self.user_name).strip() == expected_name
        return True

    def is_home_page_loaded(self) -> bool:
        try:
            self.wait_for_load_state("domcontentloaded")
            self.nav_bar.first.wait_for(state="visible")
            self.carousel.wait_for(state="visible")
        except PlaywrightError as e:
            logger.warning(f"Home page did not finish loading: {e}")
            return False

        title_ok = self.page.title() == self.SITE_TITLE
        return title_ok and self._is_visible(self.nav_bar.first) and self._is_visible(self.carousel)

    # =========================================================================
    # Subscription
    # =========================================================================

    def scroll_to_subscription(self) -> None:
        self.locator(self.SUBSCRIPTION_SECTION).first.scroll_into_view_if_needed()

    def scroll_to_bottom(self) -> None:
        self.page.evaluate("window.scrollTo(0, document.body.scrollHeight)")

    def is_subscription_section_visible(self) -> bool:
        return self._is_visible(self.locator(self.SUBSCRIPTION_HEADER).first)

    def subscribe_with_email(self, email: str) -> None:
        self.locator(self.SUBSCRIPTION_EMAIL_INPUT).fill(email)
        self.locator(self.SUBSCRIBE_BUTTON).click()

    def get_subscription_success_message(self) -> str:
        return self._text(self.locator(self.SUBSCRIPTION_SUCCESS))

    def is_subscription_success_message_visible(self, timeout: int = 5000) -> bool:
        return self._wait_visible(self.locator(self.SUBSCRIPTION_SUCCESS), timeout)

    # =========================================================================
    # Recommended items
    # =========================================================================

    def is_recommended_items_visible(self) -> bool:
        return self._is_visible(self.locator(self.RECOMMENDED_SECTION))

    def get_recommended_items_count(self) -> int:
        return self._count(self.locator(self.RECOMMENDED_PRODUCTS))

    def add_recommended_item_to_cart(self, index: int = 0) -> None:
        self.locator(self.RECOMMENDED_ADD_TO_CART).nth(index).click()

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_home_page_loaded(self) -> None:
        assert self.is_home_page_loaded(), "Home page is not loaded properly"

    def assert_recommended_items_visible(self) -> None:
        assert self.is_recommended_items_visible(), "Recommended items section not visible"
        assert self.get_recommended_items_count() > 0, "No recommended items found"

    def assert_user_logged_in(self, expected_name: str) -> None:
        assert self.is_user_logged_in(
            expected_name
        ), f'User "{expected_name}" is not logged in or name doesn\'t match'
