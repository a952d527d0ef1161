"""
Checkout Page Object

Encapsulates /checkout (address review and comment), /payment and the
order-placed page with its invoice download.
"""
import logging
from pathlib import Path
from typing import List, Optional, Union

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from ..config import E2EConfig
from ..helpers.download_cleanup import DownloadCleanup
from ..helpers.user_data import AddressInfo, PaymentData, UserData
from .base_page import BasePage

logger = logging.getLogger(__name__)


class CheckoutPage(BasePage):
    """Page object for checkout, payment and order confirmation."""

    PATH = "/checkout"
    PAYMENT_DONE_PATH = "/payment_done/"

    # Checkout
    ADDRESS_SECTION = ".checkout-information"
    DELIVERY_ADDRESS = "#address_delivery"
    BILLING_ADDRESS = "#address_invoice"
    ORDER_REVIEW = "#cart_info"
    ORDER_ITEMS = "#cart_info_table .cart_description h4"
    ORDER_TOTAL = ".cart_total_price"
    COMMENT_TEXT_AREA = 'textarea[name="message"]'
    ORDER_CONFIRMATION = ".order-confirmation"

    # Payment
    NAME_ON_CARD = 'input[data-qa="name-on-card"]'
    CARD_NUMBER = 'input[data-qa="card-number"]'
    CVC = 'input[data-qa="cvc"]'
    EXPIRY_MONTH = 'input[data-qa="expiry-month"]'
    EXPIRY_YEAR = 'input[data-qa="expiry-year"]'
    PAY_BUTTON = 'button[data-qa="pay-button"]'

    # Order placed
    ORDER_SUCCESS = 'h2[data-qa="order-placed"]'
    DOWNLOAD_INVOICE = 'a[href*="download_invoice"]'
    CONTINUE_BUTTON = 'a[data-qa="continue-button"]'

    ORDER_TIMEOUT = 10000

    def __init__(
        self,
        page: Page,
        base_url: str = E2EConfig.BASE_URL,
        downloads: Optional[DownloadCleanup] = None,
    ):
        super().__init__(page, base_url)
        self.downloads = downloads or DownloadCleanup()

    @property
    def place_order_button(self) -> Locator:
        return self.page.get_by_role("link", name="Place Order")

    @property
    def delivery_address_section(self) -> Locator:
        return self.locator(self.DELIVERY_ADDRESS)

    @property
    def billing_address_section(self) -> Locator:
        return self.locator(self.BILLING_ADDRESS)

    @property
    def order_success_message(self) -> Locator:
        return self.locator(self.ORDER_SUCCESS)

    # =========================================================================
    # Checkout
    # =========================================================================

    def is_checkout_page_loaded(self) -> bool:
        return self._wait_visible(self.locator(self.ADDRESS_SECTION), 5000) and self._is_visible(
            self.place_order_button
        )

    def get_delivery_address(self) -> str:
        return self._text(self.delivery_address_section)

    def get_billing_address(self) -> str:
        return self._text(self.billing_address_section)

    def get_order_items(self) -> List[str]:
        try:
            return self.locator(self.ORDER_ITEMS).all_text_contents()
        except PlaywrightError as e:
            logger.warning(f"Could not read order items: {e}")
            return []

    def get_order_total(self) -> str:
        return self._text(self.locator(self.ORDER_TOTAL))

    def enter_comment(self, comment: str) -> None:
        self.locator(self.COMMENT_TEXT_AREA).fill(comment)

    def place_order(self) -> None:
        self.place_order_button.click()

    def add_comment_and_place_order(self, comment: str) -> None:
        self.enter_comment(comment)
        self.place_order()

    def is_order_confirmed(self) -> bool:
        return self._is_visible(self.locator(self.ORDER_CONFIRMATION))

    def verify_address_details(self, expected: Union[AddressInfo, UserData]) -> bool:
        delivery = self.get_delivery_address()
        billing = self.get_billing_address()
        return all(
            [
                expected.first_name in delivery,
                expected.last_name in delivery,
                expected.address in delivery,
                expected.city in delivery,
                expected.first_name in billing,
                expected.last_name in billing,
            ]
        )

    # =========================================================================
    # Payment
    # =========================================================================

    def is_payment_section_visible(self) -> bool:
        return self._is_visible(self.locator(self.NAME_ON_CARD)) and self._is_visible(
            self.locator(self.CARD_NUMBER)
        )

    def fill_payment_details(self, payment: PaymentData) -> None:
        self.locator(self.NAME_ON_CARD).fill(payment.name_on_card)
        self.locator(self.CARD_NUMBER).fill(payment.card_number)
        self.locator(self.CVC).fill(payment.cvc)
        self.locator(self.EXPIRY_MONTH).fill(payment.expiration_month)
        self.locator(self.EXPIRY_YEAR).fill(payment.expiration_year)

    def confirm_payment(self) -> None:
        self.locator(self.PAY_BUTTON).click()

    def complete_payment(self, payment: PaymentData) -> None:
        self.fill_payment_details(payment)
        self.confirm_payment()

    # =========================================================================
    # Order placed
    # =========================================================================

    def get_order_success_message(self) -> str:
        return self._text(self.order_success_message)

    def is_order_successful(self) -> bool:
        """Success heading visible within the timeout, or the payment_done URL."""
        try:
            self.wait_for_load_state("domcontentloaded", timeout=self.ORDER_TIMEOUT)
            self.order_success_message.wait_for(state="visible", timeout=self.ORDER_TIMEOUT)
            return self.order_success_message.is_visible()
        except PlaywrightError:
            return self.PAYMENT_DONE_PATH in self.current_url()

    def wait_for_order_completion(self) -> None:
        self.page.wait_for_selector(".alert-success, .order-placed", timeout=self.ORDER_TIMEOUT)

    def download_invoice(self) -> Path:
        """Download the invoice into the downloads directory and return its path."""
        with self.page.expect_download() as download_info:
            self.locator(self.DOWNLOAD_INVOICE).click()
        download = download_info.value

        file_name = download.suggested_filename
        if not file_name:
            raise AssertionError("Download failed - no filename suggested")

        self.downloads.ensure_downloads_dir()
        target = self.downloads.path_for(file_name)
        download.save_as(target)
        logger.info(f"Invoice downloaded successfully: {target}")
        return target

    def click_continue_after_order(self) -> None:
        self.click_and_wait_for_navigation(self.CONTINUE_BUTTON)

    def navigate_to_checkout(self) -> None:
        self.goto(self.PATH)

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_checkout_page_loaded(self) -> None:
        assert (
            self.is_checkout_page_loaded()
        ), "Checkout page not loaded - address section or place order button not visible"

    def assert_address_details_match(self, expected: Union[AddressInfo, UserData]) -> None:
        assert self._is_visible(self.delivery_address_section) and self._is_visible(
            self.billing_address_section
        ), "Address sections not visible on checkout page"

        full_name = f"{expected.first_name} {expected.last_name}"
        delivery = self.get_delivery_address()
        billing = self.get_billing_address()

        assert (
            expected.first_name in delivery and expected.last_name in delivery
        ), f"Delivery address missing expected name: {full_name}"
        assert (
            expected.first_name in billing and expected.last_name in billing
        ), f"Billing address missing expected name: {full_name}"

    def assert_order_successful(self) -> None:
        assert self.is_order_successful(), "Order success message not visible - order may have failed"

    def assert_invoice_downloaded(self) -> Path:
        try:
            path = self.download_invoice()
        except PlaywrightError as e:
            raise AssertionError(f"Invoice download assertion failed: {e}") from e

        assert self.downloads.verify_download(path), f"Downloaded invoice is missing or empty: {path}"
        return path
