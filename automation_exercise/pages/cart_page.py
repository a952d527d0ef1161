"""
Cart Page Object

Encapsulates /view_cart. Rows are keyed by product id (``#product-<id>``);
every query re-reads the live table and falls back to an empty/zero value
when the row or table is gone.
"""
import logging
from typing import Iterable, List

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator

from ..helpers.user_data import CartProductData
from .base_page import BasePage

logger = logging.getLogger(__name__)


class CartPage(BasePage):
    """Page object for the shopping cart."""

    PATH = "/view_cart"

    # Selectors
    CART_TABLE = "#cart_info_table"
    CART_ROWS = "#cart_info_table tbody tr"
    CHECKOUT_BUTTON = ".check_out"
    REMOVE_BUTTON = ".cart_quantity_delete"
    EMPTY_CART_MESSAGE = "text=Cart is empty!"
    CHECKOUT_MODAL = "#checkoutModal, .modal"
    MODAL_LOGIN_LINK = 'a[href="/login"], a:has-text("Register / Login")'

    # Row cells
    ROW_QUANTITY = ".cart_quantity button"
    ROW_PRICE = ".cart_price p"
    ROW_TOTAL = ".cart_total_price p"
    ROW_NAME = ".cart_description h4 a"
    ROW_DELETE = ".cart_delete a"

    ROW_TIMEOUT = 5000
    CELL_TIMEOUT = 3000

    @property
    def cart_table(self) -> Locator:
        return self.locator(self.CART_TABLE)

    @property
    def cart_rows(self) -> Locator:
        return self.locator(self.CART_ROWS)

    def product_row(self, product_id: int) -> Locator:
        return self.locator(f"#product-{product_id}")

    # =========================================================================
    # Navigation and actions
    # =========================================================================

    def navigate(self) -> "CartPage":
        self.goto(self.PATH)
        self.cart_table.wait_for(state="visible", timeout=10000)
        return self

    def proceed_to_checkout(self) -> None:
        """Click checkout; follow the modal's Register / Login link when shown."""
        self.locator(self.CHECKOUT_BUTTON).first.click()

        modal = self.locator(self.CHECKOUT_MODAL).first
        if not self._wait_visible(modal, 3000):
            return

        login_link = modal.locator(self.MODAL_LOGIN_LINK)
        try:
            if login_link.count() > 0:
                login_link.first.click()
        except PlaywrightError as e:
            logger.warning(f"Checkout modal handling failed: {e}")

    def remove_first_product(self) -> None:
        self.locator(self.REMOVE_BUTTON).first.click()

    def remove_product(self, product_id: int) -> None:
        """Remove one row; raises when the row or its delete control is missing."""
        try:
            row = self.product_row(product_id)
            row.wait_for(state="visible", timeout=self.ROW_TIMEOUT)

            remove_button = row.locator(self.ROW_DELETE)
            remove_button.wait_for(state="visible", timeout=self.CELL_TIMEOUT)
            remove_button.click()
            self.wait(1000)
        except PlaywrightError as e:
            logger.warning(f"Error removing product {product_id}: {e}")
            raise

    # =========================================================================
    # Queries
    # =========================================================================

    def is_cart_visible(self) -> bool:
        return self._is_visible(self.cart_table)

    def is_cart_page_loaded(self) -> bool:
        try:
            self.wait_for_load_state("domcontentloaded")
            self.cart_table.wait_for(state="visible", timeout=self.ROW_TIMEOUT)
            return self.cart_table.is_visible()
        except PlaywrightError as e:
            logger.warning(f"Error checking if cart page loaded: {e}")
            return False

    def is_product_in_cart(self, product_id: int) -> bool:
        # No waiting: a removed row is the expected negative case
        row = self.product_row(product_id)
        try:
            if row.count() == 0:
                return False
            return row.is_visible()
        except PlaywrightError as e:
            logger.warning(f"Error checking if product {product_id} is in cart: {e}")
            return False

    def _cell_text(self, product_id: int, cell_selector: str) -> str:
        row = self.product_row(product_id)
        row.wait_for(state="attached", timeout=self.ROW_TIMEOUT)
        cell = row.locator(cell_selector)
        cell.wait_for(state="attached", timeout=self.CELL_TIMEOUT)
        return cell.text_content() or ""

    def get_product_quantity(self, product_id: int) -> str:
        try:
            self.wait_for_load_state("domcontentloaded")
            return self._cell_text(product_id, self.ROW_QUANTITY).strip() or "0"
        except PlaywrightError as e:
            logger.warning(f"Error getting quantity for product {product_id}: {e}")
            return "0"

    def get_product_price(self, product_id: int) -> str:
        try:
            return self._cell_text(product_id, self.ROW_PRICE)
        except PlaywrightError as e:
            logger.warning(f"Error getting price for product {product_id}: {e}")
            return ""

    def get_total_price(self, product_id: int) -> str:
        try:
            return self._cell_text(product_id, self.ROW_TOTAL)
        except PlaywrightError as e:
            logger.warning(f"Error getting total price for product {product_id}: {e}")
            return ""

    def get_product_name(self, product_id: int) -> str:
        try:
            return self._cell_text(product_id, self.ROW_NAME)
        except PlaywrightError as e:
            logger.warning(f"Error getting name for product {product_id}: {e}")
            return ""

    def get_cart_items_count(self) -> int:
        try:
            if self.cart_table.count() == 0 or not self.cart_table.is_visible():
                return 0
            return self.cart_rows.count()
        except PlaywrightError as e:
            logger.warning(f"Error getting cart items count: {e}")
            return 0

    def is_cart_empty(self) -> bool:
        if self.get_cart_items_count() == 0:
            return True
        return self._is_visible(self.locator(self.EMPTY_CART_MESSAGE))

    def get_all_product_ids(self) -> List[int]:
        """Product ids in row order, parsed from ``product-<id>`` row ids."""
        try:
            self.cart_table.wait_for(state="visible", timeout=self.ROW_TIMEOUT)
            rows = self.cart_rows.all()
        except PlaywrightError as e:
            logger.warning(f"Error getting all product IDs: {e}")
            return []

        product_ids = []
        for row in rows:
            try:
                id_attr = row.get_attribute("id")
            except PlaywrightError as e:
                logger.warning(f"Error processing cart row: {e}")
                continue
            if id_attr and id_attr.startswith("product-"):
                try:
                    product_ids.append(int(id_attr[len("product-") :]))
                except ValueError:
                    continue
        return product_ids

    # =========================================================================
    # Assertions
    # =========================================================================

    def _assert_contents(self, expected: List[CartProductData], context: str) -> None:
        assert self.is_cart_page_loaded(), f"{context}Cart page not loaded"

        actual_count = self.get_cart_items_count()
        assert actual_count == len(
            expected
        ), f"{context}Expected {len(expected)} items in cart, found {actual_count}"

        for product in expected:
            assert self.is_product_in_cart(
                product.product_id
            ), f"{context}Product {product.product_id} not found in cart"

            actual_quantity = self.get_product_quantity(product.product_id)
            assert actual_quantity == str(product.quantity), (
                f"{context}Product {product.product_id} quantity mismatch: "
                f"expected {product.quantity}, got {actual_quantity}"
            )

            if product.expected_price:
                actual_price = self.get_product_price(product.product_id)
                assert actual_price == product.expected_price, (
                    f"{context}Product {product.product_id} price mismatch: "
                    f"expected {product.expected_price}, got {actual_price}"
                )

    def assert_products_in_cart(self, expected: Iterable[CartProductData]) -> None:
        self._assert_contents(list(expected), "")

    def assert_cart_persistence(self, expected: Iterable[CartProductData]) -> None:
        """Same checks as assert_products_in_cart, reported as a persistence failure."""
        self._assert_contents(list(expected), "Cart persistence failed after login: ")

    def assert_cart_page_loaded(self) -> None:
        assert self.is_cart_page_loaded(), "Cart page not loaded properly"
