"""
Product Catalog Page Object

Encapsulates /products: the product grid, search, category and brand
sidebars, and the "Added!" cart modal.
"""
import logging
import re
from typing import List

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, expect

from .base_page import BasePage

logger = logging.getLogger(__name__)

BRAND_COUNT_PREFIX = re.compile(r"^\(\d+\)\s*")


class ProductCatalogPage(BasePage):
    """Page object for product listing, search, categories and brands."""

    PATH = "/products"

    # Selectors
    PRODUCT_LIST = ".features_items"
    SEARCH_INPUT = "input#search_product"
    SEARCH_BUTTON = "button#submit_search"
    PRODUCT_ITEM = ".productinfo.text-center"
    ADD_TO_CART = ".add-to-cart"
    VIEW_PRODUCT = 'a[href*="/product_details/"]'
    CONTINUE_SHOPPING = 'button[data-dismiss="modal"]'
    ADDED_TO_CART_MODAL = ".modal-content"
    TITLE_HEADER = "h2.title.text-center"
    CATEGORY_HEADER = "h2.title.text-center, .features_items .title.text-center"
    CATEGORY_SECTION = ".left-sidebar #accordian"
    BRAND_SECTION = ".left-sidebar .brands_products"
    BRAND_LINKS = ".brands_products a"

    MODAL_TIMEOUT = 5000
    SECTION_TIMEOUT = 10000

    # =========================================================================
    # Locators
    # =========================================================================

    @property
    def product_list(self) -> Locator:
        return self.locator(self.PRODUCT_LIST)

    @property
    def product_items(self) -> Locator:
        return self.locator(self.PRODUCT_ITEM)

    @property
    def added_to_cart_modal(self) -> Locator:
        return self.locator(self.ADDED_TO_CART_MODAL)

    @property
    def search_results_header(self) -> Locator:
        return self.locator(self.TITLE_HEADER).first

    @property
    def category_section(self) -> Locator:
        return self.locator(self.CATEGORY_SECTION)

    @property
    def brand_section(self) -> Locator:
        return self.locator(self.BRAND_SECTION)

    @property
    def view_cart_button(self) -> Locator:
        return self.page.get_by_role("link", name="View Cart")

    def product_item(self, index: int) -> Locator:
        return self.product_items.nth(index)

    # =========================================================================
    # Navigation and search
    # =========================================================================

    def navigate(self) -> "ProductCatalogPage":
        self.goto(self.PATH)
        self.dismiss_consent()
        return self

    def search_for_product(self, product_name: str) -> None:
        self.locator(self.SEARCH_INPUT).fill(product_name)
        self.locator(self.SEARCH_BUTTON).click()

    def view_first_product(self) -> None:
        self.locator(self.VIEW_PRODUCT).first.click()

    def view_product_by_index(self, index: int) -> None:
        self.locator(self.VIEW_PRODUCT).nth(index).click()

    def select_category(self, category: str, subcategory: str) -> None:
        """Expand a sidebar category and open one of its subcategories."""
        self.goto(self.PATH)
        self.category_section.wait_for(state="visible", timeout=self.SECTION_TIMEOUT)

        self.locator(f'a[href="#{category}"]').first.click()
        self.wait(1000)

        subcategory_link = self.locator(
            f'a[href*="/category_products/"]:has-text("{subcategory}")'
        ).first
        subcategory_link.wait_for(state="visible", timeout=self.MODAL_TIMEOUT)
        subcategory_link.click()
        self.wait_for_load_state("domcontentloaded")

    def select_brand(self, brand_name: str) -> None:
        self.locator(f'{self.BRAND_LINKS}:has-text("{brand_name}")').first.click()

    # =========================================================================
    # Cart interactions
    # =========================================================================

    def hover_over_product(self, index: int) -> None:
        self.product_item(index).hover()

    def add_product_to_cart_by_index(self, index: int) -> None:
        self.product_item(index).locator(self.ADD_TO_CART).first.click()

    def add_first_product_to_cart(self) -> None:
        """Add the first product and wait for the confirmation modal."""
        self.add_product_to_cart_by_index(0)
        self.added_to_cart_modal.wait_for(state="visible", timeout=self.MODAL_TIMEOUT)

    def add_second_product_to_cart(self) -> None:
        self.add_product_to_cart_by_index(1)

    def add_first_search_result_to_cart(self) -> None:
        """Add the first search hit and stay on the results page."""
        self.add_first_product_to_cart()
        self.continue_shopping()

    def continue_shopping(self) -> None:
        self.locator(self.CONTINUE_SHOPPING).click()

    def view_cart(self) -> None:
        self.added_to_cart_modal.wait_for(state="visible")
        expect(self.added_to_cart_modal).to_be_visible()
        self.view_cart_button.click()

    # =========================================================================
    # Queries
    # =========================================================================

    def is_product_list_visible(self) -> bool:
        return self._is_visible(self.product_list.first)

    def is_all_products_page_loaded(self) -> bool:
        try:
            self.wait_for_load_state("domcontentloaded")
            self.search_results_header.wait_for(state="visible", timeout=self.SECTION_TIMEOUT)
        except PlaywrightError as e:
            logger.warning(f"Error checking if products page loaded: {e}")
            return False
        return "ALL PRODUCTS" in self._text(self.search_results_header)

    def is_search_results_visible(self) -> bool:
        return self._is_visible(self.search_results_header)

    def get_search_results_text(self) -> str:
        return self._text(self.search_results_header)

    def get_category_header_text(self) -> str:
        return self._text(self.locator(self.CATEGORY_HEADER))

    def is_brand_page_loaded(self) -> bool:
        return "BRAND" in self._text(self.locator(".features_items .title.text-center"))

    def get_product_count(self) -> int:
        return self._count(self.product_items)

    def get_product_name(self, index: int) -> str:
        return self._text(self.product_item(index).locator("p"))

    def get_product_names(self) -> List[str]:
        return [self.get_product_name(i) for i in range(self.get_product_count())]

    def get_product_price(self, index: int) -> str:
        return self._text(self.product_item(index).locator("h2"))

    def is_add_to_cart_visible(self, index: int) -> bool:
        return self._is_visible(self.product_item(index).locator(self.ADD_TO_CART).first)

    def get_available_brands(self) -> List[str]:
        """Brand names from the sidebar, with the "(n)" count prefix removed."""
        try:
            self.brand_section.wait_for(state="visible", timeout=self.SECTION_TIMEOUT)
            texts = self.locator(self.BRAND_LINKS).all_text_contents()
        except PlaywrightError as e:
            logger.warning(f"Could not read brand list: {e}")
            return []

        brands = []
        for text in texts:
            name = BRAND_COUNT_PREFIX.sub("", text.strip())
            if name:
                brands.append(name)
        return brands

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_page_loaded(self) -> None:
        """A visible, non-empty product grid counts as loaded; else check the header."""
        if self.is_product_list_visible():
            assert self.get_product_count() > 0, "No products found on page"
            return

        assert (
            self.is_all_products_page_loaded()
        ), "Products page not loaded - neither header nor product list visible"

    def assert_search_results_visible(self, search_term: str) -> None:
        assert self.is_search_results_visible(), f'Search results not visible for "{search_term}"'

        results_text = self.get_search_results_text()
        assert (
            "SEARCHED PRODUCTS" in results_text.upper()
        ), f'Search results header missing. Found: "{results_text}"'

        assert self.get_product_count() > 0, f'No search results found for "{search_term}"'

    def assert_category_page_loaded(self, expected_text: str) -> None:
        self.wait_for_load_state("domcontentloaded")

        header_text = self.get_category_header_text()
        assert expected_text.upper() in header_text.upper(), (
            f'Category page header mismatch. Expected: "{expected_text}", '
            f'Found: "{header_text}"'
        )
        assert self.get_product_count() > 0, "No products found in category page"
        logger.info(f"Category page loaded successfully: {header_text.strip()}")

    def assert_brand_page_loaded(self, expected_brand_name: str) -> None:
        self.wait_for_load_state("domcontentloaded")

        # Header reads "Brand - Polo Products"
        header_text = self.get_category_header_text()
        assert expected_brand_name.upper() in header_text.upper(), (
            f'Brand page header mismatch. Expected brand "{expected_brand_name}" '
            f'in header, Found: "{header_text}"'
        )
        assert self.get_product_count() > 0, f'No products found for brand "{expected_brand_name}"'
        logger.info(f"Brand page loaded successfully: {header_text.strip()}")
