"""
Product Page Object

Encapsulates /product_details/<id>: product information, quantity,
add-to-cart and the review form.
"""
import logging
import re
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator

from .base_page import BasePage

logger = logging.getLogger(__name__)


class ProductPage(BasePage):
    """Page object for a single product's detail page."""

    PATH = "/product_details/{product_id}"

    # Product information
    PRODUCT_TITLE = ".product-information h2"
    PRODUCT_PRICE = ".product-information span span"
    PRODUCT_INFO_LINES = ".product-information p"
    AVAILABILITY = '.product-information p:has-text("Availability")'
    CONDITION = '.product-information p:has-text("Condition")'
    BRAND = '.product-information p:has-text("Brand")'
    PRODUCT_IMAGE = '[data-qa="product-image"], .product-details img, .view-product img'
    ADD_TO_CART_BUTTON = "button.cart"
    QUANTITY_INPUT = "input#quantity"

    # Reviews
    REVIEW_SECTION = ".category-tab"
    REVIEW_TAB = 'a[href="#reviews"]'
    REVIEW_NAME_INPUT = 'input[placeholder="Your Name"]'
    REVIEW_EMAIL_INPUT = 'input[placeholder="Email Address"]'
    REVIEW_TEXT_AREA = 'textarea[placeholder="Add Review Here!"]'
    REVIEW_SUBMIT = "button#button-review"
    REVIEW_SUCCESS = "#review-section .alert-success, .category-tab .alert-success"
    WRITE_REVIEW_TEXT = "text=Write Your Review"

    REVIEW_SUCCESS_TEXT = "thank you for your review"

    @property
    def product_title(self) -> Locator:
        return self.locator(self.PRODUCT_TITLE).first

    @property
    def product_price(self) -> Locator:
        return self.locator(self.PRODUCT_PRICE).first

    @property
    def add_to_cart_button(self) -> Locator:
        return self.locator(self.ADD_TO_CART_BUTTON)

    @property
    def quantity_input(self) -> Locator:
        return self.locator(self.QUANTITY_INPUT)

    @property
    def product_category(self) -> Locator:
        return self.locator(self.PRODUCT_INFO_LINES).first

    @property
    def availability_status(self) -> Locator:
        return self.locator(self.AVAILABILITY).first

    @property
    def product_image(self) -> Locator:
        return self.locator(self.PRODUCT_IMAGE).first

    def navigate_to_product(self, product_id: int) -> "ProductPage":
        self.goto(self.PATH.format(product_id=product_id))
        return self

    # =========================================================================
    # Actions
    # =========================================================================

    def add_to_cart(self, quantity: int = 1) -> None:
        self.quantity_input.fill(str(quantity))
        self.add_to_cart_button.click()

    def set_quantity(self, quantity: int) -> None:
        self.quantity_input.clear()
        self.quantity_input.fill(str(quantity))

    def add_to_cart_from_detail(self) -> None:
        self.add_to_cart_button.click()

    def click_review_tab(self) -> None:
        self.safe_click(self.REVIEW_TAB)

    def submit_review(self, name: str, email: str, review: str) -> None:
        self.locator(self.REVIEW_SECTION).first.scroll_into_view_if_needed()
        self.click_review_tab()
        self.locator(self.REVIEW_NAME_INPUT).fill(name)
        self.locator(self.REVIEW_EMAIL_INPUT).fill(email)
        self.locator(self.REVIEW_TEXT_AREA).fill(review)
        self.locator(self.REVIEW_SUBMIT).click()

    def take_product_screenshot(self, directory: str = "screenshots") -> Path:
        title = self.get_product_title() or "product"
        name = "product-" + re.sub(r"\s+", "-", title.strip()).lower()
        path = Path(directory) / f"{name}.png"
        path.parent.mkdir(parents=True, exist_ok=True)
        self.page.screenshot(path=str(path))
        return path

    # =========================================================================
    # Queries
    # =========================================================================

    def is_product_page_loaded(self) -> bool:
        return (
            self._is_visible(self.product_title)
            and self._is_visible(self.product_price)
            and self._is_visible(self.add_to_cart_button)
        )

    def is_product_detail_visible(self) -> bool:
        return (
            self._is_visible(self.product_title)
            and self._is_visible(self.product_price)
            and self._is_visible(self.product_category)
            and self._is_visible(self.availability_status)
        )

    def get_product_title(self) -> str:
        return self._text(self.product_title)

    def get_product_price(self) -> str:
        return self._text(self.product_price)

    def get_product_description(self) -> str:
        return self._text(self.locator(self.PRODUCT_INFO_LINES))

    def get_product_category(self) -> str:
        return self._text(self.product_category)

    def get_product_condition(self) -> str:
        return self._text(self.locator(self.CONDITION)).replace("Condition:", "").strip()

    def get_product_brand(self) -> str:
        return self._text(self.locator(self.BRAND)).replace("Brand:", "").strip()

    def is_product_available(self) -> bool:
        return "in stock" in self._text(self.availability_status).lower()

    def get_quantity_value(self) -> int:
        """Quantity field value; 1 when it is missing or not a number."""
        try:
            return int(self.quantity_input.input_value())
        except PlaywrightError as e:
            logger.warning(f"Could not read quantity: {e}")
            return 1
        except ValueError:
            return 1

    def is_product_image_visible(self) -> bool:
        return self._is_visible(self.product_image)

    def verify_all_product_details(self) -> bool:
        return (
            self.is_product_detail_visible()
            and self.is_product_image_visible()
            and self.get_product_category() != ""
            and self.get_product_brand() != ""
        )

    def is_write_review_visible(self) -> bool:
        return self._is_visible(self.locator(self.WRITE_REVIEW_TEXT))

    def get_review_success_message(self) -> str:
        success = self.locator(self.REVIEW_SUCCESS)
        self._wait_visible(success, 5000)
        return self._text(success)

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_product_detail_page_loaded(self) -> None:
        assert (
            self.is_product_page_loaded()
        ), "Product detail page not loaded - basic elements not visible"

        title = self.get_product_title()
        assert title, "Product name not visible"

        price = self.get_product_price()
        assert price, "Product price not visible"

        category = self.get_product_category()
        assert category, "Product category not visible"

        # Availability, condition and brand are not shown for every product
        if not self._is_visible(self.availability_status):
            logger.info("Product availability information not found")

        condition = self.get_product_condition()
        brand = self.get_product_brand()
        if not condition and not brand:
            details = self.locator(self.PRODUCT_INFO_LINES).all_text_contents()
            assert details, "No product details found"

        assert self.is_product_image_visible(), "Product image not visible"

        logger.info(f"Product details verified: {title}, {category}, {price}, {condition}, {brand}")

    def assert_review_submitted(self) -> None:
        message = self.get_review_success_message()
        assert (
            self.REVIEW_SUCCESS_TEXT in message.lower()
        ), f'Review submission failed - success message not found or incorrect: "{message}"'
        logger.info(f"Review submitted successfully: {message.strip()}")
