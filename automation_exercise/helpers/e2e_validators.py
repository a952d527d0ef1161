"""
E2E Validators

Multi-step UI checks shared by the browser suites. Each one raises
AssertionError on the first mismatch, naming what was expected and what
the page showed.
"""
from typing import TYPE_CHECKING, Iterable, Optional, Union

from playwright.sync_api import Page

from .user_data import AddressInfo, CartProductData, UserData

if TYPE_CHECKING:
    from ..pages.cart_page import CartPage
    from ..pages.checkout_page import CheckoutPage
    from ..pages.product_catalog_page import ProductCatalogPage

Address = Union[AddressInfo, UserData]

SUBSCRIPTION_HEADER = "text=SUBSCRIPTION"
SUBSCRIPTION_EMAIL_INPUT = "input#susbscribe_email"
SUBSCRIBE_BUTTON = "button#subscribe"


def validate_cart_state(cart_page: "CartPage", expected_products: Iterable[CartProductData]) -> None:
    """Cart holds exactly ``expected_products`` with matching quantity and price."""
    expected = list(expected_products)
    assert cart_page.is_cart_page_loaded(), "Cart page not loaded"

    actual_count = cart_page.get_cart_items_count()
    assert actual_count == len(
        expected
    ), f"Expected {len(expected)} items in cart, found {actual_count}"

    for product in expected:
        assert cart_page.is_product_in_cart(
            product.product_id
        ), f"Product {product.product_id} not found in cart"

        quantity = cart_page.get_product_quantity(product.product_id)
        assert quantity == str(product.quantity), (
            f"Product {product.product_id} quantity mismatch: "
            f"expected {product.quantity}, got {quantity}"
        )

        if product.expected_price:
            price = cart_page.get_product_price(product.product_id)
            assert price == product.expected_price, (
                f"Product {product.product_id} price mismatch: "
                f"expected {product.expected_price}, got {price}"
            )


def validate_search_results(
    catalog_page: "ProductCatalogPage",
    search_term: str,
    should_have_results: bool,
    minimum_results: Optional[int] = None,
    should_contain_term: bool = False,
) -> None:
    """
    Check a search results page.

    With ``should_contain_term`` it is enough for one product name to
    contain the term (case-insensitive); other hits may match on
    description or category.
    """
    visible = catalog_page.is_search_results_visible()

    if not should_have_results:
        assert not visible, f'Expected no results for "{search_term}" but found some'
        return

    assert visible, f'No search results found for "{search_term}"'

    header = catalog_page.get_search_results_text()
    assert "SEARCHED PRODUCTS" in header, f'Search results header not displayed correctly: "{header}"'

    if minimum_results:
        count = catalog_page.get_product_count()
        assert count >= minimum_results, (
            f'Expected at least {minimum_results} results for "{search_term}", found {count}'
        )

    if should_contain_term:
        names = catalog_page.get_product_names()
        term = search_term.lower()
        assert any(
            term in name.lower() for name in names
        ), f'No products found containing "{search_term}" in their names: {names}'


def validate_checkout_complete(
    checkout_page: "CheckoutPage",
    expected_items: Iterable[str],
    billing_address: Optional[Address] = None,
    delivery_address: Optional[Address] = None,
) -> None:
    assert checkout_page.is_order_successful(), "Order was not completed successfully"

    actual_items = checkout_page.get_order_items()
    for expected_item in expected_items:
        assert any(
            expected_item in item for item in actual_items
        ), f'Expected item "{expected_item}" not found in order: {actual_items}'

    if delivery_address:
        delivery = checkout_page.get_delivery_address()
        for part in (delivery_address.first_name, delivery_address.last_name):
            assert part in delivery, f'Delivery address missing "{part}": {delivery!r}'

    if billing_address:
        billing = checkout_page.get_billing_address()
        for part in (billing_address.first_name, billing_address.last_name):
            assert part in billing, f'Billing address missing "{part}": {billing!r}'


def assert_subscription_visible(page: Page) -> None:
    """Footer subscription widget is shown; works on any page of the site."""
    assert page.locator(SUBSCRIPTION_HEADER).first.is_visible(), "SUBSCRIPTION section not visible in footer"
    assert page.locator(SUBSCRIPTION_EMAIL_INPUT).is_visible(), "Subscription email input not visible"
    assert page.locator(SUBSCRIBE_BUTTON).is_visible(), "Subscribe button not visible"
