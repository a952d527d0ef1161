"""
Page object composition and download scoping shared by the pytest fixtures.
"""
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator, Optional

from playwright.sync_api import Page

from ..config import E2EConfig
from ..pages import (
    CartPage,
    CheckoutPage,
    ContactPage,
    HomePage,
    LoginPage,
    ProductCatalogPage,
    ProductPage,
    SignupPage,
    TestCasesPage,
)
from .download_cleanup import DownloadCleanup

logger = logging.getLogger(__name__)


@dataclass
class PageObjects:
    """Every page object, bound to one browser page."""

    home: HomePage
    login: LoginPage
    signup: SignupPage
    products: ProductCatalogPage
    product: ProductPage
    cart: CartPage
    checkout: CheckoutPage
    contact: ContactPage
    test_cases: TestCasesPage


def build_page_objects(
    page: Page,
    base_url: str = E2EConfig.BASE_URL,
    downloads: Optional[DownloadCleanup] = None,
) -> PageObjects:
    downloads = downloads or DownloadCleanup()
    return PageObjects(
        home=HomePage(page, base_url),
        login=LoginPage(page, base_url),
        signup=SignupPage(page, base_url),
        products=ProductCatalogPage(page, base_url),
        product=ProductPage(page, base_url),
        cart=CartPage(page, base_url),
        checkout=CheckoutPage(page, base_url, downloads=downloads),
        contact=ContactPage(page, base_url),
        test_cases=TestCasesPage(page, base_url),
    )


@contextmanager
def clean_downloads(cleanup: DownloadCleanup) -> Generator[DownloadCleanup, None, None]:
    """Start with an empty downloads directory and empty it again on exit."""
    cleanup.ensure_downloads_dir()
    cleanup.cleanup_all_downloads()
    try:
        yield cleanup
    finally:
        removed = cleanup.cleanup_all_downloads()
        logger.debug(f"Removed {removed} downloaded files after test")
