"""
Page Object Models for the Automation Exercise site

Each page object encapsulates the selectors and interactions of one page
and exposes query, action and assert_* methods to the tests.
"""

from .base_page import BasePage
from .cart_page import CartPage
from .checkout_page import CheckoutPage
from .contact_page import ContactPage
from .home_page import HomePage
from .login_page import LoginPage
from .product_catalog_page import ProductCatalogPage
from .product_page import ProductPage
from .signup_page import SignupPage
from .test_cases_page import TestCasesPage

__all__ = [
    "BasePage",
    "HomePage",
    "LoginPage",
    "SignupPage",
    "ProductCatalogPage",
    "ProductPage",
    "CartPage",
    "CheckoutPage",
    "ContactPage",
    "TestCasesPage",
]
