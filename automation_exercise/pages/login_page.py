"""
Login Page Object

Encapsulates the "Login to your account" form.
"""
from playwright.sync_api import Locator

from .base_page import BasePage


class LoginPage(BasePage):
    """Page object for the login half of /login."""

    PATH = "/login"

    # Selectors
    EMAIL_INPUT = 'input[data-qa="login-email"]'
    PASSWORD_INPUT = 'input[data-qa="login-password"]'
    LOGIN_BUTTON = 'button[data-qa="login-button"]'
    ERROR_MESSAGE = ".login-form p"

    @property
    def email_input(self) -> Locator:
        return self.locator(self.EMAIL_INPUT)

    @property
    def password_input(self) -> Locator:
        return self.locator(self.PASSWORD_INPUT)

    @property
    def login_button(self) -> Locator:
        return self.locator(self.LOGIN_BUTTON)

    def login(self, email: str, password: str) -> None:
        """Complete login flow."""
        self.email_input.fill(email)
        self.password_input.fill(password)
        self.login_button.click()

    def get_error_message(self) -> str:
        return self._text(self.locator(self.ERROR_MESSAGE), timeout=5000)

    def is_login_form_visible(self) -> bool:
        return (
            self._is_visible(self.email_input)
            and self._is_visible(self.password_input)
            and self._is_visible(self.login_button)
        )

    # Assertions
    def assert_login_form_visible(self) -> None:
        assert self.is_login_form_visible(), "Login form is not visible"

    def assert_login_error(self, text: str) -> None:
        message = self.get_error_message()
        assert text in message, f'Expected login error "{text}", got "{message}"'
