"""
Signup Page Object

Encapsulates registration: the "New User Signup!" form, the account and
address information form, and the created/deleted confirmation pages.
"""
import logging
from typing import Union

from playwright.sync_api import Error as PlaywrightError

from ..helpers.user_data import AccountInfo, AddressInfo, UserData
from .base_page import BasePage

logger = logging.getLogger(__name__)


class SignupPage(BasePage):
    """Page object for account registration and deletion."""

    PATH = "/login"

    # Initial signup form
    NAME_INPUT = 'input[data-qa="signup-name"]'
    EMAIL_INPUT = 'input[data-qa="signup-email"]'
    SIGNUP_BUTTON = 'button[data-qa="signup-button"]'
    NEW_USER_SIGNUP_TEXT = "text=New User Signup!"
    ERROR_MESSAGE = ".signup-form p"
    EXISTING_EMAIL_ERROR = 'text="Email Address already exist!"'

    # Account information
    ACCOUNT_INFO_HEADER = "text=ENTER ACCOUNT INFORMATION"
    TITLE_RADIO = 'input[value="{title}"]'
    ACCOUNT_NAME_INPUT = 'input[data-qa="name"]'
    ACCOUNT_EMAIL_INPUT = 'input[data-qa="email"]'
    PASSWORD_INPUT = 'input[data-qa="password"]'
    DAY_SELECT = 'select[data-qa="days"]'
    MONTH_SELECT = 'select[data-qa="months"]'
    YEAR_SELECT = 'select[data-qa="years"]'
    NEWSLETTER_CHECKBOX = 'input[data-qa="newsletter"]'
    OFFERS_CHECKBOX = 'input[data-qa="optin"]'

    # Address information
    FIRST_NAME_INPUT = 'input[data-qa="first_name"]'
    LAST_NAME_INPUT = 'input[data-qa="last_name"]'
    COMPANY_INPUT = 'input[data-qa="company"]'
    ADDRESS_INPUT = 'input[data-qa="address"]'
    ADDRESS2_INPUT = 'input[data-qa="address2"]'
    COUNTRY_SELECT = 'select[data-qa="country"]'
    STATE_INPUT = 'input[data-qa="state"]'
    CITY_INPUT = 'input[data-qa="city"]'
    ZIPCODE_INPUT = 'input[data-qa="zipcode"]'
    MOBILE_NUMBER_INPUT = 'input[data-qa="mobile_number"]'

    # Confirmation
    CREATE_ACCOUNT_BUTTON = 'button[data-qa="create-account"]'
    ACCOUNT_CREATED_TEXT = "text=ACCOUNT CREATED!"
    CONTINUE_BUTTON = 'a[data-qa="continue-button"]'
    DELETE_ACCOUNT_BUTTON = 'a[href="/delete_account"]'
    ACCOUNT_DELETED_TEXT = "text=ACCOUNT DELETED!"

    CONFIRMATION_TIMEOUT = 10000

    # =========================================================================
    # Initial signup
    # =========================================================================

    def is_new_user_signup_visible(self) -> bool:
        return self._is_visible(self.locator(self.NEW_USER_SIGNUP_TEXT))

    def is_signup_form_visible(self) -> bool:
        return (
            self._is_visible(self.locator(self.NAME_INPUT))
            and self._is_visible(self.locator(self.EMAIL_INPUT))
            and self._is_visible(self.locator(self.SIGNUP_BUTTON))
        )

    def fill_initial_signup_form(self, name: str, email: str) -> None:
        self.locator(self.NAME_INPUT).fill(name)
        self.locator(self.EMAIL_INPUT).fill(email)
        self.locator(self.SIGNUP_BUTTON).click()

    def get_error_message(self) -> str:
        return self._text(self.locator(self.ERROR_MESSAGE), timeout=5000)

    def is_existing_email_error_visible(self, timeout: int = 5000) -> bool:
        return self._wait_visible(self.locator(self.EXISTING_EMAIL_ERROR), timeout)

    # =========================================================================
    # Account and address information
    # =========================================================================

    def is_account_info_form_visible(self) -> bool:
        return self._wait_visible(self.locator(self.ACCOUNT_INFO_HEADER), self.CONFIRMATION_TIMEOUT)

    def fill_account_information(self, info: AccountInfo) -> None:
        self.locator(self.TITLE_RADIO.format(title=info.title)).check()

        self.locator(self.ACCOUNT_NAME_INPUT).fill(info.name)
        self.locator(self.PASSWORD_INPUT).fill(info.password)

        self.locator(self.DAY_SELECT).select_option(info.day)
        self.locator(self.MONTH_SELECT).select_option(info.month)
        self.locator(self.YEAR_SELECT).select_option(info.year)

        if info.newsletter:
            self._check_optional(self.NEWSLETTER_CHECKBOX, "Newsletter")
        if info.offers:
            self._check_optional(self.OFFERS_CHECKBOX, "Offers")

    def _check_optional(self, selector: str, label: str) -> None:
        checkbox = self.locator(selector)
        try:
            if checkbox.count() > 0:
                checkbox.check()
        except PlaywrightError:
            logger.warning(f"{label} checkbox not found or not interactable")

    def fill_address_information(self, address: Union[AddressInfo, UserData]) -> None:
        self.locator(self.FIRST_NAME_INPUT).fill(address.first_name)
        self.locator(self.LAST_NAME_INPUT).fill(address.last_name)

        if address.company:
            self.locator(self.COMPANY_INPUT).fill(address.company)

        self.locator(self.ADDRESS_INPUT).fill(address.address)

        if address.address2:
            self.locator(self.ADDRESS2_INPUT).fill(address.address2)

        self.locator(self.COUNTRY_SELECT).select_option(address.country)
        self.locator(self.STATE_INPUT).fill(address.state)
        self.locator(self.CITY_INPUT).fill(address.city)
        self.locator(self.ZIPCODE_INPUT).fill(address.zipcode)
        self.locator(self.MOBILE_NUMBER_INPUT).fill(address.mobile_number)

    def create_account(self) -> None:
        self.locator(self.CREATE_ACCOUNT_BUTTON).click()

    def register(self, account: AccountInfo, address: AddressInfo) -> None:
        """Fill both information forms and submit them."""
        self.fill_account_information(account)
        self.fill_address_information(address)
        self.create_account()

    # =========================================================================
    # Confirmation pages
    # =========================================================================

    def is_account_created(self) -> bool:
        return self._wait_visible(self.locator(self.ACCOUNT_CREATED_TEXT), self.CONFIRMATION_TIMEOUT)

    def click_continue(self) -> None:
        self.locator(self.CONTINUE_BUTTON).click()

    def delete_account(self) -> None:
        self.locator(self.DELETE_ACCOUNT_BUTTON).first.click()

    def is_account_deleted(self) -> bool:
        return self._wait_visible(self.locator(self.ACCOUNT_DELETED_TEXT), self.CONFIRMATION_TIMEOUT)

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_account_info_form_visible(self) -> None:
        assert self.is_account_info_form_visible(), "Account information form is not visible"

    def assert_account_created(self) -> None:
        assert self.is_account_created(), "Account creation confirmation not visible"

    def assert_account_deleted(self) -> None:
        assert self.is_account_deleted(), "Account deletion confirmation not visible"

    def assert_existing_email_error(self) -> None:
        assert self.is_existing_email_error_visible(), "'Email Address already exist!' error not visible"
