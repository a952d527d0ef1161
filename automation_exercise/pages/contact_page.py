"""
Contact Page Object

Encapsulates /contact_us: the "Get In Touch" form with file upload.
"""
import logging
from pathlib import Path
from typing import List, Optional, Union

from playwright.sync_api import Dialog
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator

from ..helpers.user_data import ContactFormData
from .base_page import BasePage

logger = logging.getLogger(__name__)

_VALIDATION_MESSAGE_JS = "el => el.validationMessage"
_UPLOADED_FILE_NAME_JS = "el => (el.files && el.files.length > 0) ? el.files[0].name : ''"


class ContactPage(BasePage):
    """Page object for the Contact Us form."""

    PATH = "/contact_us"

    # Form
    NAME_INPUT = 'input[data-qa="name"]'
    EMAIL_INPUT = 'input[data-qa="email"]'
    SUBJECT_INPUT = 'input[data-qa="subject"]'
    MESSAGE_TEXT_AREA = 'textarea[data-qa="message"]'
    UPLOAD_FILE_INPUT = 'input[name="upload_file"]'
    SUBMIT_BUTTON = 'input[data-qa="submit-button"]'

    # Page
    CONTACT_US_HEADER = "text=Contact Us"
    GET_IN_TOUCH = '.contact-form h2:has-text("Get In Touch")'
    SUCCESS_MESSAGE = ".contact-form .status.alert.alert-success"
    CONTACT_INFO = ".contact-info"
    FORM_SECTION = "#form-section"

    SUCCESS_TEXT = "Success! Your details have been submitted successfully."
    SUCCESS_TIMEOUT = 10000

    @property
    def name_input(self) -> Locator:
        return self.locator(self.NAME_INPUT)

    @property
    def email_input(self) -> Locator:
        return self.locator(self.EMAIL_INPUT)

    @property
    def subject_input(self) -> Locator:
        return self.locator(self.SUBJECT_INPUT)

    @property
    def message_text_area(self) -> Locator:
        return self.locator(self.MESSAGE_TEXT_AREA)

    @property
    def upload_file_input(self) -> Locator:
        return self.locator(self.UPLOAD_FILE_INPUT)

    @property
    def success_message(self) -> Locator:
        return self.locator(self.SUCCESS_MESSAGE)

    @property
    def home_button(self) -> Locator:
        return self.locator(self.FORM_SECTION).get_by_role("link", name="Home")

    def navigate(self) -> "ContactPage":
        self.goto(self.PATH)
        self.dismiss_consent()
        return self

    # =========================================================================
    # Form
    # =========================================================================

    def fill_contact_form(
        self, contact: ContactFormData, file_path: Optional[Union[str, Path]] = None
    ) -> None:
        """Fill every text field; attach ``file_path`` when given."""
        self.name_input.fill(contact.name)
        self.email_input.fill(contact.email)
        self.subject_input.fill(contact.subject)
        self.message_text_area.fill(contact.message)

        if file_path:
            self.upload_file(file_path)

    def upload_file(self, file_path: Union[str, Path]) -> None:
        self.upload_file_input.set_input_files(str(file_path))

    def get_uploaded_file_name(self) -> str:
        try:
            return self.upload_file_input.evaluate(_UPLOADED_FILE_NAME_JS) or ""
        except PlaywrightError as e:
            logger.warning(f"Could not read uploaded file name: {e}")
            return ""

    def submit_form(self) -> None:
        """Submit; the site asks for confirmation through a JS dialog."""

        def accept(dialog: Dialog) -> None:
            logger.debug(f"Accepting dialog: {dialog.message}")
            dialog.accept()

        self.page.once("dialog", accept)
        self.locator(self.SUBMIT_BUTTON).click()
        self.wait(1000)

    def clear_form(self) -> None:
        self.name_input.clear()
        self.email_input.clear()
        self.subject_input.clear()
        self.message_text_area.clear()

    def get_form_validation_errors(self) -> List[str]:
        """Browser-native validation messages, prefixed with the field label."""
        fields = [
            ("Name", self.name_input),
            ("Email", self.email_input),
            ("Subject", self.subject_input),
            ("Message", self.message_text_area),
        ]
        errors = []
        for label, field in fields:
            try:
                message = field.evaluate(_VALIDATION_MESSAGE_JS)
            except PlaywrightError as e:
                logger.warning(f"Could not read validation message for {label}: {e}")
                return []
            if message:
                errors.append(f"{label}: {message}")
        return errors

    def is_form_valid(self) -> bool:
        return not self.get_form_validation_errors()

    def click_home_button(self) -> None:
        self.home_button.click()

    # =========================================================================
    # Queries
    # =========================================================================

    def is_contact_page_loaded(self) -> bool:
        return self._is_visible(self.locator(self.CONTACT_US_HEADER).first) and self.is_get_in_touch_visible()

    def is_get_in_touch_visible(self) -> bool:
        return self._is_visible(self.locator(self.GET_IN_TOUCH))

    def has_contact_info(self) -> bool:
        return self._is_visible(self.locator(self.CONTACT_INFO))

    def get_success_message(self) -> str:
        return self._text(self.success_message)

    def is_success_message_visible(self) -> bool:
        return self._wait_visible(self.success_message, self.SUCCESS_TIMEOUT)

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_contact_page_loaded(self) -> None:
        assert self.is_contact_page_loaded(), "Contact Us page not loaded - form heading not visible"

    def assert_submission_successful(self) -> None:
        assert self.is_success_message_visible(), "Contact form success message not visible"
        message = self.get_success_message()
        assert self.SUCCESS_TEXT in message, f'Unexpected contact form message: "{message}"'
