"""
Test Cases Page Object

Encapsulates /test_cases, the site's own list of practice scenarios.
"""
from typing import List

from playwright.sync_api import Locator

from .base_page import BasePage


class TestCasesPage(BasePage):
    """Page object for the test cases listing."""

    # Keep pytest from collecting this as a test class
    __test__ = False

    PATH = "/test_cases"

    HEADER = 'h2:has-text("Test Cases"), .title:has-text("Test Cases")'
    PANEL_GROUP = ".panel-group"
    TEST_CASE_ITEM = ".panel, .test-case-item"
    TEST_CASE_TITLE = ".panel-title, .test-case-title"
    TEST_CASE_DESCRIPTION = ".panel-body, .test-case-description"
    BACK_TO_HOME = 'a[href="/"]'
    BREADCRUMB = ".breadcrumb, .nav-breadcrumb"

    MIN_TEST_CASES = 26

    @property
    def header(self) -> Locator:
        return self.locator(self.HEADER).first

    @property
    def test_case_items(self) -> Locator:
        return self.locator(self.TEST_CASE_ITEM)

    def test_case_item(self, index: int) -> Locator:
        return self.test_case_items.nth(index)

    # =========================================================================
    # Queries
    # =========================================================================

    def is_test_cases_page_loaded(self) -> bool:
        return self._is_visible(self.header)

    def get_page_title(self) -> str:
        return self.page.title()

    def get_header_text(self) -> str:
        return self._text(self.header)

    def is_test_cases_list_visible(self) -> bool:
        return self._count(self.locator(self.PANEL_GROUP)) >= self.MIN_TEST_CASES

    def get_test_cases_count(self) -> int:
        return self._count(self.test_case_items)

    def get_test_case_title(self, index: int) -> str:
        return self._text(self.test_case_item(index).locator(self.TEST_CASE_TITLE))

    def get_test_case_description(self, index: int) -> str:
        return self._text(self.test_case_item(index).locator(self.TEST_CASE_DESCRIPTION))

    def get_all_test_case_titles(self) -> List[str]:
        return self.locator(self.TEST_CASE_TITLE).all_text_contents()

    def search_test_cases(self, search_term: str) -> List[int]:
        """Indices of titles containing ``search_term``, case-insensitive."""
        term = search_term.lower()
        return [i for i, title in enumerate(self.get_all_test_case_titles()) if term in title.lower()]

    def is_test_case_expanded(self, index: int) -> bool:
        return self._is_visible(self.test_case_item(index).locator(self.TEST_CASE_DESCRIPTION).first)

    def is_breadcrumb_visible(self) -> bool:
        return self._is_visible(self.locator(self.BREADCRUMB).first)

    def is_test_cases_url(self) -> bool:
        return "/test_cases" in self.current_url()

    def verify_page_elements(self) -> bool:
        return self.is_test_cases_page_loaded() and self.is_test_cases_list_visible()

    # =========================================================================
    # Actions
    # =========================================================================

    def click_test_case(self, index: int) -> None:
        self.test_case_item(index).click()

    def expand_test_case(self, index: int) -> None:
        if not self.is_test_case_expanded(index):
            self.click_test_case(index)

    def collapse_test_case(self, index: int) -> None:
        if self.is_test_case_expanded(index):
            self.click_test_case(index)

    def back_to_home(self) -> None:
        self.locator(self.BACK_TO_HOME).first.click()

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_test_cases_page_loaded(self) -> None:
        assert self.is_test_cases_url(), f"Not on test cases page: {self.current_url()}"
        assert self.is_test_cases_list_visible(), (
            f"Expected at least {self.MIN_TEST_CASES} test cases, "
            f"found {self._count(self.locator(self.PANEL_GROUP))}"
        )
