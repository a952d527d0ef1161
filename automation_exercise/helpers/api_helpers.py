"""
API Helpers

Client and assertions for the Automation Exercise REST endpoints.

The service answers every request with HTTP 200 and reports the business
outcome in the body's ``responseCode`` (200, 201, 400, 404, 405). Both
layers are asserted separately; nothing here maps one onto the other.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from playwright.sync_api import APIRequestContext, APIResponse
from playwright.sync_api import Error as PlaywrightError

from ..config import E2EConfig
from .user_data import APIUserAccountData, LoginCredentials

logger = logging.getLogger(__name__)

USER_EXISTS = "User exists!"
USER_NOT_FOUND = "User not found!"
USER_CREATED = "User created!"
METHOD_NOT_SUPPORTED = "This request method is not supported."
SEARCH_PARAMETER_MISSING = "Bad request, search_product parameter is missing in POST request."


@dataclass
class ApiEnvelope:
    """Decoded response: transport status plus the JSON body."""

    http_status: int
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def response_code(self) -> Optional[int]:
        return self.body.get("responseCode")

    @property
    def message(self) -> str:
        return self.body.get("message") or self.body.get("msg") or self.body.get("error") or ""

    @property
    def products(self) -> Optional[List[Dict[str, Any]]]:
        return self.body.get("products")

    @property
    def brands(self) -> Optional[List[Dict[str, Any]]]:
        return self.body.get("brands")


def decode_envelope(response: APIResponse) -> ApiEnvelope:
    try:
        body = response.json()
    except (ValueError, PlaywrightError) as e:
        raise AssertionError(f"Failed to parse API response as JSON: {e}") from e
    if not isinstance(body, dict):
        raise AssertionError(f"Failed to parse API response as JSON: expected an object, got {body!r}")
    return ApiEnvelope(http_status=response.status, body=body)


# =============================================================================
# Generic validation
# =============================================================================


def validate_api_response(
    response: APIResponse,
    expected_status: int,
    expected_content_type: Optional[str] = None,
    required_fields: Optional[Iterable[str]] = None,
    expected_message: Optional[str] = None,
) -> ApiEnvelope:
    """Check transport status, content type, body fields and message."""
    assert (
        response.status == expected_status
    ), f"API returned status {response.status}, expected {expected_status}"

    if expected_content_type:
        content_type = response.headers.get("content-type", "")
        assert (
            expected_content_type in content_type
        ), f"API response content type mismatch: {content_type!r} lacks {expected_content_type!r}"

    envelope = decode_envelope(response)

    for required in required_fields or []:
        assert required in envelope.body, f"API response missing required field: {required}"

    if expected_message:
        assert (
            expected_message in envelope.message
        ), f"API response message mismatch: expected {expected_message!r} in {envelope.message!r}"

    return envelope


def _assert_envelope(response: APIResponse, response_code: int, message: Optional[str] = None) -> ApiEnvelope:
    envelope = decode_envelope(response)
    assert envelope.http_status == 200, f"Expected HTTP 200, got {envelope.http_status}"
    assert (
        envelope.response_code == response_code
    ), f"Expected responseCode {response_code}, got {envelope.response_code}: {envelope.message}"
    if message is not None:
        assert message in envelope.message, f"Expected message {message!r}, got {envelope.message!r}"
    return envelope


# =============================================================================
# Endpoint assertions
# =============================================================================


def assert_api_user_exists(response: APIResponse) -> ApiEnvelope:
    envelope = decode_envelope(response)
    if envelope.response_code == 404:
        raise AssertionError(f"User not found: {envelope.message}")
    return _assert_envelope(response, 200, USER_EXISTS)


def assert_api_user_not_found(response: APIResponse) -> ApiEnvelope:
    return _assert_envelope(response, 404, USER_NOT_FOUND)


def assert_api_method_not_supported(response: APIResponse) -> ApiEnvelope:
    return _assert_envelope(response, 405, METHOD_NOT_SUPPORTED)


def assert_api_bad_request(response: APIResponse, expected_message: str) -> ApiEnvelope:
    return _assert_envelope(response, 400, expected_message)


def assert_api_user_created(response: APIResponse) -> ApiEnvelope:
    return _assert_envelope(response, 201, USER_CREATED)


def _assert_non_empty_list(envelope: ApiEnvelope, key: str, item_fields: Iterable[str]) -> None:
    items = envelope.body.get(key)
    assert isinstance(items, list), f"Expected '{key}' to be a list, got {type(items).__name__}"
    assert items, f"Expected at least one entry in '{key}'"
    first = items[0]
    for item_field in item_fields:
        assert item_field in first, f"First entry in '{key}' missing field: {item_field}"


def assert_api_products_list(response: APIResponse) -> ApiEnvelope:
    envelope = _assert_envelope(response, 200)
    _assert_non_empty_list(envelope, "products", ("id", "name", "price"))
    return envelope


def assert_api_brands_list(response: APIResponse) -> ApiEnvelope:
    envelope = _assert_envelope(response, 200)
    _assert_non_empty_list(envelope, "brands", ("id", "brand"))
    return envelope


def assert_api_search_results(response: APIResponse, search_term: str) -> ApiEnvelope:
    """An empty result set passes; otherwise some name must contain the term."""
    envelope = _assert_envelope(response, 200)
    products = envelope.products
    assert isinstance(products, list), f"Expected 'products' to be a list, got {type(products).__name__}"

    if products:
        term = search_term.lower()
        names = [str(product.get("name", "")) for product in products]
        assert any(
            term in name.lower() for name in names
        ), f'No product name contains "{search_term}": {names}'
    return envelope


# =============================================================================
# Client
# =============================================================================


class ApiClient:
    """Thin wrapper over a Playwright request context, one method per endpoint."""

    def __init__(self, request: APIRequestContext, base_url: str = E2EConfig.API_URL):
        self.request = request
        self.base_url = base_url.rstrip("/")

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def get(self, endpoint: str) -> APIResponse:
        logger.debug(f"GET {endpoint}")
        return self.request.get(self._url(endpoint))

    def post(self, endpoint: str, form: Optional[Dict[str, str]] = None) -> APIResponse:
        logger.debug(f"POST {endpoint}")
        if form is None:
            return self.request.post(self._url(endpoint))
        return self.request.post(self._url(endpoint), form=form)

    def delete(self, endpoint: str) -> APIResponse:
        logger.debug(f"DELETE {endpoint}")
        return self.request.delete(self._url(endpoint))

    def products_list(self) -> APIResponse:
        return self.get("/productsList")

    def brands_list(self) -> APIResponse:
        return self.get("/brandsList")

    def search_product(self, search_product: Optional[str] = None) -> APIResponse:
        """Search by name; ``None`` omits the form field entirely."""
        if search_product is None:
            return self.post("/searchProduct")
        return self.post("/searchProduct", form={"search_product": search_product})

    def verify_login(self, credentials: LoginCredentials) -> APIResponse:
        return self.post(
            "/verifyLogin", form={"email": credentials.email, "password": credentials.password}
        )

    def delete_verify_login(self) -> APIResponse:
        return self.delete("/verifyLogin")

    def create_account(self, account: APIUserAccountData) -> APIResponse:
        return self.post("/createAccount", form=account.to_form())

    def delete_account(self, credentials: LoginCredentials) -> APIResponse:
        return self.request.delete(
            self._url("/deleteAccount"),
            form={"email": credentials.email, "password": credentials.password},
        )
