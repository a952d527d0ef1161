"""Unit tests for the API client and envelope assertions."""

from unittest.mock import MagicMock

import pytest

from automation_exercise.helpers.api_helpers import (
    SEARCH_PARAMETER_MISSING,
    ApiClient,
    assert_api_bad_request,
    assert_api_brands_list,
    assert_api_method_not_supported,
    assert_api_products_list,
    assert_api_search_results,
    assert_api_user_created,
    assert_api_user_exists,
    assert_api_user_not_found,
    decode_envelope,
    validate_api_response,
)
from automation_exercise.helpers.user_data import LoginCredentials, get_api_user_account_data


def make_response(body=None, status=200, content_type="application/json", json_error=None):
    response = MagicMock()
    response.status = status
    response.headers = {"content-type": content_type}
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


class TestDecodeEnvelope:
    """Tests for decode_envelope."""

    def test_keeps_transport_and_business_codes_apart(self):
        envelope = decode_envelope(make_response({"responseCode": 404, "message": "User not found!"}))
        assert envelope.http_status == 200
        assert envelope.response_code == 404
        assert envelope.message == "User not found!"

    def test_message_fallbacks(self):
        assert decode_envelope(make_response({"msg": "alt"})).message == "alt"
        assert decode_envelope(make_response({"error": "boom"})).message == "boom"
        assert decode_envelope(make_response({})).message == ""

    def test_invalid_json(self):
        response = make_response(json_error=ValueError("Expecting value"))
        with pytest.raises(AssertionError, match="Failed to parse API response as JSON"):
            decode_envelope(response)

    def test_non_object_body(self):
        with pytest.raises(AssertionError, match="Failed to parse API response as JSON"):
            decode_envelope(make_response(["not", "an", "object"]))


class TestValidateApiResponse:
    """Tests for validate_api_response."""

    def test_passes(self):
        response = make_response({"responseCode": 200, "products": [], "message": "ok here"})
        envelope = validate_api_response(
            response,
            200,
            expected_content_type="application/json",
            required_fields=["responseCode", "products"],
            expected_message="ok",
        )
        assert envelope.response_code == 200

    def test_status_mismatch(self):
        with pytest.raises(AssertionError, match="API returned status 500, expected 200"):
            validate_api_response(make_response({}, status=500), 200)

    def test_content_type_mismatch(self):
        response = make_response({}, content_type="text/html")
        with pytest.raises(AssertionError, match="content type mismatch"):
            validate_api_response(response, 200, expected_content_type="application/json")

    def test_missing_field(self):
        with pytest.raises(AssertionError, match="missing required field: products"):
            validate_api_response(make_response({"responseCode": 200}), 200, required_fields=["products"])

    def test_message_mismatch(self):
        with pytest.raises(AssertionError, match="message mismatch"):
            validate_api_response(make_response({"message": "nope"}), 200, expected_message="User exists!")


class TestEndpointAssertions:
    """Tests for the per-endpoint assertions."""

    def test_user_exists(self):
        assert_api_user_exists(make_response({"responseCode": 200, "message": "User exists!"}))

    def test_user_exists_reports_not_found(self):
        response = make_response({"responseCode": 404, "message": "User not found!"})
        with pytest.raises(AssertionError, match="User not found: User not found!"):
            assert_api_user_exists(response)

    def test_user_not_found(self):
        assert_api_user_not_found(make_response({"responseCode": 404, "message": "User not found!"}))

    def test_method_not_supported(self):
        body = {"responseCode": 405, "message": "This request method is not supported."}
        assert_api_method_not_supported(make_response(body))

    def test_bad_request(self):
        body = {"responseCode": 400, "message": SEARCH_PARAMETER_MISSING}
        assert_api_bad_request(make_response(body), SEARCH_PARAMETER_MISSING)

    def test_user_created(self):
        assert_api_user_created(make_response({"responseCode": 201, "message": "User created!"}))

    def test_http_status_must_be_200(self):
        response = make_response({"responseCode": 201, "message": "User created!"}, status=201)
        with pytest.raises(AssertionError, match="Expected HTTP 200, got 201"):
            assert_api_user_created(response)

    def test_wrong_response_code(self):
        response = make_response({"responseCode": 200, "message": "User exists!"})
        with pytest.raises(AssertionError, match="Expected responseCode 404, got 200"):
            assert_api_user_not_found(response)

    def test_products_list(self):
        body = {"responseCode": 200, "products": [{"id": 1, "name": "Blue Top", "price": "Rs. 500"}]}
        assert_api_products_list(make_response(body))

    def test_products_list_empty(self):
        with pytest.raises(AssertionError, match="at least one entry in 'products'"):
            assert_api_products_list(make_response({"responseCode": 200, "products": []}))

    def test_products_list_missing_price(self):
        body = {"responseCode": 200, "products": [{"id": 1, "name": "Blue Top"}]}
        with pytest.raises(AssertionError, match="missing field: price"):
            assert_api_products_list(make_response(body))

    def test_brands_list(self):
        body = {"responseCode": 200, "brands": [{"id": 1, "brand": "Polo"}]}
        assert_api_brands_list(make_response(body))

    def test_search_results_match_case_insensitively(self):
        body = {"responseCode": 200, "products": [{"name": "Blue Top"}, {"name": "Summer Dress"}]}
        assert_api_search_results(make_response(body), "TOP")

    def test_search_results_empty_passes(self):
        assert_api_search_results(make_response({"responseCode": 200, "products": []}), "top")

    def test_search_results_without_match(self):
        body = {"responseCode": 200, "products": [{"name": "Summer Dress"}]}
        with pytest.raises(AssertionError, match='No product name contains "top"'):
            assert_api_search_results(make_response(body), "top")


class TestApiClient:
    """Tests for ApiClient request construction."""

    @pytest.fixture
    def request_context(self):
        return MagicMock()

    @pytest.fixture
    def client(self, request_context):
        return ApiClient(request_context, "https://example.test/api/")

    def test_products_list(self, client, request_context):
        client.products_list()
        request_context.get.assert_called_once_with("https://example.test/api/productsList")

    def test_brands_list(self, client, request_context):
        client.brands_list()
        request_context.get.assert_called_once_with("https://example.test/api/brandsList")

    def test_search_product_with_term(self, client, request_context):
        client.search_product("top")
        request_context.post.assert_called_once_with(
            "https://example.test/api/searchProduct", form={"search_product": "top"}
        )

    def test_search_product_without_term_sends_no_form(self, client, request_context):
        client.search_product()
        request_context.post.assert_called_once_with("https://example.test/api/searchProduct")

    def test_verify_login(self, client, request_context):
        client.verify_login(LoginCredentials(email="a@example.com", password="pw"))
        request_context.post.assert_called_once_with(
            "https://example.test/api/verifyLogin", form={"email": "a@example.com", "password": "pw"}
        )

    def test_delete_verify_login(self, client, request_context):
        client.delete_verify_login()
        request_context.delete.assert_called_once_with("https://example.test/api/verifyLogin")

    def test_create_account(self, client, request_context):
        account = get_api_user_account_data()
        client.create_account(account)
        request_context.post.assert_called_once_with(
            "https://example.test/api/createAccount", form=account.to_form()
        )

    def test_returns_response(self, client, request_context):
        assert client.brands_list() is request_context.get.return_value
