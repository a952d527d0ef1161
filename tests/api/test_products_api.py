"""
Products API Tests

Product and brand listings and product search.
"""
import pytest

from automation_exercise.helpers.api_helpers import (
    SEARCH_PARAMETER_MISSING,
    ApiClient,
    assert_api_bad_request,
    assert_api_brands_list,
    assert_api_products_list,
    assert_api_search_results,
    validate_api_response,
)
from automation_exercise.helpers.user_data import get_api_product_search_data


class TestListings:
    """Test the catalog listing endpoints."""

    @pytest.mark.smoke
    def test_get_products_list(self, api_client: ApiClient):
        """Test GET productsList returns products with id, name and price."""
        response = api_client.products_list()
        validate_api_response(response, 200, required_fields=["responseCode", "products"])
        assert_api_products_list(response)

    def test_get_brands_list(self, api_client: ApiClient):
        """Test GET brandsList returns brands with id and brand."""
        assert_api_brands_list(api_client.brands_list())


class TestSearch:
    """Test POST searchProduct."""

    def test_search_product(self, api_client: ApiClient):
        """Test search with a term returns matching products."""
        search = get_api_product_search_data()
        response = api_client.search_product(search.search_product)
        assert_api_search_results(response, search.search_product)

    def test_search_product_without_parameter(self, api_client: ApiClient):
        """Test search without search_product reports a bad request."""
        response = api_client.search_product()
        assert_api_bad_request(response, SEARCH_PARAMETER_MISSING)
