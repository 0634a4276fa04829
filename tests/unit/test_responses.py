"""
Unit tests for the API Gateway response builder.
"""

import json
from http import HTTPStatus

from flavor_orders.handlers.utils.responses import build_response
from flavor_orders.models.order import Order


class TestBuildResponse:
    """Test cases for build_response."""

    def test_without_payload_has_no_body(self):
        """Test that responses without payload carry no body."""
        response = build_response(HTTPStatus.NO_CONTENT)

        assert response["statusCode"] == 204
        assert "body" not in response

    def test_status_code_is_plain_int(self):
        """Test that HTTPStatus members are converted for the gateway."""
        response = build_response(HTTPStatus.CREATED)

        assert type(response["statusCode"]) is int

    def test_default_headers(self):
        """Test the JSON content type header."""
        response = build_response(200, {"ok": True})

        assert response["headers"]["Content-Type"] == "application/json"

    def test_extra_headers_merged(self):
        """Test that extra headers are added to the defaults."""
        response = build_response(201, headers={"Location": "/orders/abc"})

        assert response["headers"] == {
            "Content-Type": "application/json",
            "Location": "/orders/abc",
        }

    def test_model_serialized_by_alias(self):
        """Test that orders are serialized with their wire names."""
        response = build_response(200, Order(id="abc", customer="Jane", flavor="Mango"))

        assert json.loads(response["body"]) == {"Id": "abc", "Customer": "Jane", "Flavor": "Mango"}

    def test_list_of_models(self):
        """Test serialization of a list payload."""
        orders = [Order(id="a", customer="A", flavor="Lime"), Order(id="b", customer="B", flavor="Mango")]

        response = build_response(200, orders)

        assert [order["Id"] for order in json.loads(response["body"])] == ["a", "b"]

    def test_empty_list_is_a_body(self):
        """Test that an empty list still produces a JSON array body."""
        response = build_response(200, [])

        assert response["body"] == "[]"
