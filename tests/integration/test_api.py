"""
Integration tests for the single-function orders API.

The routed API must answer exactly like the per-route Lambda functions.
"""

import json

import pytest

from flavor_orders.handlers.api import lambda_handler
from flavor_orders.logic.flavor_catalog import FLAVOR_NAMES


@pytest.mark.integration
class TestOrdersApi:
    """End-to-end tests of the resolver against the mock table."""

    def test_order_lifecycle(self, dynamodb_table, make_rest_event, lambda_context):
        """Test create, list, get, update and delete through the router."""
        created = lambda_handler(
            make_rest_event("POST", "/orders", body={"Customer": "Victor", "Flavor": "Vanilla"}), lambda_context
        )
        assert created["statusCode"] == 201
        assert not created.get("body")

        listed = lambda_handler(make_rest_event("GET", "/orders"), lambda_context)
        orders = json.loads(listed["body"])
        assert listed["statusCode"] == 200
        assert len(orders) == 1
        order_id = orders[0]["Id"]

        fetched = lambda_handler(make_rest_event("GET", f"/orders/{order_id}"), lambda_context)
        assert fetched["statusCode"] == 200
        assert json.loads(fetched["body"]) == {"Id": order_id, "Customer": "Victor", "Flavor": "Vanilla"}

        updated = lambda_handler(
            make_rest_event("PUT", f"/orders/{order_id}", body={"Flavor": "Lime"}), lambda_context
        )
        assert updated["statusCode"] == 204
        assert not updated.get("body")
        assert dynamodb_table.get_item(Key={"Id": order_id})["Item"]["Flavor"] == "Lime"

        deleted = lambda_handler(make_rest_event("DELETE", f"/orders/{order_id}"), lambda_context)
        assert deleted["statusCode"] == 204
        assert not deleted.get("body")
        assert "Item" not in dynamodb_table.get_item(Key={"Id": order_id})

    def test_create_without_body(self, dynamodb_table, make_rest_event, lambda_context):
        """Test that validation failures keep their status through the router."""
        response = lambda_handler(make_rest_event("POST", "/orders"), lambda_context)

        assert response["statusCode"] == 400
        assert not response.get("body")

    def test_get_unknown_order(self, dynamodb_table, make_rest_event, lambda_context):
        """Test that the routed Get keeps the default not found status."""
        response = lambda_handler(make_rest_event("GET", "/orders/missing"), lambda_context)

        assert response["statusCode"] == 500
        assert not response.get("body")

    def test_delete_unknown_order(self, dynamodb_table, make_rest_event, lambda_context):
        """Test idempotent delete through the router."""
        response = lambda_handler(make_rest_event("DELETE", "/orders/missing"), lambda_context)

        assert response["statusCode"] == 204
        assert not response.get("body")

    def test_list_flavors(self, make_rest_event, lambda_context):
        """Test the flavor catalog route, which needs no table."""
        response = lambda_handler(make_rest_event("GET", "/flavors"), lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == [{"Flavor": name} for name in FLAVOR_NAMES]

    def test_unknown_route(self, make_rest_event, lambda_context):
        """Test that unrouted paths are rejected by the resolver."""
        response = lambda_handler(make_rest_event("GET", "/customers"), lambda_context)

        assert response["statusCode"] == 404

    def test_counts_routed_requests(self, make_rest_event, lambda_context, capsys):
        """Test that the router publishes a RequestCount metric."""
        lambda_handler(make_rest_event("GET", "/flavors"), lambda_context)

        assert "RequestCount" in capsys.readouterr().out
