"""
List Flavors Lambda function.

GET /flavors returns the fixed flavor catalog. No storage access.
"""

from http import HTTPStatus
from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from flavor_orders.handlers.utils.observability import logger, metrics, tracer
from flavor_orders.handlers.utils.responses import build_response
from flavor_orders.logic.flavor_catalog import list_flavors as list_catalog_flavors


@tracer.capture_method
def list_flavors(event: Dict[str, Any]) -> Dict[str, Any]:
    """Return 200 with the flavor catalog."""
    return build_response(HTTPStatus.OK, list_catalog_flavors())


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """Lambda function entry point for GET /flavors."""
    return list_flavors(event)
