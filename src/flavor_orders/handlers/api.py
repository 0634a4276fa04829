"""
Orders API - single Lambda function serving every route.

Routes the API Gateway REST event with the Powertools resolver to the same
functions the per-route Lambda functions use, so status codes and bodies are
identical in both deployment styles. Updates always take the id from the path.
"""

from typing import Any, Dict, Optional

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from flavor_orders.dal import get_order_repository
from flavor_orders.handlers.create_order import create_order
from flavor_orders.handlers.delete_order import delete_order
from flavor_orders.handlers.get_order import get_order
from flavor_orders.handlers.list_flavors import list_flavors
from flavor_orders.handlers.list_orders import list_orders
from flavor_orders.handlers.models.env_vars import get_handler_env_vars
from flavor_orders.handlers.update_order import update_order
from flavor_orders.handlers.utils.observability import logger, metrics, tracer

# API path constants
ORDERS_PATH = '/orders'
ORDER_PATH = '/orders/<order_id>'
FLAVORS_PATH = '/flavors'

app = APIGatewayRestResolver()


def _route_event(order_id: Optional[str] = None) -> Dict[str, Any]:
    """Build the proxy event seen by a route, with ``id`` taken from the matched path."""
    event = dict(app.current_event.raw_event)
    event['pathParameters'] = {'id': order_id} if order_id else None
    return event


def _to_response(result: Dict[str, Any]) -> Response:
    # The resolver serializes a None body to "null"
    return Response(
        status_code=result['statusCode'],
        body=result.get('body', ''),
        headers=result.get('headers'),
    )


@app.post(ORDERS_PATH)
def post_order() -> Response:
    return _to_response(create_order(_route_event(), get_order_repository()))


@app.get(ORDERS_PATH)
def get_orders() -> Response:
    return _to_response(list_orders(_route_event(), get_order_repository()))


@app.get(ORDER_PATH)
def get_single_order(order_id: str) -> Response:
    env_vars = get_handler_env_vars()
    return _to_response(get_order(
        _route_event(order_id),
        get_order_repository(),
        not_found_status=env_vars.ORDER_NOT_FOUND_STATUS,
    ))


@app.put(ORDER_PATH)
def put_order(order_id: str) -> Response:
    return _to_response(update_order(_route_event(order_id), get_order_repository(), id_source='path'))


@app.delete(ORDER_PATH)
def remove_order(order_id: str) -> Response:
    return _to_response(delete_order(_route_event(order_id), get_order_repository()))


@app.get(FLAVORS_PATH)
def get_flavors() -> Response:
    return _to_response(list_flavors(_route_event()))


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the whole orders API.

    Args:
        event: API Gateway REST proxy event
        context: Lambda context object

    Returns:
        API Gateway response
    """
    metrics.add_metric(name='RequestCount', unit=MetricUnit.Count, value=1)
    return app.resolve(event, context)
