"""
Create Order Lambda function.

POST /orders with a JSON body holding ``Customer`` and ``Flavor``. The order id
is generated server side and returned in the ``Location`` header.
"""

from http import HTTPStatus
from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from flavor_orders.dal import BaseOrderRepository, get_order_repository
from flavor_orders.dal.errors import OrderStorageError
from flavor_orders.handlers.utils.events import UndecodableBodyError, get_body
from flavor_orders.handlers.utils.observability import logger, metrics, tracer
from flavor_orders.handlers.utils.responses import build_response
from flavor_orders.models.input import CreateOrderRequest


@tracer.capture_method
def create_order(event: Dict[str, Any], repository: BaseOrderRepository) -> Dict[str, Any]:
    """
    Store a new order from the request body.

    Args:
        event: API Gateway proxy event
        repository: Order repository

    Returns:
        201 on success, 400 for a missing or invalid body, 500 on storage failure
    """
    try:
        body = get_body(APIGatewayProxyEvent(event))
    except UndecodableBodyError:
        logger.exception('Unable to decode create order request body')
        return build_response(HTTPStatus.BAD_REQUEST)

    if body is None:
        logger.error('Create order request has no body')
        return build_response(HTTPStatus.BAD_REQUEST)

    try:
        request = CreateOrderRequest.model_validate_json(body)
    except ValidationError as e:
        logger.error('Invalid create order request', extra={
            'body': body,
            'validation_errors': str(e),
        })
        return build_response(HTTPStatus.BAD_REQUEST)

    try:
        order = repository.put(customer=request.customer, flavor=request.flavor)
    except OrderStorageError:
        logger.exception('Unable to add order', extra={
            'customer': request.customer,
            'flavor': request.flavor,
        })
        return build_response(HTTPStatus.INTERNAL_SERVER_ERROR)

    metrics.add_metric(name='OrderCreated', unit=MetricUnit.Count, value=1)
    return build_response(HTTPStatus.CREATED, headers={'Location': f'/orders/{order.id}'})


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """Lambda function entry point for POST /orders."""
    return create_order(event, get_order_repository())
