"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables read by
the order handlers, parsed and cached by aws-lambda-env-modeler.
"""

from typing import Annotated, Literal, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field, field_validator

# Statuses the Get handler may answer with when the order does not exist
NOT_FOUND_STATUSES = (404, 500)


class HandlerEnvVars(BaseModel):
    """Environment variables for the order handlers."""

    # DynamoDB table name for storing orders
    ORDERS_TABLE_NAME: Annotated[str, Field(
        description='DynamoDB table name for order storage',
        min_length=1
    )] = 'orders'

    # Endpoint override, e.g. http://localhost:8000 for DynamoDB Local
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        description='DynamoDB endpoint URL override'
    )] = None

    # Where the update handler reads the order id from
    UPDATE_ORDER_ID_SOURCE: Annotated[Literal['path', 'body'], Field(
        description='Read the order id from the "id" path parameter or the "Id" body field'
    )] = 'path'

    # 500 keeps the historical behaviour of the Get handler
    ORDER_NOT_FOUND_STATUS: Annotated[int, Field(
        description='HTTP status returned by the Get handler for an unknown order id'
    )] = 500

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        description='Service name for AWS Powertools'
    )] = 'flavor-orders'

    # Log level for AWS Powertools Logger
    LOG_LEVEL: Annotated[str, Field(
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    @field_validator('ORDER_NOT_FOUND_STATUS')
    @classmethod
    def validate_not_found_status(cls, v: int) -> int:
        """Only 404 and 500 are meaningful for a missing order."""
        if v not in NOT_FOUND_STATUSES:
            raise ValueError(f'ORDER_NOT_FOUND_STATUS must be one of {NOT_FOUND_STATUSES}')
        return v


# Utility function to get typed environment variables
def get_handler_env_vars() -> HandlerEnvVars:
    """
    Get typed environment variables for the order handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=HandlerEnvVars)
