"""
Input models for request validation using Pydantic.

This module defines the request bodies accepted by the order handlers. Only the
presence and type of the fields are checked; flavors are not matched against
the catalog.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class CreateOrderRequest(BaseModel):
    """Request model for creating a new order."""

    model_config = ConfigDict(populate_by_name=True)

    customer: Annotated[str, Field(
        alias='Customer',
        strict=True,
        description='Customer name for the order',
        examples=['John Doe', 'Jane Smith']
    )]

    flavor: Annotated[str, Field(
        alias='Flavor',
        strict=True,
        description='Flavor to order',
        examples=['Vanilla']
    )]


class UpdateOrderRequest(BaseModel):
    """Request model for changing the flavor of an existing order."""

    model_config = ConfigDict(populate_by_name=True)

    # Only read when the update handler is configured to take the id from the body
    id: Annotated[str | None, Field(
        alias='Id',
        description='Order identifier, when not given as a path parameter'
    )] = None

    flavor: Annotated[str, Field(
        alias='Flavor',
        strict=True,
        description='New flavor for the order',
        examples=['Mango']
    )]
