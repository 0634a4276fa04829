"""
Order and Flavor domain models.

The Python attribute names are snake_case; the aliases are the attribute names
used both in the DynamoDB table and on the wire.
"""

from typing import Annotated
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class Order(BaseModel):
    """A customer's order for a single flavor."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Annotated[str, Field(
        alias='Id',
        min_length=1,
        description='Unique identifier for the order, generated on creation',
        examples=['0d6f1c3e-93c4-4c36-8d5c-1f0b0b8c2f4e']
    )]

    customer: Annotated[str | None, Field(
        alias='Customer',
        description='Name of the customer who placed the order',
        examples=['Jane Smith']
    )] = None

    flavor: Annotated[str | None, Field(
        alias='Flavor',
        description='Selected flavor, not checked against the flavor catalog',
        examples=['Pistachio']
    )] = None

    @classmethod
    def create(cls, customer: str, flavor: str) -> 'Order':
        """
        Create a new order with a generated ID.

        Args:
            customer: Name of the customer placing the order
            flavor: Selected flavor

        Returns:
            New Order instance
        """
        return cls(id=str(uuid4()), customer=customer, flavor=flavor)

    def to_item(self) -> dict[str, str]:
        """Convert the order to its DynamoDB item representation."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Flavor(BaseModel):
    """An entry of the flavor catalog."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: Annotated[str, Field(
        alias='Flavor',
        description='Flavor name',
        examples=['Chocolate']
    )]
