"""
Fixed catalog of the flavors offered to customers.

The catalog is advisory: orders may hold any flavor string.
"""

from typing import List, Tuple

from flavor_orders.models.order import Flavor

FLAVOR_NAMES: Tuple[str, ...] = (
    'Chocolate',
    'Vanilla',
    'MintChocolate',
    'BubbleGum',
    'Pistachio',
    'RockyRoad',
    'Raspberry',
    'Mango',
    'CherryJubilee',
    'Lime',
)


def list_flavors() -> List[Flavor]:
    """Return the catalog in its fixed order."""
    return [Flavor(name=name) for name in FLAVOR_NAMES]
