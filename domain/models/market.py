"""
Market list models.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class MarketListItem:
    """One line of the market list, after merging duplicate ingredients"""

    name: str
    quantity: Decimal
    unit: str
    price: Decimal
