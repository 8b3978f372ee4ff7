"""Services package - Business logic layer"""

from services.assignment_service import MealAssignmentEngine
from services.dispatch_service import DispatchService
from services.market_list_service import MarketListService

# Note: layout, recipient and render services contain plain functions, not classes

__all__ = [
    "MealAssignmentEngine",
    "DispatchService",
    "MarketListService",
]
