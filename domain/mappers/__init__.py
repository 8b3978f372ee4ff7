"""
Domain mappers package.
Handles transformation between domain models and DTOs (Data Transfer Objects).
"""

from domain.mappers.calendar_mapper import CalendarMapper

__all__ = ["CalendarMapper"]
