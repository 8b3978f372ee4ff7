"""
Adapters package - External service connections.
MongoDB document store and EmailJS e-mail delivery.
"""

from adapters import email_adapter, mongo_adapter

__all__ = [
    "email_adapter",
    "mongo_adapter",
]
