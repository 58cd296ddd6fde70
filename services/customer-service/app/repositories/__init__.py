"""
Repository layer - Data access abstractions.

This layer provides interfaces for customer persistence,
hiding the document store from the HTTP layer.
"""

from .customer_repository import ICustomerRepository
from .mongo_repository import MongoCustomerRepository

__all__ = ["ICustomerRepository", "MongoCustomerRepository"]
