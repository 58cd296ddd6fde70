"""
Shared dependencies for the application.

Provides dependency injection functions used across routers.
"""

from fastapi import Depends, Request

from .database import MongoManager
from .repositories import ICustomerRepository, MongoCustomerRepository


def get_mongo_manager(request: Request) -> MongoManager:
    """Get the MongoDB manager attached to the app during startup."""
    manager = getattr(request.app.state, "mongo", None)
    if manager is None:
        raise RuntimeError("MongoDB manager not initialized")
    return manager


def get_customer_repository(
    manager: MongoManager = Depends(get_mongo_manager),
) -> ICustomerRepository:
    """Get customer repository bound to the current database."""
    return MongoCustomerRepository(manager.database)
