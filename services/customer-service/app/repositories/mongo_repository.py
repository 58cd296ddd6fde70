"""
MongoDB implementation of customer repository.

Backed by the ``customer`` collection through the pymongo asyncio API.
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional

import structlog
from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from ..domain.entities import CustomerDocument, CustomerId
from ..domain.exceptions import StorageException, ValidationException
from ..models import Customer, CustomerInput
from .customer_repository import ICustomerRepository

logger = structlog.get_logger(__name__)

COLLECTION_NAME = "customer"

# Only documents that carry a name are customers
NAME_PRESENT_FILTER = {CustomerDocument.NAME_FIELD: {"$exists": True}}


def utc_now() -> datetime:
    """Current wall-clock time in UTC."""
    return datetime.now(timezone.utc)


class MongoCustomerRepository(ICustomerRepository):
    """MongoDB implementation for customer persistence."""

    def __init__(
        self,
        database: AsyncDatabase,
        collection_name: str = COLLECTION_NAME,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize repository.

        Args:
            database: Async MongoDB database handle
            collection_name: Collection holding customer documents
            clock: Source of timestamps for create and update
        """
        self.collection = database[collection_name]
        self.clock = clock

    async def list_customers(self, limit: int, page: int) -> List[Customer]:
        """List one page of customers."""
        if limit < 1:
            raise ValidationException("limit", limit, "must be a positive integer")
        if page < 1:
            raise ValidationException("page", page, "must be a positive integer")

        skip = (page - 1) * limit
        customers: List[Customer] = []

        cursor = None
        try:
            cursor = self.collection.find(NAME_PRESENT_FILTER, skip=skip, limit=limit)
            async for document in cursor:
                customers.append(self._to_customer(document))
        except PyMongoError as e:
            logger.error("Error listing customers", limit=limit, page=page, error=str(e))
            raise StorageException("find", str(e)) from e
        finally:
            if cursor is not None:
                await cursor.close()

        logger.debug(
            "Listed customers", limit=limit, page=page, returned=len(customers)
        )
        return customers

    async def get_by_id(self, customer_id: str) -> Optional[Customer]:
        """Find customer by identifier."""
        oid = CustomerId.parse(customer_id)

        try:
            document = await self.collection.find_one(self._id_filter(oid))
        except PyMongoError as e:
            logger.error("Error finding customer", customer_id=customer_id, error=str(e))
            raise StorageException("find_one", str(e)) from e

        if document is None:
            logger.debug("Customer not found", customer_id=customer_id)
            return None

        return self._to_customer(document)

    async def create(self, data: CustomerInput) -> str:
        """Insert a new customer."""
        document = CustomerDocument.new_fields(data.name, self.clock())

        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            logger.error("Error inserting customer", error=str(e))
            raise StorageException("insert_one", str(e)) from e

        inserted_id = str(result.inserted_id)
        logger.info("Customer created", customer_id=inserted_id)
        return inserted_id

    async def update_by_id(
        self, customer_id: str, data: CustomerInput
    ) -> Optional[Customer]:
        """Update customer name and re-stamp its timestamp."""
        oid = CustomerId.parse(customer_id)
        # createdAt is overwritten on every update; there is no updatedAt field
        update = {
            "$set": {
                CustomerDocument.NAME_FIELD: data.name,
                CustomerDocument.CREATED_AT_FIELD: self.clock(),
            }
        }

        try:
            document = await self.collection.find_one_and_update(
                self._id_filter(oid),
                update,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error("Error updating customer", customer_id=customer_id, error=str(e))
            raise StorageException("find_one_and_update", str(e)) from e

        if document is None:
            logger.debug("Customer not found for update", customer_id=customer_id)
            return None

        logger.info("Customer updated", customer_id=customer_id)
        return self._to_customer(document)

    async def delete_by_id(self, customer_id: str) -> Optional[Customer]:
        """Delete customer and return the removed record."""
        oid = CustomerId.parse(customer_id)

        try:
            document = await self.collection.find_one_and_delete(self._id_filter(oid))
        except PyMongoError as e:
            logger.error("Error deleting customer", customer_id=customer_id, error=str(e))
            raise StorageException("find_one_and_delete", str(e)) from e

        if document is None:
            logger.debug("Customer not found for delete", customer_id=customer_id)
            return None

        logger.info("Customer deleted", customer_id=customer_id)
        return self._to_customer(document)

    @staticmethod
    def _id_filter(oid: CustomerId) -> dict:
        return {CustomerDocument.ID_FIELD: oid.value}

    @staticmethod
    def _to_customer(document: dict) -> Customer:
        return Customer.from_document(CustomerDocument.from_mongo(document))
