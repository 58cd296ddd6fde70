"""
Customer repository interface (Abstract Base Class).

Defines the contract for customer persistence independent of the
underlying storage mechanism.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Customer, CustomerInput


class ICustomerRepository(ABC):
    """
    Abstract repository interface for customer operations.

    Each method performs exactly one storage operation. A missing customer
    is reported as ``None``; failures are raised as domain exceptions.
    """

    @abstractmethod
    async def list_customers(self, limit: int, page: int) -> List[Customer]:
        """
        List one page of customers in natural storage order.

        Args:
            limit: Maximum number of customers per page (>= 1)
            page: 1-indexed page number

        Returns:
            Up to ``limit`` customers, empty when the page is past the end

        Raises:
            ValidationException: If ``limit`` or ``page`` is below 1
            StorageException: If the query cannot execute
        """
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: str) -> Optional[Customer]:
        """
        Find a customer by identifier.

        Raises:
            InvalidIdentifierException: If ``customer_id`` is malformed
            StorageException: If the lookup cannot execute
        """
        pass

    @abstractmethod
    async def create(self, data: CustomerInput) -> str:
        """
        Insert a new customer stamped with the current time.

        Returns:
            The generated identifier as a string
        """
        pass

    @abstractmethod
    async def update_by_id(
        self, customer_id: str, data: CustomerInput
    ) -> Optional[Customer]:
        """
        Overwrite a customer's name in one atomic find-and-update.

        Returns:
            The customer as it is after the update, or None if absent
        """
        pass

    @abstractmethod
    async def delete_by_id(self, customer_id: str) -> Optional[Customer]:
        """
        Remove a customer in one atomic find-and-delete.

        Returns:
            The deleted customer, or None if absent
        """
        pass
