"""
Employee Service: Abstract Data Access Interface
=================================================

What:  Abstract base class defining the contract of the persistence gateway.
How:   Concrete implementations inherit from DataAccessProvider and implement
       list_employees() and add_employee().
Who:   Called by the employee routes and the readiness probe.

Implementations:
    - SqlAlchemyDataAccessProvider: async SQLAlchemy session (production)
    - InMemoryDataAccessProvider (tests/conftest.py): list-backed fake
"""

from abc import ABC, abstractmethod
from typing import Sequence

from employee_app.models.employee import Employee


class DataAccessProvider(ABC):
    """
    Abstract gateway to the employee store.

    Contract:
        - Implementations translate store failures into StorageUnavailableError
          or ConstraintViolationError; nothing else escapes.
        - No caching and no retries: one call, one round trip.
    """

    @abstractmethod
    async def list_employees(self) -> Sequence[Employee]:
        """
        Return every stored employee.

        Returns:
            All records in the store's default scan order. An empty store
            yields an empty sequence, never an error.

        Raises:
            StorageUnavailableError: the store is unreachable or the query failed.
        """
        ...

    @abstractmethod
    async def add_employee(self, name: str) -> Employee:
        """
        Insert a new employee and commit immediately.

        Args:
            name: Employee name. The identifier is always generated by the store.

        Returns:
            The persisted Employee with its assigned id.

        Raises:
            StorageUnavailableError: connection or write failure.
            ConstraintViolationError: the store rejected the row.
        """
        ...
