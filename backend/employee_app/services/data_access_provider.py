"""
Employee Service: SQLAlchemy Data Access Provider
==================================================

What:  Concrete persistence gateway backed by one AsyncSession.
How:   list_employees() runs a plain SELECT over the employee table;
       add_employee() inserts a row and commits straight away.
Who:   Built per request by get_data_access_provider() and injected into
       the employee and health routes.

Error translation:
    IntegrityError            → ConstraintViolationError
    other SQLAlchemyError     → StorageUnavailableError
    OSError (socket failures) → StorageUnavailableError
    asyncio.TimeoutError      → StorageUnavailableError

    The original exception is chained (`raise ... from e`) and logged here,
    so the route layer never sees driver-specific types.
"""

import asyncio
import logging
from typing import List

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_app.database import get_db_session
from employee_app.exceptions import (
    ConstraintViolationError,
    StorageUnavailableError,
)
from employee_app.models.employee import Employee
from employee_app.services.data_access_base import DataAccessProvider

logger = logging.getLogger(__name__)


class SqlAlchemyDataAccessProvider(DataAccessProvider):
    """
    Persistence gateway over a request-scoped AsyncSession.

    The session is owned by get_db_session(); this class never closes it.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_employees(self) -> List[Employee]:
        try:
            result = await self._session.execute(select(Employee))
            return list(result.scalars().all())
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
            logger.error("Database error listing employees: %s", str(e))
            await self._rollback()
            raise StorageUnavailableError(
                message="Could not read employee records",
                context={"error_type": type(e).__name__},
            ) from e

    async def add_employee(self, name: str) -> Employee:
        employee = Employee(name=name)
        try:
            self._session.add(employee)
            await self._session.commit()
        except IntegrityError as e:
            logger.error("Employee insert rejected by store: %s", str(e.orig))
            await self._rollback()
            raise ConstraintViolationError(
                context={"error_type": type(e).__name__},
            ) from e
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
            logger.error("Database error adding employee: %s", str(e))
            await self._rollback()
            raise StorageUnavailableError(
                message="Could not store employee record",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Employee %s created", employee.id)
        return employee

    async def _rollback(self) -> None:
        """
        Reset the session after a failed statement.

        A rollback on a dead connection can itself fail; that failure is
        logged and the caller still raises the original error.
        """
        try:
            await self._session.rollback()
        except (SQLAlchemyError, OSError):
            logger.warning("Rollback after database error failed", exc_info=True)


# ── Dependency ────────────────────────────────────────────────────────────
async def get_data_access_provider(
    db: AsyncSession = Depends(get_db_session),
) -> DataAccessProvider:
    """FastAPI dependency: one provider per request, bound to that request's session."""
    return SqlAlchemyDataAccessProvider(db)
