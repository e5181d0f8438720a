"""
Employee Service: Employee SQLAlchemy Model
============================================

What:  ORM model representing the `employee` table.
How:   Inherits from SQLAlchemy's DeclarativeBase; create_tables() reads the
       metadata on startup.
Who:   Used by SqlAlchemyDataAccessProvider for inserts and full scans.

Table Design:
    - id:   integer identity, assigned by the store on insert, never updated
    - name: free text, no uniqueness or length constraint

    sqlite_autoincrement keeps SQLite (used in tests) from reusing ids, which
    matches PostgreSQL's SERIAL behaviour.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from employee_app.database import Base


class Employee(Base):
    """A single employee record. Created via POST, read via GET, never changed."""

    __tablename__ = "employee"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-generated identifier",
    )

    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Employee name, free text",
    )

    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, name='{self.name}')>"
