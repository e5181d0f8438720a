# Services package init
"""
Employee Service: Services Layer
=================================

What:  Logic sitting between routes (HTTP) and the database (persistence).

Service Inventory:
    - DataAccessProvider (abstract): contract for listing and adding employees
    - SqlAlchemyDataAccessProvider: concrete implementation over an AsyncSession
    - validate_employee_payload: presence/type checks for the create body

Routes depend on the abstract DataAccessProvider only, so tests can swap in
an in-memory fake through app.dependency_overrides.
"""
