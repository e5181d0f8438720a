# Routes package init
"""
Employee Service: API Routes Package
=====================================

Route Inventory:
    - employees.py:  GET  /api/employees     (list all employees)
                     POST /api/addemployee   (create one employee)
    - health.py:     GET  /health            (liveness)
                     GET  /ready             (readiness, reads the store)

The root banner (GET /) lives in main.py alongside the app factory.
Routes stay thin: decode the request, call the provider, pick a status code.
"""
