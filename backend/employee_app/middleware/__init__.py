# Middleware package init
"""
Employee Service: Middleware Package
=====================================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → Route Handler

    Request ID runs first so the access log line carries the correlation ID;
    on the way out it stamps X-Request-ID onto the response.
"""
