"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers. It is thin: it dispatches commands
and queries through the dispatcher, publishes account events, and
translates results to HTTP responses.

Structure:
- api/v1/: API version 1 endpoints (RESTful resources)
- api/middleware/: Request tracing
"""
