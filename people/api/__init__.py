"""
API module.

FastAPI application factory and routers for all HTTP endpoints.
"""
