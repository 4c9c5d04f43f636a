"""Presentation layer: FastAPI routers, dependencies and error handlers."""
