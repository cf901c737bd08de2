"""ASGI middleware for the FastAPI application."""

from .request_log import RequestLogMiddleware

__all__ = ["RequestLogMiddleware"]
