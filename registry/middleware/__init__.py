"""ASGI middleware."""

from registry.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
