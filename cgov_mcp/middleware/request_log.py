"""Request logging middleware.

Logs the start and end of every MCP request using pure ASGI pattern.
"""

import logging
import time
from uuid import uuid4

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """
    Log MCP requests as they are received and closed.

    Uses pure ASGI middleware pattern instead of BaseHTTPMiddleware so the
    response body is passed through untouched.

    Also tags each response with an X-Request-Id header for tracing.
    """

    def __init__(self, app, path_prefix: str = "/mcp"):
        self.app = app
        self.path_prefix = path_prefix

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http" or not scope["path"].startswith(self.path_prefix):
            await self.app(scope, receive, send)
            return

        request_id = str(uuid4())
        start = time.perf_counter()
        status = 500
        logger.info(f"MCP request received ({scope['method']} {scope['path']}, id={request_id})")

        async def send_with_request_id(message):
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
                headers = list(message.get("headers", []))
                headers.append((b"x-request-id", request_id.encode()))
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            elapsed_ms = int((time.perf_counter() - start) * 1000)
            logger.info(f"MCP request closed (id={request_id}, status={status}, {elapsed_ms}ms)")
