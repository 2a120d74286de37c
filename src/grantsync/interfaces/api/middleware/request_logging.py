"""Request logging middleware."""

import logging
import time

import falcon

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """Logs method, path, status and duration of every request."""

    def process_request(self, req: falcon.Request, resp: falcon.Response) -> None:
        req.context.started_at = time.perf_counter()

    def process_response(
        self, req: falcon.Request, resp: falcon.Response, resource, req_succeeded: bool
    ) -> None:
        started_at = getattr(req.context, "started_at", None)
        elapsed_ms = (time.perf_counter() - started_at) * 1000 if started_at else 0.0
        logger.info("%s %s -> %s (%.1f ms)", req.method, req.path, resp.status, elapsed_ms)
