"""Health check endpoints."""

import falcon


class HealthResource:
    """Health and readiness endpoints."""

    def on_get(self, req: falcon.Request, resp: falcon.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    def on_get_ready(self, req: falcon.Request, resp: falcon.Response) -> None:
        """GET /v1/health/ready - readiness."""
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
