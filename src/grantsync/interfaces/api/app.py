"""Falcon WSGI application."""

import falcon

from grantsync.interfaces.api.errors import register_error_handlers
from grantsync.interfaces.api.middleware.request_logging import RequestLoggingMiddleware
from grantsync.interfaces.api.resources.assignments import (
    AssignmentsResource,
    AttestationResource,
)
from grantsync.interfaces.api.resources.health import HealthResource


def create_app(
    project_assignments: AssignmentsResource,
    project_attestation: AttestationResource,
    space_assignments: AssignmentsResource,
    space_attestation: AttestationResource,
    health_resource: HealthResource,
) -> falcon.App:
    """Create Falcon app with routes."""
    app = falcon.App(middleware=[RequestLoggingMiddleware()])
    register_error_handlers(app)

    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    for prefix, assignments, attestation in (
        ("/v1/projects/{object_key}", project_assignments, project_attestation),
        ("/v1/spaces/{object_key}", space_assignments, space_attestation),
    ):
        for action in ("apply", "compute", "update", "remove"):
            app.add_route(f"{prefix}/assignments/{action}", assignments, suffix=action)
        app.add_route(f"{prefix}/attestation", attestation)
    return app
