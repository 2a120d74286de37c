"""Application entry point and composition root."""

import logging

import falcon

from grantsync import __version__
from grantsync.application.use_cases.assignment.apply_assignments import ApplyAssignmentsUseCase
from grantsync.application.use_cases.assignment.compute_assignments import (
    ComputeAssignmentsUseCase,
)
from grantsync.application.use_cases.assignment.read_attestation import ReadAttestationUseCase
from grantsync.application.use_cases.assignment.remove_assignments import (
    RemoveAssignmentsUseCase,
)
from grantsync.application.use_cases.assignment.update_assignments import (
    UpdateAssignmentsUseCase,
)
from grantsync.config import get_settings
from grantsync.domain.value_objects import ObjectKind
from grantsync.infrastructure.atlassian import (
    AtlassianActorDirectory,
    AtlassianClient,
    create_confluence_gateway_factory,
    create_jira_gateway_factory,
)
from grantsync.interfaces.api.app import create_app
from grantsync.interfaces.api.resources.assignments import (
    AssignmentsResource,
    AttestationResource,
)
from grantsync.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"grantsync v{__version__}")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
    )


def _assignments_resource(object_kind, gateway_factory, directory) -> AssignmentsResource:
    return AssignmentsResource(
        object_kind,
        apply_assignments=ApplyAssignmentsUseCase(gateway_factory, directory),
        compute_assignments=ComputeAssignmentsUseCase(gateway_factory, directory),
        update_assignments=UpdateAssignmentsUseCase(gateway_factory, directory),
        remove_assignments=RemoveAssignmentsUseCase(gateway_factory, directory),
    )


def create_grantsync_app() -> falcon.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)

    client = AtlassianClient(
        base_url=settings.atlassian_url,
        username=settings.atlassian_username,
        token=settings.atlassian_token,
        timeout=settings.http_timeout,
    )
    directory = AtlassianActorDirectory(client, cache_ttl=settings.directory_cache_ttl)
    project_gateways = create_jira_gateway_factory(client, directory)
    space_gateways = create_confluence_gateway_factory(client, directory)

    logger.info(
        "Starting grantsync v%s against %s (%s)",
        __version__,
        settings.atlassian_url,
        settings.environment,
    )
    return create_app(
        project_assignments=_assignments_resource(
            ObjectKind.PROJECT, project_gateways, directory
        ),
        project_attestation=AttestationResource(
            ReadAttestationUseCase(project_gateways, settings.ignored_tokens)
        ),
        space_assignments=_assignments_resource(ObjectKind.SPACE, space_gateways, directory),
        space_attestation=AttestationResource(
            ReadAttestationUseCase(space_gateways, settings.ignored_tokens)
        ),
        health_resource=HealthResource(),
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    app = create_grantsync_app()
    uvicorn.run(app, host=settings.host, port=settings.port, interface="wsgi")
