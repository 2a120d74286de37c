"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

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
from grantsync.domain.value_objects import ObjectKind
from grantsync.interfaces.api.app import create_app
from grantsync.interfaces.api.resources.assignments import (
    AssignmentsResource,
    AttestationResource,
)
from grantsync.interfaces.api.resources.health import HealthResource

from tests.conftest import FakeActorDirectory, FakeGatewayFactory, FakePermissionGateway


def _resource(kind, factory, directory) -> AssignmentsResource:
    return AssignmentsResource(
        kind,
        apply_assignments=ApplyAssignmentsUseCase(factory, directory),
        compute_assignments=ComputeAssignmentsUseCase(factory, directory),
        update_assignments=UpdateAssignmentsUseCase(factory, directory),
        remove_assignments=RemoveAssignmentsUseCase(factory, directory),
    )


@pytest.fixture
def api_directory() -> FakeActorDirectory:
    return FakeActorDirectory(users=["alice", "bob"], groups=["eng"])


@pytest.fixture
def project_gateway() -> FakePermissionGateway:
    return FakePermissionGateway()


@pytest.fixture
def space_gateway() -> FakePermissionGateway:
    return FakePermissionGateway()


@pytest.fixture
def app(api_directory, project_gateway, space_gateway):
    """Falcon WSGI app wired to in-memory gateways."""
    projects = FakeGatewayFactory(project_gateway)
    spaces = FakeGatewayFactory(space_gateway)
    return create_app(
        project_assignments=_resource(ObjectKind.PROJECT, projects, api_directory),
        project_attestation=AttestationResource(ReadAttestationUseCase(projects)),
        space_assignments=_resource(ObjectKind.SPACE, spaces, api_directory),
        space_attestation=AttestationResource(ReadAttestationUseCase(spaces)),
        health_resource=HealthResource(),
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon test client."""
    return TestClient(app)
