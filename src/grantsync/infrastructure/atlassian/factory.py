"""Gateway factories - bind Atlassian gateways to a project or space key."""

from collections.abc import Callable

from grantsync.infrastructure.atlassian.actor_directory import AtlassianActorDirectory
from grantsync.infrastructure.atlassian.client import AtlassianClient
from grantsync.infrastructure.atlassian.confluence_space_permissions import (
    ConfluenceSpacePermissionGateway,
)
from grantsync.infrastructure.atlassian.jira_project_roles import JiraProjectRoleGateway


def create_jira_gateway_factory(
    client: AtlassianClient,
    directory: AtlassianActorDirectory,
) -> Callable[[str], JiraProjectRoleGateway]:
    """Create a factory yielding a fresh project role gateway per pass."""

    def factory(project_key: str) -> JiraProjectRoleGateway:
        return JiraProjectRoleGateway(client, directory, project_key)

    return factory


def create_confluence_gateway_factory(
    client: AtlassianClient,
    directory: AtlassianActorDirectory,
) -> Callable[[str], ConfluenceSpacePermissionGateway]:
    """Create a factory yielding a fresh space permission gateway per pass."""

    def factory(space_key: str) -> ConfluenceSpacePermissionGateway:
        return ConfluenceSpacePermissionGateway(client, directory, space_key)

    return factory
