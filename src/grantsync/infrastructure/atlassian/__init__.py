"""Atlassian Cloud adapters."""

from grantsync.infrastructure.atlassian.actor_directory import AtlassianActorDirectory
from grantsync.infrastructure.atlassian.client import AtlassianAPIError, AtlassianClient
from grantsync.infrastructure.atlassian.confluence_space_permissions import (
    ConfluenceSpacePermissionGateway,
)
from grantsync.infrastructure.atlassian.factory import (
    create_confluence_gateway_factory,
    create_jira_gateway_factory,
)
from grantsync.infrastructure.atlassian.jira_project_roles import JiraProjectRoleGateway

__all__ = [
    "AtlassianAPIError",
    "AtlassianActorDirectory",
    "AtlassianClient",
    "ConfluenceSpacePermissionGateway",
    "JiraProjectRoleGateway",
    "create_confluence_gateway_factory",
    "create_jira_gateway_factory",
]
