"""Application ports - interfaces for external adapters."""

from grantsync.application.ports.actor_directory import ActorDirectory
from grantsync.application.ports.permission_gateway import (
    PermissionGateway,
    PermissionGatewayFactory,
    PermissionGrantor,
)

__all__ = [
    "ActorDirectory",
    "PermissionGateway",
    "PermissionGatewayFactory",
    "PermissionGrantor",
]
