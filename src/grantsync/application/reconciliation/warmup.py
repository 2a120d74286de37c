"""Best-effort cache warm-up before a reconciliation pass."""

import logging

from grantsync.application.ports import ActorDirectory, PermissionGateway
from grantsync.domain.entities import AssignmentOrder
from grantsync.domain.exceptions import GrantSyncError
from grantsync.domain.value_objects import ActorKind

logger = logging.getLogger(__name__)


def warm_up(
    gateway: PermissionGateway,
    directory: ActorDirectory,
    *orders: AssignmentOrder,
) -> None:
    """Prefetch permissions and actors referenced by ``orders``.

    Failures are logged and discarded; the pass itself surfaces real errors.
    """
    tokens: set[str] = set()
    user_names: dict[str, None] = {}
    group_names: dict[str, None] = {}
    for order in orders:
        tokens.update(order.tokens)
        user_names.update(dict.fromkeys(order.names(ActorKind.USER)))
        group_names.update(dict.fromkeys(order.names(ActorKind.GROUP)))

    try:
        gateway.read_permissions(sorted(tokens))
    except GrantSyncError as e:
        logger.warning("Ignoring failed permission prefetch: %s", e)

    directory.register_usernames(*user_names)
    directory.register_group_names(*group_names)
