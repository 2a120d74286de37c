"""Read attestation use case - who currently holds which token on an object."""

from collections.abc import Iterable

from grantsync.application.ports import PermissionGatewayFactory
from grantsync.domain.services import DEFAULT_IGNORED_TOKENS, Attestation, create_attestation


class ReadAttestationUseCase:
    """Invert all observed permissions of an object into token -> actors."""

    def __init__(
        self,
        gateway_factory: PermissionGatewayFactory,
        ignored_tokens: Iterable[str] = DEFAULT_IGNORED_TOKENS,
    ) -> None:
        self._gateway_factory = gateway_factory
        self._ignored_tokens = frozenset(ignored_tokens)

    def execute(self, object_key: str) -> Attestation:
        observed = self._gateway_factory(object_key).read_permissions()
        return create_attestation(observed, self._ignored_tokens)
