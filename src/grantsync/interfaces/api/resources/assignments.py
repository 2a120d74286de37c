"""Assignment reconciliation API resources."""

from typing import Any

import falcon

from grantsync.application.dto import parse_assignments
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
from grantsync.domain.exceptions import ValidationError
from grantsync.domain.value_objects import ObjectKind


def _read_body(req: falcon.Request) -> dict[str, Any]:
    body = req.get_media(default_when_empty={})
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def _optional_str(body: dict[str, Any], key: str) -> str | None:
    value = body.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    return value


class AssignmentsResource:
    """POST /v1/{projects|spaces}/{object_key}/assignments/{apply|compute|update|remove}."""

    def __init__(
        self,
        object_kind: ObjectKind,
        apply_assignments: ApplyAssignmentsUseCase,
        compute_assignments: ComputeAssignmentsUseCase,
        update_assignments: UpdateAssignmentsUseCase,
        remove_assignments: RemoveAssignmentsUseCase,
    ) -> None:
        self._kind = object_kind
        self._apply = apply_assignments
        self._compute = compute_assignments
        self._update = update_assignments
        self._remove = remove_assignments

    def on_post_apply(self, req: falcon.Request, resp: falcon.Response, object_key: str) -> None:
        """Grant declared assignments on an object with no prior state."""
        body = _read_body(req)
        assignments = parse_assignments(body.get("assignments"), self._kind)
        resp.media = self._apply.execute(object_key, assignments).to_dict()
        resp.status = falcon.HTTP_200

    def on_post_compute(self, req: falcon.Request, resp: falcon.Response, object_key: str) -> None:
        """Report observed tokens of declared actors without mutating anything."""
        body = _read_body(req)
        assignments = parse_assignments(body.get("assignments"), self._kind)
        resp.media = self._compute.execute(object_key, assignments).to_dict()
        resp.status = falcon.HTTP_200

    def on_post_update(self, req: falcon.Request, resp: falcon.Response, object_key: str) -> None:
        """Move an object from previous to planned assignments."""
        body = _read_body(req)
        previous = parse_assignments(body.get("previous_assignments"), self._kind)
        planned = parse_assignments(body.get("assignments"), self._kind)
        force_update = body.get("force_update", False)
        if not isinstance(force_update, bool):
            raise ValidationError("force_update must be a boolean")

        result = self._update.execute(
            object_key,
            previous,
            planned,
            previous_version=_optional_str(body, "previous_assignment_version"),
            planned_version=_optional_str(body, "assignment_version"),
            force_update=force_update,
        )
        resp.media = result.to_dict()
        resp.status = falcon.HTTP_200

    def on_post_remove(self, req: falcon.Request, resp: falcon.Response, object_key: str) -> None:
        """Revoke everything the given assignments granted."""
        body = _read_body(req)
        assignments = parse_assignments(body.get("assignments"), self._kind)
        self._remove.execute(object_key, assignments)
        resp.status = falcon.HTTP_204


class AttestationResource:
    """GET /v1/{projects|spaces}/{object_key}/attestation - token -> actor names."""

    def __init__(self, read_attestation: ReadAttestationUseCase) -> None:
        self._read = read_attestation

    def on_get(self, req: falcon.Request, resp: falcon.Response, object_key: str) -> None:
        resp.media = {"key": object_key, **self._read.execute(object_key).to_dict()}
        resp.status = falcon.HTTP_200
