"""Map domain exceptions to HTTP responses."""

import logging

import falcon

from grantsync.domain.exceptions import (
    LookupFailure,
    NotFound,
    ReconciliationError,
    RevokeFailure,
    ValidationError,
)

logger = logging.getLogger(__name__)


def handle_validation_error(req: falcon.Request, resp: falcon.Response, ex, params) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": str(ex)}


def handle_not_found(req: falcon.Request, resp: falcon.Response, ex, params) -> None:
    resp.status = falcon.HTTP_404
    resp.media = {"error": str(ex)}


def handle_lookup_failure(req: falcon.Request, resp: falcon.Response, ex, params) -> None:
    logger.error("Lookup failed on %s %s: %s", req.method, req.path, ex)
    resp.status = falcon.HTTP_502
    resp.media = {"error": "Failed to read remote permissions", "detail": str(ex)}


def handle_reconciliation_error(
    req: falcon.Request, resp: falcon.Response, ex: ReconciliationError, params
) -> None:
    logger.error("Reconciliation failed on %s %s: %s", req.method, req.path, ex)
    resp.status = falcon.HTTP_502
    resp.media = {
        "error": ex.title,
        "operation": "remove" if isinstance(ex, RevokeFailure) else "update",
        "actor_kind": str(ex.actor_kind),
        "name": ex.name,
        "tokens": list(ex.tokens),
        "detail": str(ex.__cause__) if ex.__cause__ else None,
    }


def register_error_handlers(app: falcon.App) -> None:
    app.add_error_handler(ValidationError, handle_validation_error)
    app.add_error_handler(LookupFailure, handle_lookup_failure)
    app.add_error_handler(NotFound, handle_not_found)
    app.add_error_handler(ReconciliationError, handle_reconciliation_error)
