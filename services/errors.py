"""
Error taxonomy for event finalization.

Each error carries the HTTP status and machine code it is reported with, so
routes and scripts can surface it without re-classifying.
"""


class FinalizationError(Exception):
    """Base class for failures surfaced by the finalization service."""

    status_code = 500
    code = 'finalization_error'

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        payload = {'error': self.message, 'code': self.code}
        if self.details:
            payload['details'] = self.details
        return payload


class NotFound(FinalizationError):
    """Referenced event or course does not exist."""

    status_code = 404
    code = 'not_found'


class AlreadyFinalized(FinalizationError):
    """Event was finalized before; the request is rejected as a no-op."""

    status_code = 409
    code = 'already_finalized'


class BadRequest(FinalizationError):
    status_code = 400
    code = 'bad_request'


class DataIntegrityError(FinalizationError):
    """Stored data cannot support finalization (missing holes, stats or bad scores)."""

    status_code = 422
    code = 'data_integrity_error'


class StorageError(FinalizationError):
    status_code = 500
    code = 'storage_error'
