from __future__ import annotations

import logging
from typing import Any

from flask import jsonify

from ..core.exceptions import (
    BackupError,
    DuplicateAttendanceError,
    DuplicateMemberError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def ok(status_code: int = 200, **payload: Any):
    return jsonify({"success": True, **payload}), status_code


def fail(message: str, status_code: int):
    return jsonify({"success": False, "message": message}), status_code


def error_response(e: Exception, *, action: str):
    """Map a service exception to the JSON error envelope."""

    if isinstance(e, (DuplicateAttendanceError, DuplicateMemberError)):
        return fail(str(e), 409)
    if isinstance(e, (ValidationError, BackupError)):
        return fail(str(e), 400)
    logger.exception("Unexpected error while trying to %s", action)
    return fail(f"System error while trying to {action}", 500)
