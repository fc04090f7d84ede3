import logging
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class GreenStepsError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {"message": self.message}


class ValidationError(GreenStepsError):
    """Malformed or missing input, with per-field detail."""
    status_code = 400
    message = "Invalid data"

    def __init__(self, message=None, errors=None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self):
        return {"message": self.message, "errors": self.errors}


class ConflictError(GreenStepsError):
    """A weekly entry already exists for the (user, week) pair."""
    status_code = 409
    message = "Usage data already exists for this week"

    def __init__(self, existing_entry, message=None):
        super().__init__(message)
        self.existing_entry = existing_entry

    def to_dict(self):
        return {
            "message": self.message,
            "existingEntry": self.existing_entry.to_dict(),
            "canEdit": True
        }


class NotFoundError(GreenStepsError):
    status_code = 404
    message = "Usage entry not found"


def register_error_handlers(app):
    @app.errorhandler(GreenStepsError)
    def handle_domain_error(e):
        logger.debug(f"{type(e).__name__}: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        if isinstance(e, HTTPException):
            return jsonify({"message": e.description}), e.code
        logger.exception(f"Unhandled error: {str(e)}")
        return jsonify({"message": "Internal server error"}), 500
