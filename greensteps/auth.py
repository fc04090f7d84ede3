import logging
from functools import wraps
from flask import current_app, jsonify

logger = logging.getLogger(__name__)


def get_storage():
    return current_app.extensions["storage"]


# Single-user deployment: every request acts as the seeded default user
def default_user(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        user = get_storage().get_user(current_app.config["DEFAULT_USER_ID"])
        if not user:
            logger.error("Default user missing from storage")
            return jsonify({"message": "User not found"}), 500
        return f(user, *args, **kwargs)
    return decorated
