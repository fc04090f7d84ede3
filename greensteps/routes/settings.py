import logging
from flask import Blueprint, request, jsonify
from sqlalchemy.exc import SQLAlchemyError

from ..auth import default_user, get_storage
from ..models import db
from ..schemas import SettingsReplace, SettingsUpdate, parse

logger = logging.getLogger(__name__)

bp = Blueprint("settings", __name__, url_prefix="/api/settings")


@bp.route("", methods=["GET"])
@default_user
def get_settings(user):
    try:
        settings = get_storage().get_settings(user.id)
        return jsonify(settings.to_dict() if settings else None), 200
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching settings: {str(e)}")
        return jsonify({"message": "Failed to fetch settings"}), 500


@bp.route("", methods=["PUT", "PATCH"])
@default_user
def update_settings(user):
    data = request.get_json(silent=True)
    logger.debug(f"{request.method} settings payload: {data}")
    model = SettingsReplace if request.method == "PUT" else SettingsUpdate
    payload = parse(model, data, "Invalid settings data")
    try:
        settings = get_storage().update_settings(user.id, payload.provided_fields())
        logger.info(f"Settings updated for user {user.username}")
        return jsonify(settings.to_dict()), 200
    except SQLAlchemyError as e:
        logger.error(f"Database error updating settings: {str(e)}")
        db.session.rollback()
        return jsonify({"message": "Failed to update settings"}), 500
