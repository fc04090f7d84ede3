import logging
from flask import Blueprint, request, jsonify
from sqlalchemy.exc import SQLAlchemyError

from ..auth import default_user, get_storage
from ..models import db
from ..schemas import UsageEntryCreate, UsageEntryUpdate, parse
from ..weeks import monday_of_week

logger = logging.getLogger(__name__)

bp = Blueprint("usage", __name__, url_prefix="/api/usage")


@bp.route("", methods=["GET"])
@default_user
def list_usage(user):
    limit = request.args.get("limit", type=int)
    if limit is not None and limit <= 0:
        limit = None
    try:
        entries = get_storage().list_entries(user.id, limit)
        logger.debug(f"Fetched {len(entries)} usage entries for user {user.username}")
        return jsonify([entry.to_dict() for entry in entries]), 200
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching usage entries: {str(e)}")
        return jsonify({"message": "Failed to fetch usage entries"}), 500


@bp.route("/current", methods=["GET"])
@default_user
def current_usage(user):
    try:
        entry = get_storage().get_entry_for_week(user.id, monday_of_week())
        return jsonify(entry.to_dict() if entry else None), 200
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching current week's usage: {str(e)}")
        return jsonify({"message": "Failed to fetch current week's usage"}), 500


@bp.route("/recent", methods=["GET"])
@default_user
def recent_usage(user):
    try:
        entries = get_storage().list_recent(user.id)
        return jsonify([entry.to_dict() for entry in entries]), 200
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching recent usage: {str(e)}")
        return jsonify({"message": "Failed to fetch recent usage"}), 500


@bp.route("", methods=["POST"])
@default_user
def create_usage(user):
    data = request.get_json(silent=True)
    logger.debug(f"Create usage payload: {data}")
    payload = parse(UsageEntryCreate, data, "Invalid usage data")
    try:
        entry = get_storage().submit_entry(user.id, payload.model_dump())
        return jsonify(entry.to_dict()), 200
    except SQLAlchemyError as e:
        logger.error(f"Database error creating usage entry: {str(e)}")
        db.session.rollback()
        return jsonify({"message": "Failed to create usage entry"}), 500


@bp.route("/<int:id>", methods=["PUT"])
@default_user
def update_usage(user, id):
    data = request.get_json(silent=True)
    logger.debug(f"Update usage {id} payload: {data}")
    payload = parse(UsageEntryUpdate, data, "Invalid usage data")
    try:
        entry = get_storage().update_entry(id, payload.provided_fields())
        return jsonify(entry.to_dict()), 200
    except SQLAlchemyError as e:
        logger.error(f"Database error updating usage entry: {str(e)}")
        db.session.rollback()
        return jsonify({"message": "Failed to update usage entry"}), 500
