import logging
from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from ..auth import default_user, get_storage

logger = logging.getLogger(__name__)

bp = Blueprint("badges", __name__, url_prefix="/api/badges")


@bp.route("", methods=["GET"])
def list_badges():
    try:
        badges = get_storage().get_all_badges()
        return jsonify([badge.to_dict() for badge in badges]), 200
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching badges: {str(e)}")
        return jsonify({"message": "Failed to fetch badges"}), 500


@bp.route("/user", methods=["GET"])
@default_user
def user_badges(user):
    try:
        earned = get_storage().get_user_badges(user.id)
        return jsonify([ub.to_dict(with_badge=True) for ub in earned]), 200
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching user badges: {str(e)}")
        return jsonify({"message": "Failed to fetch user badges"}), 500


# Preview only: nothing is awarded here
@bp.route("/eligible", methods=["GET"])
@default_user
def eligible_badges(user):
    try:
        badges = get_storage().check_badge_eligibility(user.id)
        return jsonify([badge.to_dict() for badge in badges]), 200
    except SQLAlchemyError as e:
        logger.error(f"Database error checking badge eligibility: {str(e)}")
        return jsonify({"message": "Failed to check badge eligibility"}), 500
