import logging
from flask import Blueprint, request, jsonify
from sqlalchemy.exc import SQLAlchemyError

from ..auth import get_storage

logger = logging.getLogger(__name__)

bp = Blueprint("tips", __name__, url_prefix="/api/tips")


@bp.route("", methods=["GET"])
def list_tips():
    category = request.args.get("category")
    try:
        storage = get_storage()
        tips = storage.get_tips_by_category(category) if category else storage.get_all_tips()
        logger.debug(f"Fetched {len(tips)} tips (category={category})")
        return jsonify([tip.to_dict() for tip in tips]), 200
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching tips: {str(e)}")
        return jsonify({"message": "Failed to fetch tips"}), 500


@bp.route("/random", methods=["GET"])
def random_tip():
    try:
        tip = get_storage().get_random_tip()
        return jsonify(tip.to_dict() if tip else None), 200
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching random tip: {str(e)}")
        return jsonify({"message": "Failed to fetch random tip"}), 500
