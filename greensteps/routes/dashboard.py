import logging
from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from ..auth import default_user, get_storage
from ..eligibility import usage_value
from ..weeks import monday_of_week

logger = logging.getLogger(__name__)

bp = Blueprint("dashboard", __name__, url_prefix="/api")


@bp.route("/healthz", methods=["GET"])
def health_check():
    return jsonify({"status": "ok"}), 200


@bp.route("/dashboard", methods=["GET"])
@default_user
def dashboard(user):
    try:
        storage = get_storage()
        current = storage.get_entry_for_week(user.id, monday_of_week())
        recent = storage.list_recent(user.id)
        earned = storage.get_user_badges(user.id)
        settings = storage.get_settings(user.id)

        total_points = sum(ub.badge.points for ub in earned)
        recent_electricity = sum(usage_value(e, "electricity_usage") for e in recent)
        recent_water = sum(usage_value(e, "water_usage") for e in recent)
        # Placeholder figure until real savings are modelled
        monthly_savings = storage.rng.randint(20, 49)

        logger.debug(f"Dashboard for user {user.username}: {len(recent)} recent entries, {total_points} points")
        return jsonify({
            "currentWeekUsage": current.to_dict() if current else None,
            "recentUsage": [e.to_dict() for e in recent],
            "totalPoints": total_points,
            "monthlySavings": monthly_savings,
            "recentElectricity": recent_electricity,
            "recentWater": recent_water,
            "settings": settings.to_dict() if settings else None
        }), 200
    except SQLAlchemyError as e:
        logger.error(f"Database error fetching dashboard: {str(e)}")
        return jsonify({"message": "Failed to fetch dashboard data"}), 500
