from datetime import datetime
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def _isoformat(value):
    return value.isoformat() if value else None


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    # Stored as given; there is no login flow to protect
    password = db.Column(db.String(120), nullable=False)
    entries = db.relationship("UsageEntry", backref="user", lazy=True)

    def to_dict(self):
        return {"id": self.id, "username": self.username}


class UsageEntry(db.Model):
    __tablename__ = "usage_entries"
    __table_args__ = (
        db.UniqueConstraint("user_id", "week_start_date", name="uq_usage_user_week"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    week_start_date = db.Column(db.String(10), nullable=False)  # YYYY-MM-DD, a Monday
    # Measurements keep the user's exact text
    electricity_usage = db.Column(db.String(32))
    electricity_unit = db.Column(db.String(16), nullable=False, default="kWh")
    water_usage = db.Column(db.String(32))
    water_unit = db.Column(db.String(16), nullable=False, default="L")
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "weekStartDate": self.week_start_date,
            "electricityUsage": self.electricity_usage,
            "electricityUnit": self.electricity_unit,
            "waterUsage": self.water_usage,
            "waterUnit": self.water_unit,
            "notes": self.notes,
            "createdAt": _isoformat(self.created_at)
        }


class Tip(db.Model):
    __tablename__ = "tips"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(50), nullable=False)  # e.g., "recycling", "hydration"
    difficulty = db.Column(db.String(10), nullable=False)  # easy, medium, hard
    potential_savings = db.Column(db.String(32))
    icon = db.Column(db.String(50), nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "difficulty": self.difficulty,
            "potentialSavings": self.potential_savings,
            "icon": self.icon
        }


class Badge(db.Model):
    __tablename__ = "badges"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(80), nullable=False)
    description = db.Column(db.Text, nullable=False)
    icon = db.Column(db.String(50), nullable=False)
    requirement = db.Column(db.Text, nullable=False)
    points = db.Column(db.Integer, nullable=False, default=0)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "requirement": self.requirement,
            "points": self.points
        }


class UserBadge(db.Model):
    __tablename__ = "user_badges"
    __table_args__ = (
        db.UniqueConstraint("user_id", "badge_id", name="uq_user_badge"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    badge_id = db.Column(db.Integer, db.ForeignKey("badges.id"), nullable=False)
    earned_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    badge = db.relationship("Badge", lazy="joined")

    def to_dict(self, with_badge=False):
        data = {
            "id": self.id,
            "userId": self.user_id,
            "badgeId": self.badge_id,
            "earnedAt": _isoformat(self.earned_at)
        }
        if with_badge:
            data["badge"] = self.badge.to_dict()
        return data


class Settings(db.Model):
    __tablename__ = "settings"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False)
    electricity_limit = db.Column(db.String(32), nullable=False)  # weekly limit
    electricity_unit = db.Column(db.String(16), nullable=False)
    water_limit = db.Column(db.String(32), nullable=False)  # weekly limit
    water_unit = db.Column(db.String(16), nullable=False)
    weekly_alerts = db.Column(db.Boolean, nullable=False, default=True)
    threshold_alerts = db.Column(db.Boolean, nullable=False, default=True)
    saving_tips = db.Column(db.Boolean, nullable=False, default=True)

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "electricityLimit": self.electricity_limit,
            "electricityUnit": self.electricity_unit,
            "waterLimit": self.water_limit,
            "waterUnit": self.water_unit,
            "weeklyAlerts": self.weekly_alerts,
            "thresholdAlerts": self.threshold_alerts,
            "savingTips": self.saving_tips
        }
