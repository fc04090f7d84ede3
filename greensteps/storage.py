import logging
import random
import threading

from sqlalchemy.exc import IntegrityError

from .eligibility import evaluate
from .errors import ConflictError, NotFoundError
from .models import db, User, UsageEntry, Tip, Badge, UserBadge, Settings
from .schemas import DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

ENTRY_FIELDS = (
    "week_start_date",
    "electricity_usage",
    "electricity_unit",
    "water_usage",
    "water_unit",
    "notes",
)

SETTINGS_FIELDS = tuple(DEFAULT_SETTINGS)


class Storage:
    """All reads and writes for users, weekly entries, badges, tips and settings.

    One instance is created per application. Writes that check an invariant
    before inserting run under ``self._lock`` so the check and the insert
    happen as one step.
    """

    def __init__(self, recent_window=10, electricity_unit="kWh", water_unit="L", rng=None):
        self.recent_window = recent_window
        self.electricity_unit = electricity_unit
        self.water_unit = water_unit
        self.rng = rng or random.Random()
        self._lock = threading.RLock()

    # Users

    def get_user(self, user_id):
        return db.session.get(User, user_id)

    def get_user_by_username(self, username):
        return User.query.filter_by(username=username).first()

    def create_user(self, username, password):
        user = User(username=username, password=password)
        db.session.add(user)
        db.session.commit()
        logger.info(f"User created: {username}")
        return user

    # Usage entries

    def list_entries(self, user_id, limit=None):
        query = UsageEntry.query.filter_by(user_id=user_id).order_by(UsageEntry.week_start_date.desc())
        if limit:
            query = query.limit(limit)
        return query.all()

    def list_recent(self, user_id):
        return self.list_entries(user_id, self.recent_window)

    def get_entry_for_week(self, user_id, week_start_date):
        return UsageEntry.query.filter_by(user_id=user_id, week_start_date=week_start_date).first()

    def create_entry(self, user_id, week_start_date, electricity_usage=None, electricity_unit=None,
                     water_usage=None, water_unit=None, notes=None):
        with self._lock:
            existing = self.get_entry_for_week(user_id, week_start_date)
            if existing:
                logger.debug(f"Entry for week {week_start_date} already exists for user {user_id}")
                raise ConflictError(existing)
            entry = UsageEntry(
                user_id=user_id,
                week_start_date=week_start_date,
                electricity_usage=electricity_usage,
                electricity_unit=electricity_unit or self.electricity_unit,
                water_usage=water_usage,
                water_unit=water_unit or self.water_unit,
                notes=notes
            )
            db.session.add(entry)
            try:
                db.session.commit()
            except IntegrityError:
                db.session.rollback()
                existing = self.get_entry_for_week(user_id, week_start_date)
                if existing is None:
                    raise
                raise ConflictError(existing)
        logger.info(f"Usage entry {entry.id} created for week {week_start_date} (user {user_id})")
        return entry

    def update_entry(self, entry_id, changes):
        """Apply ``changes`` (attribute name -> value) to an existing entry.

        Only names in ``ENTRY_FIELDS`` are applied; ``id``, ``user_id`` and
        ``created_at`` cannot change this way.
        """
        with self._lock:
            entry = db.session.get(UsageEntry, entry_id)
            if entry is None:
                raise NotFoundError()
            new_week = changes.get("week_start_date")
            if new_week and new_week != entry.week_start_date:
                clash = self.get_entry_for_week(entry.user_id, new_week)
                if clash:
                    raise ConflictError(clash)
            for field in ENTRY_FIELDS:
                if field in changes:
                    setattr(entry, field, changes[field])
            db.session.commit()
        logger.info(f"Usage entry {entry_id} updated: {sorted(f for f in changes if f in ENTRY_FIELDS)}")
        return entry

    def submit_entry(self, user_id, fields):
        """Create this week's entry and award any badges it unlocks."""
        entry = self.create_entry(user_id, **fields)
        for badge in self.check_badge_eligibility(user_id):
            self.award_badge(user_id, badge.id)
        return entry

    # Tips

    def get_all_tips(self):
        return Tip.query.order_by(Tip.id).all()

    def get_tips_by_category(self, category):
        return Tip.query.filter_by(category=category).order_by(Tip.id).all()

    def get_random_tip(self):
        tips = self.get_all_tips()
        return self.rng.choice(tips) if tips else None

    # Badges

    def get_all_badges(self):
        return Badge.query.order_by(Badge.id).all()

    def get_user_badges(self, user_id):
        return UserBadge.query.filter_by(user_id=user_id).order_by(UserBadge.id).all()

    def award_badge(self, user_id, badge_id):
        with self._lock:
            existing = UserBadge.query.filter_by(user_id=user_id, badge_id=badge_id).first()
            if existing:
                return existing
            user_badge = UserBadge(user_id=user_id, badge_id=badge_id)
            db.session.add(user_badge)
            db.session.commit()
        logger.info(f"Badge {badge_id} awarded to user {user_id}")
        return user_badge

    def check_badge_eligibility(self, user_id):
        earned_ids = [ub.badge_id for ub in self.get_user_badges(user_id)]
        return evaluate(self.list_recent(user_id), earned_ids, self.get_all_badges())

    # Settings

    def get_settings(self, user_id):
        return Settings.query.filter_by(user_id=user_id).first()

    def update_settings(self, user_id, changes):
        with self._lock:
            settings = self.get_settings(user_id)
            if settings is None:
                settings = Settings(user_id=user_id, **DEFAULT_SETTINGS)
                db.session.add(settings)
                logger.info(f"Settings created for user {user_id}")
            for field in SETTINGS_FIELDS:
                if field in changes:
                    setattr(settings, field, changes[field])
            db.session.commit()
        return settings
