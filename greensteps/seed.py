import logging

from .models import db, User, Tip, Badge, Settings, UsageEntry
from .schemas import DEFAULT_SETTINGS
from .weeks import previous_weeks

logger = logging.getLogger(__name__)

DEFAULT_USER = {"username": "user_1", "password": "password123"}

TIPS = [
    {"title": "Sort & Rinse Recycling",
     "description": "Give containers a quick rinse so more items can be recycled.",
     "category": "recycling", "difficulty": "easy", "potential_savings": "8", "icon": "recycle"},
    {"title": "Bring a Reusable Tote",
     "description": "Keep a foldable bag handy to avoid single-use packaging.",
     "category": "recycling", "difficulty": "easy", "potential_savings": "6", "icon": "bag-shopping"},
    {"title": "Create a Drop-off Station",
     "description": "Set aside a bin for batteries, glass, and special recyclables.",
     "category": "recycling", "difficulty": "medium", "potential_savings": "12", "icon": "box"},
    {"title": "Choose Refill Options",
     "description": "Pick refillable products to cut down on packaging waste.",
     "category": "recycling", "difficulty": "medium", "potential_savings": "10", "icon": "bottle-droplet"},
    {"title": "Host a Swap Moment",
     "description": "Trade books, clothes, or supplies to keep items in use longer.",
     "category": "recycling", "difficulty": "hard", "potential_savings": "18", "icon": "handshake"},
    {"title": "Carry a Water Bottle",
     "description": "Keep a reusable bottle nearby to stay hydrated all day.",
     "category": "hydration", "difficulty": "easy", "potential_savings": "7", "icon": "bottle-water"},
    {"title": "Set Hydration Reminders",
     "description": "Use a timer or app to sip water every hour.",
     "category": "hydration", "difficulty": "easy", "potential_savings": "5", "icon": "clock"},
    {"title": "Flavor with Fruit",
     "description": "Add citrus or berries to make water more appealing.",
     "category": "hydration", "difficulty": "easy", "potential_savings": "6", "icon": "lemon"},
    {"title": "Plan Water Breaks",
     "description": "Pair a glass of water with key daily routines.",
     "category": "hydration", "difficulty": "medium", "potential_savings": "9", "icon": "calendar"},
    {"title": "Track Your Intake",
     "description": "Log cups or liters to stay consistent with your goal.",
     "category": "hydration", "difficulty": "medium", "potential_savings": "11", "icon": "clipboard-list"},
]

# Ids matter: eligibility rules are keyed by badge id
BADGES = [
    {"id": 1, "name": "Hydration Hero", "description": "Hit your hydration goal", "icon": "droplet",
     "requirement": "Average at least 12 cups/L for 2 weeks", "points": 60},
    {"id": 2, "name": "Recycling Streak", "description": "Keep the recycling rolling", "icon": "recycle",
     "requirement": "Log 10+ recycling actions for 2 weeks", "points": 75},
    {"id": 3, "name": "Consistency Builder", "description": "Show up week after week",
     "icon": "calendar-check", "requirement": "Log habits for 4 weeks", "points": 100},
    {"id": 4, "name": "Dual Goal Getter", "description": "Balance both habits", "icon": "sparkles",
     "requirement": "Meet hydration and recycling goals in 2 weeks", "points": 140},
    {"id": 5, "name": "Mindful Tracker", "description": "Capture habit reflections", "icon": "pen-line",
     "requirement": "Add notes in 2 habit logs", "points": 110},
    {"id": 6, "name": "SimplySustainable Legend", "description": "Sustain the momentum", "icon": "award",
     "requirement": "Log habits for 6 weeks", "points": 200},
]

SAMPLE_WEEKS = 4


def seed_defaults(user_id, rng, sample_entries=True):
    """Load the default user, catalogs and settings into an empty database."""
    if db.session.get(User, user_id):
        logger.debug("Seed data already present, skipping")
        return
    db.session.add(User(id=user_id, **DEFAULT_USER))
    for tip in TIPS:
        db.session.add(Tip(**tip))
    for badge in BADGES:
        db.session.add(Badge(**badge))
    db.session.add(Settings(user_id=user_id, **DEFAULT_SETTINGS))

    if sample_entries:
        for week in previous_weeks(SAMPLE_WEEKS):
            db.session.add(UsageEntry(
                user_id=user_id,
                week_start_date=week,
                electricity_usage=str(round(rng.random() * 10 + 6)),
                electricity_unit="items",
                water_usage=str(round(rng.random() * 6 + 10)),
                water_unit="L"
            ))
    db.session.commit()
    logger.info(f"Seeded {len(TIPS)} tips, {len(BADGES)} badges for user {user_id}")
