"""Badge eligibility rules.

Each badge id maps to one predicate over a user's recent entries. The rule
table below is the only place thresholds live; ``evaluate`` never touches the
database, the caller persists whatever it returns.
"""
import logging
import math

logger = logging.getLogger(__name__)

MIN_ENTRIES_FOR_STATS = 2


def usage_value(entry, field):
    """Numeric value of a text measurement; a missing one counts as zero."""
    raw = getattr(entry, field)
    if raw is None or not str(raw).strip():
        return 0.0
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        logger.warning(f"Non-numeric {field} on entry {entry.id}: {raw!r}")
        return 0.0
    return value


def average_at_least(field, bound):
    def rule(entries):
        if len(entries) < MIN_ENTRIES_FOR_STATS:
            return False
        average = sum(usage_value(e, field) for e in entries) / len(entries)
        return average >= bound
    rule.__name__ = f"average_{field}_at_least_{bound}"
    return rule


def average_below(field, bound):
    def rule(entries):
        if len(entries) < MIN_ENTRIES_FOR_STATS:
            return False
        average = sum(usage_value(e, field) for e in entries) / len(entries)
        return average < bound
    rule.__name__ = f"average_{field}_below_{bound}"
    return rule


def weeks_meeting(thresholds, min_weeks):
    """Eligible when ``min_weeks`` entries meet every ``field >= value`` threshold at once."""
    def rule(entries):
        if len(entries) < MIN_ENTRIES_FOR_STATS:
            return False
        qualifying = [
            e for e in entries
            if all(usage_value(e, field) >= value for field, value in thresholds.items())
        ]
        return len(qualifying) >= min_weeks
    rule.__name__ = "weeks_meeting_" + "_and_".join(thresholds)
    return rule


def entries_logged(min_entries):
    def rule(entries):
        return len(entries) >= min_entries
    rule.__name__ = f"entries_logged_{min_entries}"
    return rule


def notes_written(min_entries):
    def rule(entries):
        noted = [e for e in entries if (e.notes or "").strip()]
        return len(noted) >= min_entries
    rule.__name__ = f"notes_written_{min_entries}"
    return rule


# badge id -> predicate
BADGE_RULES = {
    1: average_at_least("water_usage", 12),  # Hydration Hero
    2: weeks_meeting({"electricity_usage": 10}, 2),  # Recycling Streak
    3: entries_logged(4),  # Consistency Builder
    4: weeks_meeting({"electricity_usage": 10, "water_usage": 12}, 2),  # Dual Goal Getter
    5: notes_written(2),  # Mindful Tracker
    6: entries_logged(6),  # SimplySustainable Legend
}


def evaluate(recent_entries, earned_badge_ids, badges, rules=None):
    """Return the badges from ``badges`` newly earned by ``recent_entries``.

    Badges whose id is in ``earned_badge_ids`` are always skipped. Results are
    ordered by badge id and a single call may return several badges.
    """
    rules = BADGE_RULES if rules is None else rules
    earned = set(earned_badge_ids)
    eligible = []
    for badge in sorted(badges, key=lambda b: b.id):
        if badge.id in earned:
            continue
        rule = rules.get(badge.id)
        if rule is None:
            continue
        if rule(recent_entries):
            logger.debug(f"Badge {badge.id} ({badge.name}) eligible via {rule.__name__}")
            eligible.append(badge)
    return eligible
