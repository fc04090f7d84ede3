from datetime import date, timedelta


def monday_of_week(day=None):
    """Return the Monday on or before ``day`` (default today) as YYYY-MM-DD."""
    if day is None:
        day = date.today()
    weekday = day.isoweekday() % 7  # Sunday = 0 ... Saturday = 6
    offset = 6 if weekday == 0 else weekday - 1
    return (day - timedelta(days=offset)).isoformat()


def previous_weeks(count, day=None):
    """Monday keys for the last ``count`` weeks, oldest first, ending with the current week."""
    current = date.fromisoformat(monday_of_week(day))
    return [(current - timedelta(weeks=i)).isoformat() for i in range(count - 1, -1, -1)]
