"""Next-available heuristics.

Provider availability is free text such as "Today, 2:30 PM" or
"Friday, 1:00 PM". Matching is a case-insensitive substring check on
that text, not date parsing.
"""

THIS_WEEK_TOKENS = ("today", "tomorrow", "monday", "tuesday", "wednesday", "thursday", "friday")
WEEKEND_TOKENS = ("saturday", "sunday")


def _mentions(next_available: str | None, tokens: tuple[str, ...]) -> bool:
    if not next_available:
        return False
    text = next_available.lower()
    return any(token in text for token in tokens)


def is_available_today(next_available: str | None) -> bool:
    return _mentions(next_available, ("today",))


def is_available_this_week(next_available: str | None) -> bool:
    return _mentions(next_available, THIS_WEEK_TOKENS)


def is_available_weekends(next_available: str | None) -> bool:
    return _mentions(next_available, WEEKEND_TOKENS)


def availability_rank(next_available: str | None) -> int:
    """Sort rank: 0 for today, 1 for tomorrow, 2 otherwise."""
    if _mentions(next_available, ("today",)):
        return 0
    if _mentions(next_available, ("tomorrow",)):
        return 1
    return 2
