from datetime import time
from django.utils import timezone

from .models import WEEKDAYS


def _parse(value):
    hours, minutes = value.split(":")
    return time(int(hours), int(minutes))


def is_auto_closed(opening_hours, now=None):
    """
    True when the restaurant is outside today's opening window.

    A missing or empty entry for today means closed. A window whose open
    time is after its close time runs past midnight (e.g. 22:00-02:00).
    """
    now = timezone.localtime(now or timezone.now())
    today = (opening_hours or {}).get(WEEKDAYS[now.weekday()]) or {}

    open_at, close_at = today.get("open"), today.get("close")
    if not open_at or not close_at:
        return True

    open_at, close_at = _parse(open_at), _parse(close_at)
    current = now.time().replace(second=0, microsecond=0)

    if open_at > close_at:
        return not (current >= open_at or current < close_at)
    return not (open_at <= current < close_at)


def is_restaurant_closed(restaurant, now=None):
    return is_auto_closed(restaurant.opening_hours, now) or restaurant.is_closed
