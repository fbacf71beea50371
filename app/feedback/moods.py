"""Mood semantics and tally computation"""
from typing import Dict, Mapping
from app.db.models import Mood, Role, User


def role_for(user: User) -> Role:
    """Role snapshot for a feedback submitted by `user`."""
    return Role.TEACHER if user.is_teacher else Role.STUDENT


def mood_counts(aggregated: Mapping[str, int]) -> Dict[str, int]:
    """
    Fill a per-mood aggregate out to exactly the known moods.

    Args:
        aggregated: Counts keyed by mood, covering only moods that occurred

    Returns:
        Dictionary with one entry per mood in enumeration order, 0 when absent
    """
    counts = {mood.value: 0 for mood in Mood}
    for mood, count in aggregated.items():
        if mood in counts:
            counts[mood] = int(count)
    return counts
