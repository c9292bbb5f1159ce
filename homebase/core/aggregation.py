"""
Homebase — Aggregation Functions.

Pure projections over already-fetched data: the child leaderboard and the
time-ordered daily agenda. Nothing here touches the store or raises on bad
input; missing points count as 0 and missing times sort last.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, time
from typing import Any, Iterable, Mapping

from homebase.data.models import (
    ITEM_KINDS,
    WEEKDAYS,
    Chore,
    Frequency,
    Member,
    MemberType,
    RankedMember,
    ScheduleItem,
)

DEFAULT_TIME_KEY = "23:59"

_MEAL_TIMES = {
    "breakfast": "08:00",
    "lunch": "12:00",
    "snack": "15:00",
    "dinner": "18:00",
}


# ---------------------------------------------------------------------------
# Calendar helpers
# ---------------------------------------------------------------------------


def week_id_for(day: date) -> str:
    """Meal-plan week id: year-month-day without zero padding, e.g. "2024-3-1"."""
    return f"{day.year}-{day.month}-{day.day}"


def weekday_name(day: date) -> str:
    return WEEKDAYS[day.weekday()]


def meal_time_slot(slot: str) -> str:
    """Nominal HH:MM for a meal slot; unknown slots land at lunchtime."""
    return _MEAL_TIMES.get(slot.lower(), "12:00")


def is_chore_due(chore: Chore, day: date) -> bool:
    """Whether a chore belongs on the agenda for `day`."""
    if chore.frequency is Frequency.DAILY:
        return True
    if chore.frequency is Frequency.WEEKLY:
        return (chore.day_of_week or "").lower() == weekday_name(day)
    # once / monthly chores are pinned to an explicit date
    return bool(chore.due_date) and chore.due_date[:10] == day.isoformat()


# ---------------------------------------------------------------------------
# Leaderboard
# ---------------------------------------------------------------------------


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _first(obj: Any, *names: str) -> Any:
    for name in names:
        value = _field(obj, name)
        if value not in (None, ""):
            return value
    return None


def _points(member: Member | Mapping[str, Any]) -> int:
    points = _field(member, "points")
    return points if isinstance(points, (int, float)) else 0


def rank_leaderboard(
    members: Iterable[Member | Mapping[str, Any]],
) -> list[RankedMember]:
    """Rank child members by points, highest first.

    Parents are dropped. The sort is stable, so equal-point children keep
    their input order, and ranks are positional (1, 2, 3, ...) even on ties.
    """
    children = [m for m in members if _field(m, "type") == MemberType.CHILD.value]
    ordered = sorted(children, key=lambda m: -_points(m))
    return [RankedMember(member=m, rank=i) for i, m in enumerate(ordered, start=1)]


# ---------------------------------------------------------------------------
# Daily agenda
# ---------------------------------------------------------------------------


def _time_key(value: Any) -> str:
    """HH:MM sort key; anything that is not a usable time sorts last."""
    if isinstance(value, str) and value:
        return value
    if isinstance(value, time):
        return value.strftime("%H:%M")
    return DEFAULT_TIME_KEY


def _to_schedule_item(item: Any) -> ScheduleItem:
    if isinstance(item, ScheduleItem):
        if isinstance(item.time_key, str) and item.time_key:
            return item
        return replace(item, time_key=_time_key(item.time_key))
    kind = _first(item, "kind", "type") or ("chore" if isinstance(item, Chore) else "event")
    title = _first(item, "title", "name")
    assigned_to = _first(item, "assignedTo", "assigned_to")
    doc_id = _first(item, "id")
    return ScheduleItem(
        id=str(doc_id) if doc_id is not None else "",
        title=title if isinstance(title, str) else "",
        time_key=_time_key(_first(item, "time", "dueTime", "due_time")),
        kind=kind if kind in ITEM_KINDS else "event",
        assigned_to=assigned_to if isinstance(assigned_to, str) else None,
    )


def merge_agenda(
    items: Iterable[ScheduleItem | Chore | Mapping[str, Any]],
) -> list[ScheduleItem]:
    """Merge events, meals and chores into one list ordered by HH:MM.

    The key is `time` (events, meals) or `dueTime` (chores), "23:59" if
    neither is present or the value is not a time. Keys compare as strings,
    which orders zero-padded 24-hour times correctly. Equal keys keep their
    input order.
    """
    return sorted((_to_schedule_item(i) for i in items), key=lambda s: s.time_key)


def partition_by_kind(items: Iterable[ScheduleItem]) -> dict[str, list[ScheduleItem]]:
    """Split an ordered agenda into per-kind columns, preserving order."""
    columns: dict[str, list[ScheduleItem]] = {kind: [] for kind in ITEM_KINDS}
    for item in items:
        columns.setdefault(item.kind, []).append(item)
    return columns
