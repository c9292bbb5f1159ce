"""
Homebase — Dashboard Service.

Reads the family's documents from the store and feeds them through the
aggregation functions to build the leaderboard and today's agenda.

Each agenda source (events, chores, meals) is fetched independently; a
source that fails is logged and contributes nothing, so one bad collection
never blanks the whole dashboard.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Iterable, Mapping, TYPE_CHECKING

from homebase.config import settings
from homebase.core.aggregation import (
    is_chore_due,
    meal_time_slot,
    merge_agenda,
    partition_by_kind,
    rank_leaderboard,
    week_id_for,
    weekday_name,
)
from homebase.data.models import (
    Chore,
    MalformedDocumentError,
    MealPlan,
    Member,
    RankedMember,
    ScheduleItem,
)
from homebase.ports.store_port import StoreError, doc_path

if TYPE_CHECKING:
    from homebase.ports.store_port import DocumentStore

logger = logging.getLogger(__name__)

_AGENDA_SOURCES = ("events", "chores", "meals")


@dataclass
class DashboardSnapshot:
    """Everything the dashboard views render for one day."""

    day: date
    leaderboard: list[RankedMember] = field(default_factory=list)
    agenda: list[ScheduleItem] = field(default_factory=list)

    @property
    def columns(self) -> dict[str, list[ScheduleItem]]:
        return partition_by_kind(self.agenda)


async def load_members(store: DocumentStore, family_id: str) -> list[Member]:
    docs = await store.list_documents(doc_path("families", family_id, "members"))
    return [Member.from_document(doc_id, payload) for doc_id, payload in docs]


async def load_leaderboard(store: DocumentStore, family_id: str) -> list[RankedMember]:
    return rank_leaderboard(await load_members(store, family_id))


async def load_due_chores(
    store: DocumentStore, family_id: str, day: date,
) -> list[dict[str, Any]]:
    """Chores of this family due on `day`, as raw agenda items."""
    docs = await store.list_documents("chores")
    items = []
    for doc_id, payload in docs:
        if payload.get("familyId") != family_id:
            continue
        chore = Chore.from_document(doc_id, payload)
        if is_chore_due(chore, day):
            items.append({
                "id": chore.id,
                "title": chore.name,
                "dueTime": chore.due_time,
                "type": "chore",
                "assignedTo": chore.assigned_to,
            })
    return items


async def find_meal_plan(
    store: DocumentStore, family_id: str, day: date,
) -> MealPlan | None:
    """Return the week plan covering `day`, looking back up to six days."""
    for offset in range(7):
        start = day - timedelta(days=offset)
        week_id = week_id_for(start)
        payload = await store.get_document(
            doc_path("mealPlans", family_id, "weeks", week_id)
        )
        if payload is None:
            continue
        plan = MealPlan.from_document(family_id, week_id, payload)
        if plan.start_date <= day < plan.end_date:
            return plan
    return None


async def load_meals(
    store: DocumentStore, family_id: str, day: date,
) -> list[dict[str, Any]]:
    """Meals planned for `day`, as raw agenda items at nominal slot times."""
    plan = await find_meal_plan(store, family_id, day)
    if plan is None:
        return []
    weekday = weekday_name(day)
    return [
        {
            "id": f"{weekday}-{slot}",
            "title": meal.title,
            "time": meal_time_slot(slot),
            "type": "meal",
        }
        for slot, meal in plan.meals_for(weekday).items()
    ]


async def _events(events: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    return [{**e, "type": "event"} for e in events]


async def load_daily_agenda(
    store: DocumentStore,
    family_id: str,
    day: date,
    events: Iterable[Mapping[str, Any]] = (),
) -> list[ScheduleItem]:
    """Build the time-ordered agenda for one day.

    Args:
        events: Calendar events for the day, supplied by the caller, each
            with an `HH:MM` `time` field.
    """
    results = await asyncio.gather(
        _events(events),
        load_due_chores(store, family_id, day),
        load_meals(store, family_id, day),
        return_exceptions=True,
    )

    items: list[dict[str, Any]] = []
    for source, result in zip(_AGENDA_SOURCES, results):
        if isinstance(result, (StoreError, MalformedDocumentError)):
            logger.error("Failed to fetch %s: %s", source, result)
            continue
        if isinstance(result, BaseException):
            raise result
        items.extend(result)

    return merge_agenda(items)


async def load_dashboard(
    store: DocumentStore,
    family_id: str | None = None,
    day: date | None = None,
    events: Iterable[Mapping[str, Any]] = (),
) -> DashboardSnapshot:
    """Load leaderboard and agenda; store failures yield empty sections."""
    family_id = family_id or settings.FAMILY_ID
    day = day or date.today()
    snapshot = DashboardSnapshot(day=day)

    try:
        snapshot.leaderboard = await load_leaderboard(store, family_id)
    except (StoreError, MalformedDocumentError) as exc:
        logger.error("Failed to load family members: %s", exc)

    snapshot.agenda = await load_daily_agenda(store, family_id, day, events)
    return snapshot
