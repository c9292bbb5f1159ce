"""
Homebase — Bootstrap Engine.

Populates a family's starter dataset (family, members, rewards, chores and
this week's meal plan) on first start. Safe to call on every start: the
marker document at `defaultFamily/current` gates the whole run.

Writes are independent and never rolled back. The marker is written first,
so a run that fails halfway leaves a partially seeded family that later
runs will not complete.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, TYPE_CHECKING

from homebase.config import settings
from homebase.core.aggregation import week_id_for, weekday_name
from homebase.core.seed_data import MalformedSeedData, SeedDefinition, validate_seed
from homebase.data.models import (
    Chore,
    Family,
    FamilyMarker,
    MalformedDocumentError,
    MealPlan,
    Member,
    Reward,
)
from homebase.ports.store_port import (
    DocumentExistsError,
    StoreError,
    WriteError,
    doc_path,
)

if TYPE_CHECKING:
    from homebase.ports.store_port import DocumentStore

logger = logging.getLogger(__name__)

MARKER_PATH = "defaultFamily/current"


class SeedOutcome(str, Enum):
    SEEDED = "seeded"
    ALREADY_SEEDED = "already_seeded"


class BootstrapError(Exception):
    """Raised when a seeding step fails. `cause` holds the store error."""

    def __init__(self, step: str, cause: Exception) -> None:
        super().__init__(f"Bootstrap failed at {step}: {cause}")
        self.step = step
        self.cause = cause


@dataclass
class _SeedPlan:
    """Validated payloads, ready to write in order."""

    family: dict[str, Any]
    members: list[tuple[str, dict[str, Any]]]
    rewards: list[dict[str, Any]]
    chores: list[dict[str, Any]]
    week_id: str
    meal_plan: dict[str, Any]


def _build_plan(seed: SeedDefinition, family_id: str, now: datetime) -> _SeedPlan:
    """Turn the seed definition into stored payloads, validating each entity."""
    validate_seed(seed)
    created_at = now.isoformat()
    today = now.date()

    try:
        family = Family(
            name=seed.family_name, created_at=created_at, members=list(seed.parent_ids),
        ).to_document()

        members = []
        for raw in seed.members:
            member = Member.from_document(raw["id"], {k: v for k, v in raw.items() if k != "id"})
            members.append((member.id, member.to_document()))

        rewards = [
            Reward.from_document("", {**raw, "familyId": family_id, "createdAt": created_at}).to_document()
            for raw in seed.rewards
        ]
        chores = [
            Chore.from_document("", {**raw, "familyId": family_id}).to_document()
            for raw in seed.chores
        ]

        week_id = week_id_for(today)
        meal_plan = MealPlan.from_document(
            family_id,
            week_id,
            {
                "startDate": today,
                "endDate": today + timedelta(days=7),
                weekday_name(today): seed.meals,
            },
        ).to_document()
    except MalformedDocumentError as exc:
        raise MalformedSeedData(str(exc)) from exc

    return _SeedPlan(family, members, rewards, chores, week_id, meal_plan)


async def ensure_seeded(
    store: DocumentStore,
    family_id: str | None = None,
    seed: SeedDefinition | None = None,
    now: datetime | None = None,
) -> SeedOutcome:
    """Seed the starter dataset unless the marker says it already ran.

    Args:
        store: Document store to write to.
        family_id: Defaults to settings.FAMILY_ID.
        seed: Defaults to the built-in starter dataset.
        now: Seeding time; the meal-plan week starts on its date.

    Returns:
        SeedOutcome.SEEDED after a full run, SeedOutcome.ALREADY_SEEDED if the
        marker exists (no writes are made).

    Raises:
        MalformedSeedData: the seed definition is invalid; nothing was written.
        BootstrapError: a store operation failed; earlier writes are kept.
    """
    family_id = family_id or settings.FAMILY_ID
    seed = seed or SeedDefinition(family_name=settings.FAMILY_NAME)
    now = now or datetime.now()

    try:
        existing = await store.get_document(MARKER_PATH)
    except StoreError as exc:
        raise BootstrapError("marker check", exc) from exc

    if existing is not None:
        logger.info("Sample data already initialized (family %s)", existing.get("familyId"))
        return SeedOutcome.ALREADY_SEEDED

    plan = _build_plan(seed, family_id, now)
    logger.info("Initializing sample data for family %s...", family_id)

    step = "marker"
    try:
        try:
            await store.create_document(
                MARKER_PATH, FamilyMarker(family_id=family_id).to_document(),
            )
        except DocumentExistsError:
            logger.info("Another starter created the marker first; skipping seed")
            return SeedOutcome.ALREADY_SEEDED

        step = "family"
        await store.set_document(doc_path("families", family_id), plan.family)

        for member_id, payload in plan.members:
            step = f"member {member_id}"
            await store.set_document(
                doc_path("families", family_id, "members", member_id), payload,
            )

        for i, payload in enumerate(plan.rewards, start=1):
            step = f"reward #{i}"
            await store.add_document("rewards", payload)

        for i, payload in enumerate(plan.chores, start=1):
            step = f"chore #{i}"
            await store.add_document("chores", payload)

        step = "meal plan"
        await store.set_document(
            doc_path("mealPlans", family_id, "weeks", plan.week_id), plan.meal_plan,
        )
    except WriteError as exc:
        logger.error("Seeding stopped at %s: %s", step, exc)
        raise BootstrapError(step, exc) from exc

    logger.info(
        "Sample data initialized: %d members, %d rewards, %d chores, week %s",
        len(plan.members), len(plan.rewards), len(plan.chores), plan.week_id,
    )
    return SeedOutcome.SEEDED


async def safe_bootstrap(store: DocumentStore) -> SeedOutcome | None:
    """Run ensure_seeded for application startup without ever raising.

    Failures are logged and None is returned so the dashboard can render
    with whatever (possibly empty) data the store holds.
    """
    try:
        return await ensure_seeded(store)
    except (BootstrapError, MalformedSeedData) as exc:
        logger.error("Error initializing sample data: %s", exc)
        return None
