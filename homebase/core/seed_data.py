"""
Homebase — Starter dataset.

Literal seed definitions written by the bootstrap engine on first start,
and the validator that rejects a broken definition before any write.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from homebase.data.models import MEAL_SLOTS, WEEKDAYS


class MalformedSeedData(Exception):
    """Raised when a seed definition breaks an entity invariant."""


FAMILY_PARENT_IDS = ["parent1", "parent2"]

SEED_MEMBERS: list[dict[str, Any]] = [
    {
        "id": "parent1",
        "name": "Mom",
        "displayName": "Mom",
        "type": "parent",
        "gender": "female",
        "completedChores": 22,
        "totalChores": 25,
        "points": 110,
        "streak": 7,
    },
    {
        "id": "parent2",
        "name": "Dad",
        "displayName": "Dad",
        "type": "parent",
        "gender": "male",
        "completedChores": 18,
        "totalChores": 22,
        "points": 90,
        "streak": 4,
    },
    {
        "id": "child1",
        "name": "Emma",
        "displayName": "Emma",
        "type": "child",
        "gender": "female",
        "completedChores": 15,
        "totalChores": 20,
        "points": 85,
        "streak": 5,
    },
    {
        "id": "child2",
        "name": "Alex",
        "displayName": "Alex",
        "type": "child",
        "gender": "male",
        "completedChores": 12,
        "totalChores": 18,
        "points": 72,
        "streak": 3,
    },
]

# familyId and createdAt are injected at write time
SEED_REWARDS: list[dict[str, Any]] = [
    {"name": "Ice Cream Trip", "pointCost": 50},
    {"name": "Movie Night", "pointCost": 100},
    {"name": "Video Game Time", "pointCost": 60},
    {"name": "Sleepover", "pointCost": 120},
]

# familyId is injected at write time
SEED_CHORES: list[dict[str, Any]] = [
    {
        "name": "Take out trash",
        "assignedTo": "Alex",
        "frequency": "daily",
        "completed": False,
        "dueTime": "19:00",
    },
    {
        "name": "Help with dishes",
        "assignedTo": "Emma",
        "frequency": "daily",
        "completed": True,
        "dueTime": "19:30",
    },
    {
        "name": "Clean room",
        "assignedTo": "Alex",
        "frequency": "weekly",
        "dayOfWeek": "saturday",
        "completed": False,
        "dueTime": "12:00",
    },
]

SEED_MEALS: dict[str, dict[str, str]] = {
    "breakfast": {
        "title": "Oatmeal with Berries",
        "prepTime": "10 min",
        "cookTime": "5 min",
        "description": "Hearty oatmeal with fresh berries and a drizzle of honey.",
        "notes": "Emma prefers extra berries",
    },
    "lunch": {
        "title": "Turkey Sandwiches",
        "prepTime": "15 min",
        "cookTime": "0 min",
        "description": "Turkey and cheese sandwiches with lettuce and tomato.",
        "notes": "Alex needs gluten-free bread",
    },
    "dinner": {
        "title": "Spaghetti Bolognese",
        "prepTime": "20 min",
        "cookTime": "30 min",
        "description": "Classic spaghetti with homemade meat sauce.",
        "notes": "Make extra for leftovers",
    },
    "snack": {
        "title": "Fruit & Yogurt",
        "prepTime": "5 min",
        "cookTime": "0 min",
        "description": "Fresh fruit with Greek yogurt for after-school snack.",
        "notes": "",
    },
}


@dataclass
class SeedDefinition:
    """Everything the bootstrap engine writes, minus runtime-injected fields."""

    family_name: str = "Sample Family"
    parent_ids: list[str] = field(default_factory=lambda: list(FAMILY_PARENT_IDS))
    members: list[dict[str, Any]] = field(default_factory=lambda: [dict(m) for m in SEED_MEMBERS])
    rewards: list[dict[str, Any]] = field(default_factory=lambda: [dict(r) for r in SEED_REWARDS])
    chores: list[dict[str, Any]] = field(default_factory=lambda: [dict(c) for c in SEED_CHORES])
    meals: dict[str, dict[str, str]] = field(
        default_factory=lambda: {k: dict(v) for k, v in SEED_MEALS.items()}
    )


def validate_seed(seed: SeedDefinition) -> None:
    """Reject a seed definition that would write invalid entities.

    Raises:
        MalformedSeedData: describing the first problem found.
    """
    ids = [m.get("id") for m in seed.members]
    if not all(ids) or len(set(ids)) != len(ids):
        raise MalformedSeedData(f"Member ids must be present and unique: {ids}")

    for member in seed.members:
        if member.get("type") not in ("parent", "child"):
            raise MalformedSeedData(f"Member {member['id']} has invalid type {member.get('type')!r}")
        counts = [member.get(k, 0) for k in ("completedChores", "totalChores", "points", "streak")]
        if any(not isinstance(c, int) or c < 0 for c in counts):
            raise MalformedSeedData(f"Member {member['id']} has negative or non-integer stats")
        if member.get("completedChores", 0) > member.get("totalChores", 0):
            raise MalformedSeedData(f"Member {member['id']} completed more chores than assigned")

    missing_parents = set(seed.parent_ids) - set(ids)
    if missing_parents:
        raise MalformedSeedData(f"Family references unknown members: {sorted(missing_parents)}")

    for reward in seed.rewards:
        cost = reward.get("pointCost")
        if not isinstance(cost, int) or cost <= 0:
            raise MalformedSeedData(f"Reward {reward.get('name')!r} needs a positive pointCost")

    assignees = set(ids) | {m.get("name") for m in seed.members}
    for chore in seed.chores:
        if chore.get("assignedTo") not in assignees:
            raise MalformedSeedData(
                f"Chore {chore.get('name')!r} assigned to unknown member {chore.get('assignedTo')!r}"
            )
        weekly = chore.get("frequency") == "weekly"
        day = chore.get("dayOfWeek")
        if weekly and day not in WEEKDAYS:
            raise MalformedSeedData(f"Weekly chore {chore.get('name')!r} needs a dayOfWeek")
        if not weekly and day is not None:
            raise MalformedSeedData(f"Chore {chore.get('name')!r} is not weekly but has a dayOfWeek")

    for slot, meal in seed.meals.items():
        if slot not in MEAL_SLOTS:
            raise MalformedSeedData(f"Unknown meal slot {slot!r}")
        if not meal.get("title"):
            raise MalformedSeedData(f"Meal slot {slot!r} has no title")
