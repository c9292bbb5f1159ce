"""
Homebase — Data Models.

Persisted entities are pydantic models validated at the document-store
boundary: `from_document` turns a raw stored payload into a typed record
(raising MalformedDocumentError on bad data) and `to_document` produces the
camelCase payload that gets written. Derived views (ScheduleItem,
RankedMember) are plain dataclasses that are never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

WEEKDAYS = (
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
)
MEAL_SLOTS = ("breakfast", "lunch", "dinner", "snack")
ITEM_KINDS = ("event", "meal", "chore")

MealSlotName = Literal["breakfast", "lunch", "dinner", "snack"]

_HHMM_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class MalformedDocumentError(Exception):
    """Raised when a stored document does not match its entity schema."""

    def __init__(self, entity: str, doc_id: str, detail: str) -> None:
        super().__init__(f"Malformed {entity} document {doc_id!r}: {detail}")
        self.entity = entity
        self.doc_id = doc_id


class MemberType(str, Enum):
    PARENT = "parent"
    CHILD = "child"


class Frequency(str, Enum):
    ONCE = "once"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class _Document(BaseModel):
    """Shared (de)serialization for documents keyed by their storage path."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""

    @classmethod
    def from_document(cls, doc_id: str, payload: dict[str, Any]):
        try:
            return cls.model_validate({**payload, "id": doc_id})
        except ValidationError as exc:
            raise MalformedDocumentError(cls.__name__, doc_id, str(exc)) from exc

    def to_document(self) -> dict[str, Any]:
        """Payload as stored; the id is implied by the storage key."""
        return self.model_dump(
            mode="json", by_alias=True, exclude={"id"}, exclude_none=True,
        )


class FamilyMarker(_Document):
    """The idempotency gate: its presence means seeding already ran."""

    family_id: str = Field(alias="familyId", min_length=1)


class Family(_Document):
    name: str
    created_at: str = Field(alias="createdAt")
    members: list[str] = Field(default_factory=list)


class Member(_Document):
    name: str
    display_name: str = Field("", alias="displayName")
    type: MemberType
    gender: str = ""
    completed_chores: int = Field(0, ge=0, alias="completedChores")
    total_chores: int = Field(0, ge=0, alias="totalChores")
    points: int = Field(0, ge=0)
    streak: int = Field(0, ge=0)

    @model_validator(mode="after")
    def _completed_within_total(self) -> Member:
        if self.completed_chores > self.total_chores:
            raise ValueError(
                f"completedChores ({self.completed_chores}) exceeds "
                f"totalChores ({self.total_chores})"
            )
        return self


class Chore(_Document):
    name: str
    assigned_to: str = Field(alias="assignedTo")  # member name or id
    family_id: str = Field(alias="familyId")
    frequency: Frequency
    day_of_week: str | None = Field(None, alias="dayOfWeek")
    due_date: str | None = Field(None, alias="dueDate")  # ISO date, once/monthly
    completed: bool = False
    due_time: str = Field("23:59", alias="dueTime", pattern=_HHMM_PATTERN)

    @model_validator(mode="after")
    def _day_of_week_iff_weekly(self) -> Chore:
        if self.frequency is Frequency.WEEKLY:
            if not self.day_of_week or self.day_of_week.lower() not in WEEKDAYS:
                raise ValueError("weekly chores need a valid dayOfWeek")
        elif self.day_of_week is not None:
            raise ValueError("dayOfWeek is only allowed on weekly chores")
        return self


class Reward(_Document):
    name: str
    point_cost: int = Field(alias="pointCost", gt=0)
    family_id: str = Field(alias="familyId")
    created_at: str = Field(alias="createdAt")


class MealSlot(BaseModel):
    title: str = Field(min_length=1)
    prep_time: str = Field("", alias="prepTime")
    cook_time: str = Field("", alias="cookTime")
    description: str = ""
    notes: str = ""

    model_config = ConfigDict(populate_by_name=True)


MealSlotSet = dict[MealSlotName, MealSlot]


class MealPlan(BaseModel):
    """One week of meals for a family.

    Stored flat as ``{startDate, endDate, <weekday>: {<slot>: MealSlot}}``;
    familyId and weekId come from the storage path, not the payload.
    """

    model_config = ConfigDict(populate_by_name=True)

    family_id: str
    week_id: str
    start_date: date
    end_date: date
    days: dict[str, MealSlotSet] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _one_week_span(self) -> MealPlan:
        if self.end_date - self.start_date != timedelta(days=7):
            raise ValueError("endDate must be exactly 7 days after startDate")
        unknown = set(self.days) - set(WEEKDAYS)
        if unknown:
            raise ValueError(f"unknown weekday keys: {sorted(unknown)}")
        return self

    @classmethod
    def from_document(
        cls, family_id: str, week_id: str, payload: dict[str, Any],
    ) -> MealPlan:
        days = {k: v for k, v in payload.items() if k not in ("startDate", "endDate")}
        try:
            return cls(
                family_id=family_id,
                week_id=week_id,
                start_date=payload.get("startDate"),
                end_date=payload.get("endDate"),
                days=days,
            )
        except ValidationError as exc:
            raise MalformedDocumentError("MealPlan", week_id, str(exc)) from exc

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
        }
        for day, slots in self.days.items():
            doc[day] = {
                name: slot.model_dump(mode="json", by_alias=True)
                for name, slot in slots.items()
            }
        return doc

    def meals_for(self, weekday: str) -> MealSlotSet:
        return self.days.get(weekday, {})


# ---------------------------------------------------------------------------
# Derived views (never persisted)
# ---------------------------------------------------------------------------


@dataclass
class ScheduleItem:
    """One entry of the daily agenda."""

    id: str
    title: str
    time_key: str     # HH:MM, from `time` or `dueTime`, "23:59" if neither
    kind: str         # "event" | "meal" | "chore"
    assigned_to: str | None = None


@dataclass
class RankedMember:
    """A child member with their 1-based leaderboard position."""

    member: Member
    rank: int
