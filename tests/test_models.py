"""Tests for homebase.data.models — entity validation at the store boundary."""

from datetime import date

import pytest

from homebase.data.models import (
    Chore,
    Family,
    FamilyMarker,
    Frequency,
    MalformedDocumentError,
    MealPlan,
    Member,
    MemberType,
    Reward,
)


def _member_payload(**overrides):
    payload = {
        "name": "Emma",
        "displayName": "Emma",
        "type": "child",
        "gender": "female",
        "completedChores": 15,
        "totalChores": 20,
        "points": 85,
        "streak": 5,
    }
    payload.update(overrides)
    return payload


class TestMember:
    def test_from_document_sets_id_from_key(self):
        member = Member.from_document("child1", _member_payload())
        assert member.id == "child1"
        assert member.type is MemberType.CHILD
        assert member.completed_chores == 15

    def test_to_document_excludes_id(self):
        member = Member.from_document("child1", _member_payload())
        doc = member.to_document()
        assert "id" not in doc
        assert doc["completedChores"] == 15
        assert doc["type"] == "child"

    def test_missing_stats_default_to_zero(self):
        member = Member.from_document("c", {"name": "Kid", "type": "child"})
        assert member.points == 0
        assert member.streak == 0

    def test_completed_exceeding_total_rejected(self):
        with pytest.raises(MalformedDocumentError, match="child1"):
            Member.from_document("child1", _member_payload(completedChores=21))

    def test_negative_points_rejected(self):
        with pytest.raises(MalformedDocumentError):
            Member.from_document("child1", _member_payload(points=-1))

    def test_unknown_type_rejected(self):
        with pytest.raises(MalformedDocumentError):
            Member.from_document("x", _member_payload(type="grandparent"))


class TestChore:
    def test_weekly_chore_with_day(self):
        chore = Chore.from_document("c1", {
            "name": "Clean room", "assignedTo": "Alex", "familyId": "f",
            "frequency": "weekly", "dayOfWeek": "saturday", "dueTime": "12:00",
        })
        assert chore.frequency is Frequency.WEEKLY
        assert chore.day_of_week == "saturday"

    def test_weekly_chore_without_day_rejected(self):
        with pytest.raises(MalformedDocumentError):
            Chore.from_document("c1", {
                "name": "Clean room", "assignedTo": "Alex", "familyId": "f",
                "frequency": "weekly",
            })

    def test_daily_chore_with_day_rejected(self):
        with pytest.raises(MalformedDocumentError):
            Chore.from_document("c1", {
                "name": "Trash", "assignedTo": "Alex", "familyId": "f",
                "frequency": "daily", "dayOfWeek": "monday",
            })

    def test_bad_due_time_rejected(self):
        with pytest.raises(MalformedDocumentError):
            Chore.from_document("c1", {
                "name": "Trash", "assignedTo": "Alex", "familyId": "f",
                "frequency": "daily", "dueTime": "7pm",
            })

    def test_to_document_omits_unset_optional_fields(self):
        chore = Chore.from_document("c1", {
            "name": "Trash", "assignedTo": "Alex", "familyId": "f",
            "frequency": "daily", "dueTime": "19:00",
        })
        doc = chore.to_document()
        assert "dayOfWeek" not in doc
        assert "dueDate" not in doc
        assert doc["completed"] is False


class TestReward:
    def test_zero_cost_rejected(self):
        with pytest.raises(MalformedDocumentError):
            Reward.from_document("r1", {
                "name": "Free", "pointCost": 0, "familyId": "f", "createdAt": "x",
            })

    def test_valid_reward(self):
        reward = Reward.from_document("r1", {
            "name": "Movie Night", "pointCost": 100, "familyId": "f",
            "createdAt": "2024-03-01T09:00:00",
        })
        assert reward.point_cost == 100


class TestMealPlan:
    def test_round_trip_flat_layout(self):
        payload = {
            "startDate": "2024-03-01",
            "endDate": "2024-03-08",
            "friday": {"dinner": {"title": "Spaghetti", "prepTime": "20 min"}},
        }
        plan = MealPlan.from_document("fam", "2024-3-1", payload)
        assert plan.start_date == date(2024, 3, 1)
        assert plan.meals_for("friday")["dinner"].prep_time == "20 min"
        assert plan.meals_for("monday") == {}
        doc = plan.to_document()
        assert doc["endDate"] == "2024-03-08"
        assert doc["friday"]["dinner"]["title"] == "Spaghetti"

    def test_end_date_must_be_seven_days_later(self):
        with pytest.raises(MalformedDocumentError):
            MealPlan.from_document("fam", "w", {
                "startDate": "2024-03-01", "endDate": "2024-03-07",
            })

    def test_unknown_slot_rejected(self):
        with pytest.raises(MalformedDocumentError):
            MealPlan.from_document("fam", "w", {
                "startDate": "2024-03-01", "endDate": "2024-03-08",
                "friday": {"brunch": {"title": "Eggs"}},
            })

    def test_slot_requires_title(self):
        with pytest.raises(MalformedDocumentError):
            MealPlan.from_document("fam", "w", {
                "startDate": "2024-03-01", "endDate": "2024-03-08",
                "friday": {"lunch": {"title": ""}},
            })


def test_family_and_marker_documents():
    family = Family(name="Sample Family", created_at="2024-03-01T09:00:00",
                    members=["parent1", "parent2"])
    assert family.to_document() == {
        "name": "Sample Family",
        "createdAt": "2024-03-01T09:00:00",
        "members": ["parent1", "parent2"],
    }
    assert FamilyMarker(family_id="defaultFamily123").to_document() == {
        "familyId": "defaultFamily123",
    }
