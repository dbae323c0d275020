# =============================================================================
# tests/test_models.py - Row Model Tests
# =============================================================================
# Unit tests for the household row models to ensure:
# - PostgREST rows validate into records
# - Records are immutable
# - Insert payloads leave server-generated columns to the database
# - Update payloads carry the full record except the id and unset
#   creator/server columns
# =============================================================================

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from core.models import (
    Group,
    GroupMember,
    GroupRole,
    MealPlanEntry,
    Recipe,
    RecipeIngredient,
    ShoppingListItem,
    TodoItem,
    record_id,
)


# =============================================================================
# Table Mapping
# =============================================================================

class TestTableNames:
    """Each record maps to its remote table."""

    @pytest.mark.parametrize(
        "model, table",
        [
            (Group, "groups"),
            (GroupMember, "group_members"),
            (Recipe, "recipes"),
            (RecipeIngredient, "recipe_ingredients"),
            (MealPlanEntry, "meal_plans"),
            (ShoppingListItem, "shopping_list"),
            (TodoItem, "todos"),
        ],
    )
    def test_table_name(self, model, table):
        assert model.table_name == table


# =============================================================================
# Parsing
# =============================================================================

class TestFromRow:
    """Tests for building records from server rows."""

    def test_recipe_from_row(self, sample_recipe_row):
        recipe = Recipe.from_row(sample_recipe_row)

        assert recipe.id == sample_recipe_row["id"]
        assert recipe.title == "Weeknight Chili"
        assert recipe.servings == 4
        assert isinstance(recipe.created_at, datetime)

    def test_unknown_columns_are_ignored(self):
        item = ShoppingListItem.from_row(
            {"id": "s1", "name": "Milk", "created_by": "u1", "aisle": "dairy"}
        )

        assert item.name == "Milk"
        assert not hasattr(item, "aisle")

    def test_meal_date_is_calendar_date(self):
        entry = MealPlanEntry.from_row(
            {"id": "m1", "meal_date": "2024-01-15", "meal_type": "dinner", "created_by": "u1"}
        )

        assert entry.meal_date == date(2024, 1, 15)

    def test_member_role_parsed_to_enum(self):
        member = GroupMember.from_row({"id": "gm1", "group_id": "g1", "user_id": "u1", "role": "owner"})

        assert member.role is GroupRole.OWNER

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            GroupMember(group_id="g1", user_id="u1", role="admin")

    def test_todo_defaults(self):
        todo = TodoItem(title="Pay rent")

        assert todo.priority == 0
        assert todo.is_completed is False
        assert todo.due_date is None
        assert todo.id == ""


# =============================================================================
# Immutability
# =============================================================================

class TestImmutability:

    def test_records_are_frozen(self):
        item = ShoppingListItem(name="Milk")

        with pytest.raises(ValidationError):
            item.is_checked = True

    def test_model_copy_leaves_original_untouched(self):
        item = ShoppingListItem(id="s1", name="Milk")
        checked = item.model_copy(update={"is_checked": True})

        assert item.is_checked is False
        assert checked.is_checked is True
        assert checked.id == "s1"


# =============================================================================
# Serialization
# =============================================================================

class TestInsertRow:

    def test_new_group_omits_generated_columns(self):
        row = Group(name="Nine West", created_by="u1").to_insert_row()

        assert row == {"name": "Nine West", "created_by": "u1"}

    def test_client_assigned_id_is_kept(self):
        row = RecipeIngredient(id="ing-1", recipe_id="r1", name="Salt").to_insert_row()

        assert row["id"] == "ing-1"

    def test_optional_fields_sent_as_null(self):
        row = ShoppingListItem(name="Milk", created_by="u1").to_insert_row()

        assert row["quantity"] is None
        assert row["group_id"] is None
        assert row["is_checked"] is False

    def test_dates_serialized_as_iso_strings(self):
        row = MealPlanEntry(meal_date=date(2024, 1, 15), meal_type="dinner").to_insert_row()

        assert row["meal_date"] == "2024-01-15"

    def test_member_role_serialized_as_value(self):
        row = GroupMember(group_id="g1", user_id="u1", role=GroupRole.OWNER).to_insert_row()

        assert row == {"group_id": "g1", "user_id": "u1", "role": "owner"}


class TestUpdateRow:

    def test_update_row_is_full_record_without_id(self, sample_recipe_row):
        row = Recipe.from_row(sample_recipe_row).to_update_row()

        assert "id" not in row
        assert row["title"] == "Weeknight Chili"
        assert row["created_at"].startswith("2024-01-15T10:30:00")
        assert set(row) == set(Recipe.model_fields) - {"id"}

    def test_update_row_keeps_stored_creator_when_unset(self):
        row = Recipe(id="r1", title="Better Chili").to_update_row()

        assert "created_by" not in row
        assert "created_at" not in row
        assert "updated_at" not in row
        assert row["title"] == "Better Chili"

    def test_update_row_sends_creator_when_set(self):
        row = TodoItem(id="t1", title="Pay rent", created_by="u1").to_update_row()

        assert row["created_by"] == "u1"

    def test_recipe_accepts_any_server_integers(self):
        recipe = Recipe.from_row({"id": "r1", "title": "Odd", "servings": -1})

        assert recipe.servings == -1


class TestRecordId:

    def test_record_id_of_record(self):
        assert record_id(TodoItem(id="t1", title="x")) == "t1"

    def test_record_id_of_string(self):
        assert record_id("t2") == "t2"
