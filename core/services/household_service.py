# =============================================================================
# core/services/household_service.py - Household Data Access
# =============================================================================
# The one class that talks to Supabase on behalf of the app. Every method
# is a thin pass-through: build a row or a filter, issue one PostgREST (or
# auth) call, unwrap the first/all rows into records.
#
# - Nothing is cached; every read goes to the server.
# - Row Level Security decides what the caller may see. No access checks
#   are repeated here.
# - Remote failures are logged and re-raised unchanged. No retries.
# =============================================================================

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, Any, TypeVar

from supabase import AuthApiError

from core.models import (
    Group,
    GroupMember,
    GroupRole,
    MealPlanEntry,
    Recipe,
    RecipeIngredient,
    Record,
    ShoppingListItem,
    TodoItem,
    record_id,
)
from lib.supabase_client import SupabaseClient
from lib.utils import clean_optional_text, normalize_id, to_date_string

if TYPE_CHECKING:
    from uuid import UUID

    from supabase_auth.types import Session, User

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


class HouseholdService:
    """
    Typed CRUD access to the household tables.

    Built around an initialized SupabaseClient, which also holds the
    signed-in session used to stamp `created_by` on new rows.

    Example:
        service = HouseholdService(supabase)
        service.sign_in("me@example.com", "secret")
        item = service.add_item("  Milk  ", "  2 gal  ")
        item.name, item.quantity   # ("Milk", "2 gal")
    """

    def __init__(self, supabase: SupabaseClient):
        self._supabase = supabase

    # -------------------------------------------------------------------------
    # Row helpers
    # -------------------------------------------------------------------------

    def _execute(self, action: str, model: type[Record], query: Any) -> list[dict[str, Any]]:
        try:
            response = query.execute()
        except Exception as e:
            logger.error(f"Failed to {action} {model.table_name}: {e}")
            raise
        return response.data or []

    def _rows(self, model: type[R], query: Any) -> list[R]:
        rows = self._execute("select", model, query)
        logger.debug(f"Fetched {len(rows)} rows from {model.table_name}")
        return [model.from_row(row) for row in rows]

    def _first(self, model: type[R], query: Any) -> R | None:
        records = self._rows(model, query)
        return records[0] if records else None

    def _insert(self, record: R) -> R | None:
        model = type(record)
        query = self._supabase.table(model.table_name).insert(record.to_insert_row())
        rows = self._execute("insert into", model, query)
        if not rows:
            return None
        created = model.from_row(rows[0])
        logger.info(f"Inserted {model.table_name} row {created.id}")
        return created

    def _update(self, record: R) -> R:
        model = type(record)
        query = (
            self._supabase.table(model.table_name)
            .update(record.to_update_row())
            .eq("id", record.id)
        )
        self._execute("update", model, query)
        logger.info(f"Updated {model.table_name} row {record.id}")
        return record

    def _delete(self, model: type[Record], item: Record | str | UUID) -> None:
        item_id = record_id(item)
        query = self._supabase.table(model.table_name).delete().eq("id", item_id)
        self._execute("delete from", model, query)
        logger.info(f"Deleted {model.table_name} row {item_id}")

    def _select(self, model: type[Record]) -> Any:
        return self._supabase.table(model.table_name).select("*")

    def _current_user_id(self) -> str:
        user = self.current_user
        return user.id if user is not None and user.id else ""

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    def sign_in(self, email: str, password: str) -> Session | None:
        """
        Sign in with e-mail and password.

        Returns:
            The new session, or None when the server rejects the credentials
        """
        try:
            response = self._supabase.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthApiError as e:
            logger.warning(f"Sign-in rejected for {email}: {e}")
            return None
        logger.info(f"Signed in {email}")
        return response.session

    def sign_up(self, email: str, password: str) -> Session | None:
        """
        Register a new account.

        Returns:
            The new session, or None when the server rejects the sign-up or
            holds the account until the e-mail address is confirmed
        """
        try:
            response = self._supabase.auth.sign_up({"email": email, "password": password})
        except AuthApiError as e:
            logger.warning(f"Sign-up rejected for {email}: {e}")
            return None
        logger.info(f"Signed up {email}")
        return response.session

    def sign_out(self) -> None:
        self._supabase.auth.sign_out()
        logger.info("Signed out")

    @property
    def current_session(self) -> Session | None:
        """Last session known to the auth client (no server round trip)."""
        return self._supabase.auth.get_session()

    @property
    def current_user(self) -> User | None:
        session = self.current_session
        return session.user if session is not None else None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    # -------------------------------------------------------------------------
    # Groups
    # -------------------------------------------------------------------------

    def get_my_groups(self) -> list[Group]:
        """Groups visible to the caller, as filtered by RLS."""
        return self._rows(Group, self._select(Group))

    def create_group(self, name: str) -> Group | None:
        """
        Create a group and add the creator as its owner.

        The two inserts are not atomic. If the membership insert fails the
        group is left without an owner row and the error propagates.
        """
        user_id = self._current_user_id()
        created = self._insert(Group(name=name.strip(), created_by=user_id))

        if created is not None:
            owner = GroupMember(group_id=created.id, user_id=user_id, role=GroupRole.OWNER)
            try:
                self._insert(owner)
            except Exception:
                logger.error(f"Group {created.id} was created without an owner membership")
                raise
        return created

    def join_group(self, invite_code: str) -> Group | None:
        """
        Join the group whose invite code matches exactly.

        Returns:
            The joined group, or None if no group has that code
        """
        query = self._select(Group).eq("invite_code", invite_code.strip())
        group = self._first(Group, query)
        if group is None:
            logger.info("No group matches the given invite code")
            return None

        self._insert(
            GroupMember(group_id=group.id, user_id=self._current_user_id(), role=GroupRole.MEMBER)
        )
        return group

    def get_group_members(self, group_id: str | UUID) -> list[GroupMember]:
        query = self._select(GroupMember).eq("group_id", normalize_id(group_id))
        return self._rows(GroupMember, query)

    # -------------------------------------------------------------------------
    # Shopping list
    # -------------------------------------------------------------------------

    def get_shopping_list(self) -> list[ShoppingListItem]:
        """Shopping list, oldest first."""
        query = self._select(ShoppingListItem).order("created_at", desc=False)
        return self._rows(ShoppingListItem, query)

    def add_item(
        self,
        name: str,
        quantity: str | None = None,
        group_id: str | None = None,
    ) -> ShoppingListItem | None:
        """
        Add an item to the shopping list.

        The name is trimmed; a blank quantity is stored as NULL rather
        than an empty string.
        """
        item = ShoppingListItem(
            name=name.strip(),
            quantity=clean_optional_text(quantity),
            group_id=group_id,
            created_by=self._current_user_id(),
        )
        return self._insert(item)

    def toggle_item(self, item: ShoppingListItem) -> ShoppingListItem:
        """Flip is_checked and push the full row."""
        return self._update(item.model_copy(update={"is_checked": not item.is_checked}))

    def delete_item(self, item: ShoppingListItem | str | UUID) -> None:
        self._delete(ShoppingListItem, item)

    # -------------------------------------------------------------------------
    # Recipes
    # -------------------------------------------------------------------------

    def get_recipes(self) -> list[Recipe]:
        """Recipes, newest first."""
        query = self._select(Recipe).order("created_at", desc=True)
        return self._rows(Recipe, query)

    def get_recipe(self, recipe_id: str | UUID) -> Recipe | None:
        query = self._select(Recipe).eq("id", normalize_id(recipe_id))
        return self._first(Recipe, query)

    def add_recipe(self, recipe: Recipe) -> Recipe | None:
        return self._insert(recipe.model_copy(update={"created_by": self._current_user_id()}))

    def update_recipe(self, recipe: Recipe) -> Recipe:
        """Stamp updated_at and push the full recipe."""
        stamped = recipe.model_copy(update={"updated_at": datetime.now(timezone.utc)})
        return self._update(stamped)

    def delete_recipe(self, recipe: Recipe | str | UUID) -> None:
        self._delete(Recipe, recipe)

    # -------------------------------------------------------------------------
    # Recipe ingredients
    # -------------------------------------------------------------------------

    def get_recipe_ingredients(self, recipe_id: str | UUID) -> list[RecipeIngredient]:
        """Ingredients of one recipe in display order."""
        query = (
            self._select(RecipeIngredient)
            .eq("recipe_id", normalize_id(recipe_id))
            .order("sort_order", desc=False)
        )
        return self._rows(RecipeIngredient, query)

    def add_recipe_ingredient(self, ingredient: RecipeIngredient) -> RecipeIngredient | None:
        return self._insert(ingredient)

    def delete_recipe_ingredient(self, ingredient: RecipeIngredient | str | UUID) -> None:
        self._delete(RecipeIngredient, ingredient)

    # -------------------------------------------------------------------------
    # Meal plans
    # -------------------------------------------------------------------------

    def get_meal_plan(
        self,
        week_start: date | datetime,
        week_end: date | datetime,
    ) -> list[MealPlanEntry]:
        """
        Entries with week_start <= meal_date <= week_end.

        Both bounds are inclusive and compared as calendar dates, so a
        datetime bound ignores its time of day.
        """
        query = (
            self._select(MealPlanEntry)
            .gte("meal_date", to_date_string(week_start))
            .lte("meal_date", to_date_string(week_end))
            .order("meal_date", desc=False)
        )
        return self._rows(MealPlanEntry, query)

    def add_meal_plan_entry(self, entry: MealPlanEntry) -> MealPlanEntry | None:
        return self._insert(entry.model_copy(update={"created_by": self._current_user_id()}))

    def delete_meal_plan_entry(self, entry: MealPlanEntry | str | UUID) -> None:
        self._delete(MealPlanEntry, entry)

    # -------------------------------------------------------------------------
    # Todos
    # -------------------------------------------------------------------------

    def get_todos(self) -> list[TodoItem]:
        """Todos: incomplete first, then highest priority, then newest."""
        query = (
            self._select(TodoItem)
            .order("is_completed", desc=False)
            .order("priority", desc=True)
            .order("created_at", desc=True)
        )
        return self._rows(TodoItem, query)

    def add_todo(
        self,
        title: str,
        priority: int = 0,
        due_date: datetime | None = None,
        group_id: str | None = None,
    ) -> TodoItem | None:
        item = TodoItem(
            title=title.strip(),
            priority=priority,
            due_date=due_date,
            group_id=group_id,
            created_by=self._current_user_id(),
        )
        return self._insert(item)

    def toggle_todo(self, item: TodoItem) -> TodoItem:
        """Flip is_completed and push the full row."""
        return self._update(item.model_copy(update={"is_completed": not item.is_completed}))

    def delete_todo(self, item: TodoItem | str | UUID) -> None:
        self._delete(TodoItem, item)
