# =============================================================================
# app/routers/todos.py - Todo Endpoints
# =============================================================================

from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.auth.dependencies import get_current_user
from app.dependencies import HouseholdDep
from app.exceptions import NoRowReturnedError
from core.models import TodoItem
from lib.utils import NonBlankStr

router = APIRouter(dependencies=[Depends(get_current_user)])


class TodoCreateRequest(BaseModel):
    """New todo."""
    title: NonBlankStr = Field(..., examples=["Pay rent"])
    priority: int = Field(default=0, examples=[5])
    due_date: datetime | None = None
    group_id: str | None = None


@router.get("", response_model=list[TodoItem])
def list_todos(service: HouseholdDep):
    """Incomplete first, then by priority (high to low), then newest."""
    return service.get_todos()


@router.post("", response_model=TodoItem, status_code=201)
def add_todo(body: TodoCreateRequest, service: HouseholdDep):
    item = service.add_todo(body.title, body.priority, body.due_date, body.group_id)
    if item is None:
        raise NoRowReturnedError(TodoItem.table_name)
    return item


@router.post("/toggle", response_model=TodoItem)
def toggle_todo(item: TodoItem, service: HouseholdDep):
    """Mark a todo done (or not done) and return it."""
    return service.toggle_todo(item)


@router.delete("/{todo_id}", status_code=204)
def delete_todo(todo_id: str, service: HouseholdDep) -> None:
    service.delete_todo(todo_id)
