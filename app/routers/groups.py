# =============================================================================
# app/routers/groups.py - Household Group Endpoints
# =============================================================================
# Create, join and inspect groups. All endpoints require a signed-in user.
# =============================================================================

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.auth.dependencies import get_current_user
from app.dependencies import HouseholdDep
from app.exceptions import InviteCodeNotFoundError, NoRowReturnedError
from core.models import Group, GroupMember
from lib.utils import NonBlankStr

router = APIRouter(dependencies=[Depends(get_current_user)])


# =============================================================================
# Request Models
# =============================================================================

class GroupCreateRequest(BaseModel):
    name: NonBlankStr = Field(..., examples=["Nine West"])


class GroupJoinRequest(BaseModel):
    invite_code: NonBlankStr = Field(..., examples=["a1b2c3d4"])


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=list[Group])
def list_groups(service: HouseholdDep):
    """Groups the caller can see."""
    return service.get_my_groups()


@router.post("", response_model=Group, status_code=201)
def create_group(body: GroupCreateRequest, service: HouseholdDep):
    """
    Create a group. The caller becomes its owner.
    """
    group = service.create_group(body.name)
    if group is None:
        raise NoRowReturnedError(Group.table_name)
    return group


@router.post("/join", response_model=Group)
def join_group(body: GroupJoinRequest, service: HouseholdDep):
    """
    Join a group by invite code.

    Raises:
        404: If no group has this invite code
    """
    group = service.join_group(body.invite_code)
    if group is None:
        raise InviteCodeNotFoundError(body.invite_code.strip())
    return group


@router.get("/{group_id}/members", response_model=list[GroupMember])
def list_members(group_id: str, service: HouseholdDep):
    return service.get_group_members(group_id)
