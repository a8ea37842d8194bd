"""Study group routes: creation, invitations, and acceptance."""

from fastapi import APIRouter, HTTPException, status

from mentora.api.deps import Stores
from mentora.schemas.groups import (
    AcceptInviteRequest,
    GroupCreate,
    GroupInviteRequest,
    GroupInviteResponse,
    GroupRead,
    GroupResponse,
)
from mentora.schemas.notifications import NotificationRead
from mentora.stores.models import Notification

router = APIRouter(prefix="/groups", tags=["groups"])

GROUP_INVITE = "group_invite"


@router.post("", response_model=GroupResponse, status_code=status.HTTP_201_CREATED)
async def create_group(data: GroupCreate, stores: Stores) -> GroupResponse:
    """Create a group whose only member is its owner."""
    group = stores.groups.create(data.name, data.owner_id)
    return GroupResponse(group=GroupRead.model_validate(group))


@router.get("/{group_id}", response_model=GroupResponse)
async def get_group(group_id: str, stores: Stores) -> GroupResponse:
    group = stores.groups.get(group_id)
    if group is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")
    return GroupResponse(group=GroupRead.model_validate(group))


@router.post("/invite", response_model=GroupInviteResponse)
async def invite_to_group(request: GroupInviteRequest, stores: Stores) -> GroupInviteResponse:
    """
    Invite a user to a group.

    The invitation is delivered as a notification to the invitee;
    membership only changes when they accept it.
    """
    group = stores.groups.get(request.group_id)
    if group is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")

    if stores.users.get(request.invited_user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    inviter = stores.users.get(request.inviter_user_id) if request.inviter_user_id else None
    inviter_name = inviter.name if inviter else "Someone"

    notification = stores.notifications.add(
        request.invited_user_id,
        Notification(
            type=GROUP_INVITE,
            title="Group Invitation",
            message=f'{inviter_name} invited you to join "{group.name}"',
            data={
                "groupId": group.id,
                "inviterUserId": request.inviter_user_id,
                "groupName": group.name,
            },
        ),
    )

    return GroupInviteResponse(notification=NotificationRead.model_validate(notification))


@router.post("/accept-invite", response_model=GroupResponse)
async def accept_invite(request: AcceptInviteRequest, stores: Stores) -> GroupResponse:
    """
    Accept a group invitation.

    Idempotent: accepting the same invitation again leaves membership
    unchanged.
    """
    notification = stores.notifications.get(request.user_id, request.notification_id)
    if notification is None or notification.type != GROUP_INVITE:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invitation not found")

    group = stores.groups.add_member(notification.data.get("groupId"), request.user_id)
    if group is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")

    stores.notifications.mark_read(request.user_id, notification.id)

    return GroupResponse(group=GroupRead.model_validate(group))
