# group_portal/adapters/api/routers/memberships.py
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import HTMLResponse
from dependency_injector.wiring import inject, Provide
import structlog

from group_portal.core.domain.exceptions import DomainError
from group_portal.core.domain.models import Membership, Viewer
from group_portal.core.use_cases.manage_membership import LeaveGroup, SubscribeToGroup
from group_portal.adapters.api.dependencies import get_current_viewer
from group_portal.adapters.api.errors import http_error_for
from group_portal.adapters.api.html import render_confirm_form, render_document
from group_portal.shared.container import Container

logger = structlog.get_logger()

# Paths mirror the action links rendered by the subscription widget.
# GET serves the confirmation form, POST performs the action.
router = APIRouter(prefix="/group", tags=["Memberships"])

JOIN_QUESTION = "Are you sure you want to join the group {title}?"
LEAVE_QUESTION = "Are you sure you want to unsubscribe from the group {title}?"


def _confirmation_page(request: Request, question: str, submit_label: str, group_id: int) -> HTMLResponse:
    body = render_confirm_form(
        question,
        action_url=request.url.path,
        submit_label=submit_label,
        cancel_url=request.app.url_path_for("groups.page", group_id=str(group_id)),
    )
    return HTMLResponse(render_document(question, body))


@router.get(
    "/{entity_type_id}/{group}/subscribe/{og_membership_type}",
    name="og.subscribe.confirm",
    response_class=HTMLResponse,
    summary="Confirm subscribing to a group",
)
@inject
def confirm_subscribe(
    entity_type_id: str,
    group: int,
    og_membership_type: str,
    request: Request,
    viewer: Viewer = Depends(get_current_viewer),
    use_case: SubscribeToGroup = Depends(Provide[Container.subscribe_use_case]),
):
    try:
        target = use_case.confirm(entity_type_id, group, viewer, og_membership_type)
    except DomainError as e:
        raise http_error_for(e)
    return _confirmation_page(request, JOIN_QUESTION.format(title=target.title), "Join", group)


@router.post(
    "/{entity_type_id}/{group}/subscribe/{og_membership_type}",
    name="og.subscribe",
    response_model=Membership,
    status_code=status.HTTP_201_CREATED,
    summary="Subscribe to a group",
)
@inject
def subscribe(
    entity_type_id: str,
    group: int,
    og_membership_type: str,
    response: Response,
    viewer: Viewer = Depends(get_current_viewer),
    use_case: SubscribeToGroup = Depends(Provide[Container.subscribe_use_case]),
):
    """
    Creates the viewer's membership.

    **Returns:**
    * 201 with the new membership, `active` or `pending` depending on whether
      the viewer may join without approval.
    * 200 with the existing membership when it is still pending.
    """
    try:
        outcome = use_case.execute(entity_type_id, group, viewer, og_membership_type)
    except DomainError as e:
        logger.info("subscribe_rejected", group_id=group, viewer_id=viewer.id, error=str(e))
        raise http_error_for(e)

    if not outcome.created:
        response.status_code = status.HTTP_200_OK
    return outcome.membership


@router.get(
    "/{entity_type_id}/{group}/unsubscribe",
    name="og.unsubscribe.confirm",
    response_class=HTMLResponse,
    summary="Confirm leaving a group",
)
@inject
def confirm_unsubscribe(
    entity_type_id: str,
    group: int,
    request: Request,
    viewer: Viewer = Depends(get_current_viewer),
    use_case: LeaveGroup = Depends(Provide[Container.leave_group_use_case]),
):
    try:
        target = use_case.confirm(entity_type_id, group, viewer)
    except DomainError as e:
        raise http_error_for(e)
    return _confirmation_page(request, LEAVE_QUESTION.format(title=target.title), "Remove", group)


@router.post(
    "/{entity_type_id}/{group}/unsubscribe",
    name="og.unsubscribe",
    response_model=Membership,
    status_code=status.HTTP_200_OK,
    summary="Leave a group",
)
@inject
def unsubscribe(
    entity_type_id: str,
    group: int,
    viewer: Viewer = Depends(get_current_viewer),
    use_case: LeaveGroup = Depends(Provide[Container.leave_group_use_case]),
):
    """Deletes the viewer's membership and returns the removed record."""
    try:
        return use_case.execute(entity_type_id, group, viewer)
    except DomainError as e:
        logger.info("unsubscribe_rejected", group_id=group, viewer_id=viewer.id, error=str(e))
        raise http_error_for(e)
