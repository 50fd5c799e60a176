# group_portal/core/use_cases/manage_membership.py
"""
Subscribe / leave actions.

These are the targets of the links the subscription widget renders. Unlike
page rendering they mutate memberships, always through the MembershipStore port.
Each action also has a `confirm` step that runs the same checks without
writing, for the confirmation page shown before the action is submitted.
"""
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import structlog

from group_portal.core.domain.exceptions import (
    AccessDeniedError,
    AlreadyMemberError,
    GroupManagerCannotLeaveError,
    GroupNotFoundError,
    InvalidMembershipTypeError,
    MembershipNotFoundError,
    NotAGroupError,
)
from group_portal.core.domain.models import Group, Membership, MembershipState, Viewer
from group_portal.core.ports.access_oracle import IAccessOracle
from group_portal.core.ports.group_repository import IGroupRepository
from group_portal.core.ports.membership_store import IMembershipStore
from group_portal.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


def _load_group(groups: IGroupRepository, entity_type_id: str, group_id: int) -> Group:
    group = groups.get(group_id)
    if group is None or group.entity_type_id != entity_type_id:
        raise GroupNotFoundError(group_id, entity_type_id)
    if not group.has_group_marker:
        raise NotAGroupError(group_id)
    return group


@dataclass(frozen=True)
class SubscribeOutcome:
    membership: Membership
    # False when a pending membership already existed
    created: bool


class SubscribeToGroup:
    """
    Use Case: Subscribes the viewer to a group.

    The membership starts 'active' when the viewer may subscribe without
    approval, otherwise 'pending'. Re-subscribing while pending returns the
    existing record.
    """

    def __init__(
        self,
        groups: IGroupRepository,
        access_oracle: IAccessOracle,
        membership_store: IMembershipStore,
        membership_types: Iterable[str] = ("default",),
    ):
        self.groups = groups
        self.access_oracle = access_oracle
        self.membership_store = membership_store
        self.membership_types = frozenset(membership_types)

    def _resolve(
        self,
        entity_type_id: str,
        group_id: int,
        viewer: Viewer,
        membership_type: str,
    ) -> Tuple[Group, Optional[Membership]]:
        if not viewer.is_authenticated:
            raise AccessDeniedError("subscribe", group_id)

        group = _load_group(self.groups, entity_type_id, group_id)

        if membership_type not in self.membership_types:
            raise InvalidMembershipTypeError(membership_type)

        existing = self.membership_store.get_membership(group, viewer.id)
        if existing is not None:
            if existing.state == MembershipState.ACTIVE:
                raise AlreadyMemberError(group_id)
            if existing.state == MembershipState.BLOCKED:
                raise AccessDeniedError("subscribe", group_id)
            return group, existing

        if not self.access_oracle.user_access(group, "subscribe", viewer):
            raise AccessDeniedError("subscribe", group_id)
        return group, None

    def confirm(
        self,
        entity_type_id: str,
        group_id: int,
        viewer: Viewer,
        membership_type: str = "default",
    ) -> Group:
        """Runs every subscribe check without writing; returns the target group."""
        group, _ = self._resolve(entity_type_id, group_id, viewer, membership_type)
        return group

    def execute(
        self,
        entity_type_id: str,
        group_id: int,
        viewer: Viewer,
        membership_type: str = "default",
    ) -> SubscribeOutcome:
        with tracer.start_as_current_span("use_case.subscribe_to_group") as span:
            span.set_attribute("app.group_id", group_id)
            span.set_attribute("app.membership_type", membership_type)

            group, existing = self._resolve(entity_type_id, group_id, viewer, membership_type)
            if existing is not None:
                logger.info("membership_still_pending", group_id=group_id, viewer_id=viewer.id)
                return SubscribeOutcome(membership=existing, created=False)

            if self.access_oracle.user_access(group, "subscribe without approval", viewer):
                state = MembershipState.ACTIVE
            else:
                state = MembershipState.PENDING

            membership = self.membership_store.create_membership(group, viewer, membership_type)
            membership.set_state(state)
            membership = self.membership_store.save(membership)

            span.set_attribute("app.membership_state", state.value)
            logger.info(
                "membership_created",
                group_id=group_id,
                viewer_id=viewer.id,
                membership_type=membership_type,
                state=state.value,
            )
            return SubscribeOutcome(membership=membership, created=True)


class LeaveGroup:
    """
    Use Case: Removes the viewer's membership from a group.
    Group owners and blocked members cannot leave.
    """

    def __init__(self, groups: IGroupRepository, membership_store: IMembershipStore):
        self.groups = groups
        self.membership_store = membership_store

    def _resolve(self, entity_type_id: str, group_id: int, viewer: Viewer) -> Tuple[Group, Membership]:
        if not viewer.is_authenticated:
            raise AccessDeniedError("unsubscribe", group_id)

        group = _load_group(self.groups, entity_type_id, group_id)

        if group.owner_id is not None and group.owner_id == viewer.id:
            raise GroupManagerCannotLeaveError(group_id)

        membership = self.membership_store.get_membership(group, viewer.id)
        if membership is None:
            raise MembershipNotFoundError(group_id, viewer.id)
        if membership.state == MembershipState.BLOCKED:
            raise AccessDeniedError("unsubscribe", group_id)
        return group, membership

    def confirm(self, entity_type_id: str, group_id: int, viewer: Viewer) -> Group:
        group, _ = self._resolve(entity_type_id, group_id, viewer)
        return group

    def execute(self, entity_type_id: str, group_id: int, viewer: Viewer) -> Membership:
        with tracer.start_as_current_span("use_case.leave_group") as span:
            span.set_attribute("app.group_id", group_id)

            _, membership = self._resolve(entity_type_id, group_id, viewer)

            self.membership_store.delete(membership)
            logger.info("membership_deleted", group_id=group_id, viewer_id=viewer.id)
            return membership
