# group_portal/core/use_cases/subscription_widget.py
from dataclasses import dataclass
from typing import Optional, Union

import structlog

from group_portal.core.domain import render as tree
from group_portal.core.domain.models import Group, Membership, Viewer
from group_portal.core.ports.access_oracle import IAccessOracle
from group_portal.core.ports.account_repository import IAccountRepository
from group_portal.core.ports.membership_store import IMembershipStore

logger = structlog.get_logger()

SUBSCRIBE_MESSAGE = (
    "Hi {name}, click here if you would like to subscribe to this group called {group_label}."
)
SUBSCRIBE_LINK_TITLE = "Subscribe to Group"
MEMBER_MESSAGE = "You are already a member of this group."
UNSUBSCRIBE_LINK_TITLE = "Leave Group"

SUBSCRIBE_ROUTE = "og.subscribe"
UNSUBSCRIBE_ROUTE = "og.unsubscribe"
DEFAULT_MEMBERSHIP_TYPE = "default"


@dataclass(frozen=True)
class SubscribePrompt:
    group: Group
    viewer: Viewer


@dataclass(frozen=True)
class AlreadyMember:
    group: Group
    membership: Membership


SubscriptionVariant = Union[SubscribePrompt, AlreadyMember]


class GroupPageSubscriptionWidget:
    """
    Decides which subscription UI a viewer sees on a group page.

    Rendering is a pure read: the widget queries the access oracle and the
    membership store on every call and never writes. The subscribe / leave
    actions are only referenced through links. Collaborator failures are
    not caught here.
    """

    def __init__(
        self,
        access_oracle: IAccessOracle,
        membership_store: IMembershipStore,
        accounts: Optional[IAccountRepository] = None,
    ):
        self.access_oracle = access_oracle
        self.membership_store = membership_store
        self.accounts = accounts

    def decide(self, group: Group, viewer: Viewer) -> Optional[SubscriptionVariant]:
        """
        Returns the UI variant for (group, viewer), or None when no
        subscription UI applies. First matching rule wins.
        """
        if not viewer.is_authenticated:
            return None

        if not group.has_group_marker:
            return None

        if not self.access_oracle.user_access(group, "subscribe", viewer):
            return None

        membership = self.membership_store.get_membership(group, viewer.id)
        if membership is not None and membership.is_active:
            return AlreadyMember(group=group, membership=membership)

        return SubscribePrompt(group=group, viewer=viewer)

    def render(self, variant: SubscriptionVariant) -> tree.Container:
        if isinstance(variant, AlreadyMember):
            return self._build_membership_info(variant.group, variant.membership)
        return self._build_subscribe_form(variant.group, variant.viewer)

    def build(self, group: Group, viewer: Viewer) -> Optional[tree.Container]:
        """Decides and renders in one step; None means nothing is shown."""
        variant = self.decide(group, viewer)
        logger.debug(
            "subscription_variant_decided",
            group_id=group.id,
            viewer_id=viewer.id,
            variant=type(variant).__name__ if variant else None,
        )
        if variant is None:
            return None
        return self.render(variant)

    def _display_name(self, viewer: Viewer) -> str:
        # Stored account name first, then the session copy
        account = self.accounts.get_viewer(viewer.id) if self.accounts else None
        return account.display_name if account else viewer.display_name

    def _build_subscribe_form(self, group: Group, viewer: Viewer) -> tree.Container:
        return tree.Container(
            classes=["group-subscription-ui"],
            children={
                "message": tree.Text(
                    tag="p",
                    value=SUBSCRIBE_MESSAGE.format(
                        name=self._display_name(viewer),
                        group_label=group.title,
                    ),
                ),
                "subscribe_link": tree.Link(
                    title=SUBSCRIBE_LINK_TITLE,
                    route=tree.RouteRef(
                        name=SUBSCRIBE_ROUTE,
                        params={
                            "entity_type_id": group.entity_type_id,
                            "group": group.id,
                            "og_membership_type": DEFAULT_MEMBERSHIP_TYPE,
                        },
                    ),
                ),
            },
        )

    def _build_membership_info(self, group: Group, membership: Membership) -> tree.Container:
        return tree.Container(
            classes=["group-membership-info"],
            children={
                "message": tree.Text(tag="p", value=MEMBER_MESSAGE),
                "unsubscribe_link": tree.Link(
                    title=UNSUBSCRIBE_LINK_TITLE,
                    route=tree.RouteRef(
                        name=UNSUBSCRIBE_ROUTE,
                        params={
                            "entity_type_id": group.entity_type_id,
                            "group": group.id,
                        },
                    ),
                ),
            },
        )
