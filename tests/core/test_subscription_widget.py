# tests/core/test_subscription_widget.py
import typing

import pytest

from group_portal.core.domain import render
from group_portal.core.domain.models import Membership, MembershipState, Viewer
from group_portal.core.use_cases.subscription_widget import (
    AlreadyMember,
    GroupPageSubscriptionWidget,
    SubscribePrompt,
)

@pytest.fixture
def widget(container):
    return container.subscription_widget()

def _membership(state):
    return Membership(id=10, group_id=1, viewer_id=7, state=state)


class TestDecide:

    def test_anonymous_viewer_sees_nothing(self, widget, group, anonymous, mock_access_oracle, mock_membership_store):
        """
        Scenario: Anonymous viewer calls the widget directly.
        Expected: None, and no collaborator is asked anything.
        """
        assert widget.decide(group, anonymous) is None
        mock_access_oracle.user_access.assert_not_called()
        mock_membership_store.get_membership.assert_not_called()

    @pytest.mark.parametrize("state", [None, *MembershipState])
    def test_content_without_marker_sees_nothing(self, widget, plain_page, alice, mock_membership_store, state):
        """Not a group: None regardless of membership state."""
        mock_membership_store.get_membership.return_value = _membership(state) if state else None

        assert widget.decide(plain_page, alice) is None

    def test_access_denied_sees_nothing(self, widget, group, alice, mock_access_oracle, mock_membership_store):
        # Arrange
        mock_access_oracle.user_access.return_value = False
        mock_membership_store.get_membership.return_value = _membership(MembershipState.ACTIVE)

        # Act
        result = widget.decide(group, alice)

        # Assert
        assert result is None
        mock_access_oracle.user_access.assert_called_once_with(group, "subscribe", alice)
        mock_membership_store.get_membership.assert_not_called()

    def test_active_member(self, widget, group, alice, mock_membership_store):
        membership = _membership(MembershipState.ACTIVE)
        mock_membership_store.get_membership.return_value = membership

        result = widget.decide(group, alice)

        assert result == AlreadyMember(group=group, membership=membership)
        mock_membership_store.get_membership.assert_called_once_with(group, alice.id)

    def test_no_membership_gets_prompt(self, widget, group, alice):
        assert widget.decide(group, alice) == SubscribePrompt(group=group, viewer=alice)

    @pytest.mark.parametrize("state", [MembershipState.PENDING, MembershipState.BLOCKED])
    def test_non_active_membership_gets_prompt(self, widget, group, alice, mock_membership_store, state):
        """Pending and blocked memberships are treated like no membership."""
        mock_membership_store.get_membership.return_value = _membership(state)

        assert isinstance(widget.decide(group, alice), SubscribePrompt)

    def test_decide_is_repeatable(self, widget, group, alice, mock_membership_store):
        mock_membership_store.get_membership.return_value = _membership(MembershipState.ACTIVE)

        assert widget.decide(group, alice) == widget.decide(group, alice)
        assert mock_membership_store.get_membership.call_count == 2

    def test_rendering_never_writes(self, widget, group, alice, mock_membership_store):
        widget.build(group, alice)

        mock_membership_store.create_membership.assert_not_called()
        mock_membership_store.save.assert_not_called()
        mock_membership_store.delete.assert_not_called()

    def test_store_failure_propagates(self, widget, group, alice, mock_membership_store):
        """
        Scenario: The membership store is unreachable.
        Expected: The original exception reaches the caller untouched.
        """
        mock_membership_store.get_membership.side_effect = ConnectionError("store down")

        with pytest.raises(ConnectionError, match="store down"):
            widget.decide(group, alice)

    def test_oracle_failure_propagates(self, widget, group, alice, mock_access_oracle):
        mock_access_oracle.user_access.side_effect = TimeoutError("policy service timeout")

        with pytest.raises(TimeoutError):
            widget.build(group, alice)


class TestRender:

    def test_subscribe_prompt(self, widget, group, alice):
        """
        Scenario A: Alice is not a member of "Test Group".
        Expected: Personalised message and a subscribe link.
        """
        tree = widget.build(group, alice)

        assert tree.classes == ["group-subscription-ui"]
        assert list(tree.children) == ["message", "subscribe_link"]

        message = tree.children["message"]
        assert message.tag == "p"
        assert message.value == (
            "Hi Alice, click here if you would like to subscribe to this group called Test Group."
        )

        link = tree.children["subscribe_link"]
        assert link.title == "Subscribe to Group"
        assert link.route == render.RouteRef(
            name="og.subscribe",
            params={"entity_type_id": "node", "group": 1, "og_membership_type": "default"},
        )

    def test_membership_info(self, widget, group, alice, mock_membership_store):
        """
        Scenario C: Alice is an active member.
        Expected: Fixed message, leave link and no subscribe link.
        """
        mock_membership_store.get_membership.return_value = _membership(MembershipState.ACTIVE)

        tree = widget.build(group, alice)

        assert tree.classes == ["group-membership-info"]
        assert tree.children["message"].value == "You are already a member of this group."
        assert [l.title for l in render.links(tree)] == ["Leave Group"]
        assert tree.children["unsubscribe_link"].route == render.RouteRef(
            name="og.unsubscribe",
            params={"entity_type_id": "node", "group": 1},
        )

    def test_build_returns_none_when_not_applicable(self, widget, group, anonymous):
        assert widget.build(group, anonymous) is None

    def test_stored_display_name_wins(self, widget, group, alice, mock_account_repository):
        mock_account_repository.get_viewer.return_value = Viewer(
            id=alice.id, display_name="Alice Liddell", is_authenticated=True
        )

        tree = widget.build(group, alice)

        assert tree.children["message"].value.startswith("Hi Alice Liddell, ")
        mock_account_repository.get_viewer.assert_called_once_with(alice.id)

    def test_without_account_lookup(self, mock_access_oracle, mock_membership_store, group, alice):
        widget = GroupPageSubscriptionWidget(mock_access_oracle, mock_membership_store)

        tree = widget.build(group, alice)

        assert tree.children["message"].value.startswith("Hi Alice, ")

    def test_type_hints_resolve(self):
        """The `render` method must not hide the render-tree types used in annotations."""
        hints = typing.get_type_hints(GroupPageSubscriptionWidget.build)

        assert hints["return"] == typing.Optional[render.Container]
        assert typing.get_type_hints(GroupPageSubscriptionWidget.render)["return"] is render.Container
