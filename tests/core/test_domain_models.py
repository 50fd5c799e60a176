# tests\core\test_domain_models.py
import pytest
from pydantic import TypeAdapter, ValidationError

from group_portal.core.domain import render
from group_portal.core.domain.models import Group, Membership, MembershipState, Viewer

class TestGroupModel:
    def test_marker_presence_makes_a_group(self):
        """The marker counts by presence, even when its value is falsy."""
        assert Group(id=1, title="G", og_group=True).has_group_marker
        assert Group(id=1, title="G", og_group=False).has_group_marker

    def test_missing_marker(self):
        page = Group(id=2, title="About", bundle="page")
        assert not page.has_group_marker
        assert page.entity_type_id == "node"

    def test_missing_required_fields(self):
        with pytest.raises(ValidationError):
            Group(title="No id")

class TestViewerModel:
    def test_anonymous_defaults(self):
        viewer = Viewer.anonymous()
        assert viewer.id == 0
        assert viewer.is_authenticated is False
        assert viewer.roles == []

class TestMembershipModel:
    def test_defaults(self):
        membership = Membership(group_id=1, viewer_id=7)
        assert membership.id is None
        assert membership.membership_type == "default"
        assert membership.state == MembershipState.ACTIVE
        assert membership.is_active

    @pytest.mark.parametrize("state", ["pending", "blocked"])
    def test_set_state_accepts_tokens(self, state):
        membership = Membership(group_id=1, viewer_id=7).set_state(state)
        assert membership.state == MembershipState(state)
        assert not membership.is_active

    def test_set_state_rejects_unknown_token(self):
        with pytest.raises(ValueError):
            Membership(group_id=1, viewer_id=7).set_state("archived")

class TestRenderTree:
    def test_parses_tagged_variants(self):
        """Nested JSON is dispatched on the `type` discriminator."""
        payload = {
            "type": "container",
            "classes": ["group-membership-info"],
            "children": {
                "message": {"type": "text", "value": "You are already a member of this group."},
                "unsubscribe_link": {
                    "type": "link",
                    "title": "Leave Group",
                    "route": {"name": "og.unsubscribe", "params": {"entity_type_id": "node", "group": 1}},
                },
            },
        }
        node = TypeAdapter(render.RenderNode).validate_python(payload)

        assert isinstance(node, render.Container)
        assert isinstance(node.children["message"], render.Text)
        assert node.children["message"].tag == "p"
        assert isinstance(node.children["unsubscribe_link"], render.Link)
        assert node.children["unsubscribe_link"].route.params["group"] == 1

    def test_unknown_variant_is_rejected(self):
        with pytest.raises(ValidationError):
            TypeAdapter(render.RenderNode).validate_python({"type": "image", "src": "x.png"})

    def test_walk_is_preorder(self):
        tree = render.Container(
            children={
                "a": render.Text(value="first"),
                "b": render.Container(children={"c": render.Text(value="second")}),
            }
        )
        values = [n.value for n in render.texts(tree)]
        assert values == ["first", "second"]
        assert len(list(render.walk(tree))) == 4
