# tests/adapters/test_html.py
from group_portal.adapters.api.html import render_confirm_form, render_document, render_html
from group_portal.core.domain import render

def _url_for(route):
    return "/" + route.name + "/" + "/".join(str(v) for v in route.params.values())

class TestRenderHtml:

    def test_container_with_text_and_link(self):
        tree = render.Container(
            classes=["group-membership-info"],
            children={
                "message": render.Text(value="You are already a member of this group."),
                "unsubscribe_link": render.Link(
                    title="Leave Group",
                    route=render.RouteRef(name="og.unsubscribe", params={"entity_type_id": "node", "group": 1}),
                ),
            },
        )

        assert render_html(tree, _url_for) == (
            '<div class="group-membership-info">'
            "<p>You are already a member of this group.</p>"
            '<a href="/og.unsubscribe/node/1">Leave Group</a>'
            "</div>"
        )

    def test_escapes_user_content(self):
        tree = render.Text(tag="h1", value="<script>alert(1)</script> & co")

        assert render_html(tree, _url_for) == "<h1>&lt;script&gt;alert(1)&lt;/script&gt; &amp; co</h1>"

    def test_unknown_tag_falls_back_to_paragraph(self):
        assert render_html(render.Text(tag="script", value="x"), _url_for) == "<p>x</p>"

    def test_document(self):
        html = render_document("A & B", "<p>hi</p>")

        assert html.startswith("<!DOCTYPE html>")
        assert "<title>A &amp; B</title>" in html
        assert html.endswith("<body><p>hi</p></body></html>")

    def test_confirm_form_posts_to_action(self):
        html = render_confirm_form(
            "Are you sure you want to join the group A & B?",
            action_url="/group/node/1/subscribe/default",
            submit_label="Join",
            cancel_url="/groups/1/page",
        )

        assert html.startswith('<form method="post" action="/group/node/1/subscribe/default"')
        assert "<p>Are you sure you want to join the group A &amp; B?</p>" in html
        assert '<button type="submit">Join</button>' in html
        assert '<a href="/groups/1/page">Cancel</a>' in html
