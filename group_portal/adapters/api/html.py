# group_portal/adapters/api/html.py
"""
Serializes a render tree to HTML markup.
"""
from html import escape
from typing import Callable, Union

from group_portal.core.domain import render

UrlResolver = Callable[[render.RouteRef], str]

_TEXT_TAGS = frozenset({"p", "h1", "h2", "h3", "span", "strong", "em"})


def render_html(node: Union[render.Text, render.Link, render.Container], url_for: UrlResolver) -> str:
    if isinstance(node, render.Text):
        tag = node.tag if node.tag in _TEXT_TAGS else "p"
        return f"<{tag}>{escape(node.value)}</{tag}>"

    if isinstance(node, render.Link):
        href = escape(url_for(node.route), quote=True)
        return f'<a href="{href}">{escape(node.title)}</a>'

    inner = "".join(render_html(child, url_for) for child in node.children.values())
    if node.classes:
        return f'<div class="{escape(" ".join(node.classes), quote=True)}">{inner}</div>'
    return f"<div>{inner}</div>"


def render_document(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{escape(title)}</title></head>"
        f"<body>{body}</body></html>"
    )


def render_confirm_form(question: str, action_url: str, submit_label: str, cancel_url: str) -> str:
    """A confirmation step: the action itself is only ever submitted as a POST."""
    action = escape(action_url, quote=True)
    return (
        f'<form method="post" action="{action}" class="confirmation">'
        f"<p>{escape(question)}</p>"
        f'<button type="submit">{escape(submit_label)}</button> '
        f'<a href="{escape(cancel_url, quote=True)}">Cancel</a>'
        "</form>"
    )
