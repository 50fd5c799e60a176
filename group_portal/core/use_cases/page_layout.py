# group_portal\core\use_cases\page_layout.py
from typing import Sequence

from group_portal.core.domain import render


class PageLayout:
    """
    Formatting helpers shared by page builders.
    Each helper takes nodes and returns a new node; nothing is stored.
    """

    def page_title(self, label: str) -> render.Text:
        return render.Text(tag="h1", value=label)

    def wrap_container_wide(self, node: render.RenderNode) -> render.Container:
        return render.Container(classes=["container-wide"], children={"content": node})

    def wrap_container_vertical_spacing_big(
        self, nodes: Sequence[render.RenderNode]
    ) -> render.Container:
        return render.Container(
            classes=["vertical-spacing-big"],
            children={str(i): node for i, node in enumerate(nodes)},
        )

    def wrap_container_bottom_padding(self, node: render.RenderNode) -> render.Container:
        return render.Container(classes=["bottom-padding"], children={"content": node})
