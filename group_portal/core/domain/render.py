# group_portal/core/domain/render.py
"""
Typed render tree.

Page builders return a small closed set of nodes instead of free-form dicts.
Serializers (JSON via pydantic, HTML in the API adapter) walk this tree;
the `type` field discriminates the variants on the wire.
"""
from typing import Annotated, Dict, Iterator, List, Literal, Union

from pydantic import BaseModel, Field


class RouteRef(BaseModel):
    """Opaque route descriptor. Resolving it to a URL is the adapter's job."""
    name: str
    params: Dict[str, Union[int, str]] = Field(default_factory=dict)


class Text(BaseModel):
    type: Literal["text"] = "text"
    tag: str = "p"
    value: str


class Link(BaseModel):
    type: Literal["link"] = "link"
    title: str
    route: RouteRef


class Container(BaseModel):
    type: Literal["container"] = "container"
    classes: List[str] = Field(default_factory=list)
    # Insertion order is render order
    children: Dict[str, "RenderNode"] = Field(default_factory=dict)


RenderNode = Annotated[Union[Text, Link, Container], Field(discriminator="type")]

Container.model_rebuild()


def walk(node: Union[Text, Link, Container]) -> Iterator[Union[Text, Link, Container]]:
    """Depth-first, pre-order traversal of a render tree."""
    yield node
    if isinstance(node, Container):
        for child in node.children.values():
            yield from walk(child)


def links(node: Union[Text, Link, Container]) -> List[Link]:
    return [n for n in walk(node) if isinstance(n, Link)]


def texts(node: Union[Text, Link, Container]) -> List[Text]:
    return [n for n in walk(node) if isinstance(n, Text)]
