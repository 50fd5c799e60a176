# group_portal\core\use_cases\__init__.py
"""
Core Use Cases (Application Logic).

The "Interactors" of the system. They orchestrate the flow of data between
the Domain Entities and the Ports:
1. Deciding and rendering the subscription widget.
2. Building the group page.
3. Subscribing to and leaving groups.
"""

from .build_group_page import BuildGroupPage
from .manage_membership import LeaveGroup, SubscribeOutcome, SubscribeToGroup
from .page_layout import PageLayout
from .subscription_widget import AlreadyMember, GroupPageSubscriptionWidget, SubscribePrompt

__all__ = [
    "AlreadyMember",
    "BuildGroupPage",
    "GroupPageSubscriptionWidget",
    "LeaveGroup",
    "PageLayout",
    "SubscribeOutcome",
    "SubscribePrompt",
    "SubscribeToGroup",
]
