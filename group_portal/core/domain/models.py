# group_portal\core\domain\models.py
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field
from datetime import datetime

# --- Enums ---

class MembershipState(str, Enum):
    """Lifecycle state of a membership record."""
    ACTIVE = "active"     # Full member
    PENDING = "pending"   # Awaiting approval by a group manager
    BLOCKED = "blocked"   # Banned from the group

# --- Entities ---

class Group(BaseModel):
    """
    A content item acting as a group container.

    A piece of content only counts as a group when it carries the group
    marker attribute (`og_group`). The marker's presence is what matters,
    not its value.
    """
    id: int
    title: str
    entity_type_id: str = "node"
    bundle: str = "group"
    owner_id: Optional[int] = None
    og_group: Optional[bool] = Field(None, description="Group marker attribute")

    @property
    def has_group_marker(self) -> bool:
        return self.og_group is not None

class Viewer(BaseModel):
    """The identity requesting a page."""
    id: int = 0
    display_name: str = "Anonymous"
    is_authenticated: bool = False
    roles: List[str] = Field(default_factory=list)

    @classmethod
    def anonymous(cls) -> "Viewer":
        return cls()

class Membership(BaseModel):
    """
    Relationship record linking a viewer to a group.
    A viewer has at most one membership per group.
    """
    id: Optional[int] = None
    group_id: int
    entity_type_id: str = "node"
    viewer_id: int
    membership_type: str = "default"
    state: MembershipState = MembershipState.ACTIVE
    created: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.state == MembershipState.ACTIVE

    def set_state(self, state: MembershipState) -> "Membership":
        self.state = MembershipState(state)
        return self
