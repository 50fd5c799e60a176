# group_portal\core\ports\membership_store.py
from typing import Protocol, Optional
from group_portal.core.domain.models import Group, Membership, Viewer

class IMembershipStore(Protocol):
    """
    Port for persisting group memberships.

    Implementations guarantee at most one membership per (group, viewer)
    pair. Reads must not be cached: every call reflects the last committed write.
    """

    def get_membership(self, group: Group, viewer_id: int) -> Optional[Membership]:
        """
        Returns the viewer's membership in the group, in any state, or None.
        """
        ...

    def create_membership(self, group: Group, viewer: Viewer, membership_type: str) -> Membership:
        """
        Builds a new, unsaved membership in the 'active' state.
        Callers adjust the state with `Membership.set_state` and persist it with `save`.
        """
        ...

    def save(self, membership: Membership) -> Membership:
        """
        Inserts or updates a membership and returns the stored version.

        Raises:
            MembershipConflictError: if the pair already has a different membership.
        """
        ...

    def delete(self, membership: Membership) -> None:
        """Removes a stored membership."""
        ...

    def health_check(self) -> bool:
        """Returns True if the underlying storage is accessible."""
        ...
