# group_portal\core\ports\access_oracle.py
from typing import Protocol
from group_portal.core.domain.models import Group, Viewer

class IAccessOracle(Protocol):
    """
    Port for group permission checks.
    The core treats the policy as a black box and only asks yes/no questions.
    """

    def user_access(self, group: Group, operation: str, viewer: Viewer) -> bool:
        """
        Checks whether a viewer may perform an operation on a group.

        Args:
            group: The group content.
            operation: Operation name (e.g., 'subscribe', 'subscribe without approval').
            viewer: The requesting identity (may be anonymous).

        Returns:
            True if the operation is allowed.
        """
        ...
