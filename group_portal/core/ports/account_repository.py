# group_portal\core\ports\account_repository.py
from typing import Protocol, Optional
from group_portal.core.domain.models import Viewer

class IAccountRepository(Protocol):
    """Port for looking up stored user accounts."""

    def get_viewer(self, viewer_id: int) -> Optional[Viewer]:
        """Returns the authenticated identity for an account id, or None."""
        ...
