# group_portal\core\ports\group_repository.py
from typing import Protocol, Optional
from group_portal.core.domain.models import Group

class IGroupRepository(Protocol):
    """Port for loading group content."""

    def get(self, group_id: int) -> Optional[Group]:
        """Returns the content item with this id, or None if it does not exist."""
        ...

    def health_check(self) -> bool:
        ...
