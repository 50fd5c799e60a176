# group_portal/adapters/access/role_access_oracle.py
from typing import Iterable, Mapping

import structlog

from group_portal.core.domain.models import Group, Viewer
from group_portal.core.ports.access_oracle import IAccessOracle

logger = structlog.get_logger()

ANONYMOUS_ROLE = "anonymous"
AUTHENTICATED_ROLE = "authenticated"


class RoleAccessOracle(IAccessOracle):
    """
    Grants group operations from a static operation -> roles table.

    Every viewer implicitly holds either the 'anonymous' or the
    'authenticated' role on top of its own roles. Content without the
    group marker never grants anything.
    """

    def __init__(self, permissions: Mapping[str, Iterable[str]]):
        self.permissions = {op: frozenset(roles) for op, roles in permissions.items()}

    def user_access(self, group: Group, operation: str, viewer: Viewer) -> bool:
        if not group.has_group_marker:
            return False

        allowed = self.permissions.get(operation)
        if not allowed:
            logger.debug("group_operation_unconfigured", operation=operation)
            return False

        roles = set(viewer.roles)
        roles.add(AUTHENTICATED_ROLE if viewer.is_authenticated else ANONYMOUS_ROLE)
        return not allowed.isdisjoint(roles)
