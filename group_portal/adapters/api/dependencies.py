# group_portal/adapters/api/dependencies.py
from typing import Annotated, Optional

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Header

from group_portal.core.domain.models import Viewer
from group_portal.core.ports.account_repository import IAccountRepository
from group_portal.shared.container import Container

logger = structlog.get_logger()


# -----------------------------------------------------------------------------
# Current viewer
# -----------------------------------------------------------------------------
@inject
def get_current_viewer(
    x_viewer_id: Annotated[
        Optional[int],
        Header(description="Account id of the logged-in viewer (set by the auth proxy)"),
    ] = None,
    accounts: IAccountRepository = Depends(Provide[Container.account_repository]),
) -> Viewer:
    """
    Resolves the requesting identity.

    Authentication happens upstream; this service trusts the `X-Viewer-Id`
    header. A missing header, or an id with no stored account, is anonymous.
    """
    if x_viewer_id is None:
        return Viewer.anonymous()

    viewer = accounts.get_viewer(x_viewer_id)
    if viewer is None:
        logger.warning("unknown_viewer_id", viewer_id=x_viewer_id)
        return Viewer.anonymous()
    return viewer
