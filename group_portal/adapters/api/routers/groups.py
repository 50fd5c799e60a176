# group_portal\adapters\api\routers\groups.py
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse
from dependency_injector.wiring import inject, Provide
import structlog

from group_portal.core.domain import render
from group_portal.core.domain.exceptions import DomainError
from group_portal.core.domain.models import Viewer
from group_portal.core.use_cases.build_group_page import BuildGroupPage
from group_portal.adapters.api.dependencies import get_current_viewer
from group_portal.adapters.api.errors import http_error_for
from group_portal.adapters.api.html import render_document, render_html
from group_portal.shared.container import Container

logger = structlog.get_logger()

router = APIRouter(prefix="/groups", tags=["Groups"])

def _build_page(use_case: BuildGroupPage, group_id: int, viewer: Viewer) -> render.Container:
    try:
        return use_case.execute(group_id, viewer)
    except DomainError as e:
        logger.warning("group_page_unavailable", group_id=group_id, error=str(e))
        raise http_error_for(e)

@router.get(
    "/{group_id}",
    name="groups.view",
    response_model=render.Container,
    status_code=status.HTTP_200_OK,
    summary="Group page render tree",
)
@inject
def view_group(
    group_id: int,
    viewer: Viewer = Depends(get_current_viewer),
    use_case: BuildGroupPage = Depends(Provide[Container.build_group_page_use_case]),
):
    """
    Returns the full view of a group as a typed render tree.

    Authenticated viewers also get the subscription widget: either a
    subscribe prompt or, for active members, a leave link.
    """
    return _build_page(use_case, group_id, viewer)

@router.get(
    "/{group_id}/page",
    name="groups.page",
    response_class=HTMLResponse,
    summary="Group page as HTML",
)
@inject
def view_group_page(
    group_id: int,
    request: Request,
    viewer: Viewer = Depends(get_current_viewer),
    use_case: BuildGroupPage = Depends(Provide[Container.build_group_page_use_case]),
):
    page = _build_page(use_case, group_id, viewer)

    def url_for(route: render.RouteRef) -> str:
        params = {key: str(value) for key, value in route.params.items()}
        return request.app.url_path_for(route.name, **params)

    title = next((t.value for t in render.texts(page) if t.tag == "h1"), "")
    return HTMLResponse(render_document(title, render_html(page, url_for)))
