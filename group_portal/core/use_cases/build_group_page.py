# group_portal/core/use_cases/build_group_page.py
import structlog

from group_portal.core.domain import render
from group_portal.core.domain.exceptions import GroupNotFoundError
from group_portal.core.domain.models import Viewer
from group_portal.core.ports.group_repository import IGroupRepository
from group_portal.core.use_cases.page_layout import PageLayout
from group_portal.core.use_cases.subscription_widget import GroupPageSubscriptionWidget
from group_portal.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class BuildGroupPage:
    """
    Use Case: Builds the full view of a group page.

    Responsibilities:
    1. Loads the group content.
    2. Renders the page title.
    3. Adds the subscription widget for authenticated viewers.
    4. Wraps everything in the page layout containers.
    """

    def __init__(
        self,
        groups: IGroupRepository,
        widget: GroupPageSubscriptionWidget,
        layout: PageLayout,
    ):
        self.groups = groups
        self.widget = widget
        self.layout = layout

    def execute(self, group_id: int, viewer: Viewer) -> render.Container:
        """
        Args:
            group_id: Identifier of the group content.
            viewer: The requesting identity.

        Returns:
            The page render tree.

        Raises:
            GroupNotFoundError: if no content exists for group_id.
        """
        with tracer.start_as_current_span("use_case.build_group_page") as span:
            span.set_attribute("app.group_id", group_id)
            span.set_attribute("app.viewer_authenticated", viewer.is_authenticated)

            group = self.groups.get(group_id)
            if group is None:
                raise GroupNotFoundError(group_id)

            elements = [self.layout.wrap_container_wide(self.layout.page_title(group.title))]

            if viewer.is_authenticated:
                subscription = self.widget.build(group, viewer)
                if subscription is not None:
                    elements.append(self.layout.wrap_container_wide(subscription))

            page = self.layout.wrap_container_vertical_spacing_big(elements)
            logger.info("group_page_built", group_id=group_id, viewer_id=viewer.id, sections=len(elements))
            return self.layout.wrap_container_bottom_padding(page)
