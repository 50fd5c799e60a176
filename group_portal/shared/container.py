# group_portal\shared\container.py
from dependency_injector import containers, providers

from group_portal.shared.config import settings
from group_portal.adapters.access.role_access_oracle import RoleAccessOracle
from group_portal.adapters.persistence.content_repository import (
    SqlAccountRepository,
    SqlGroupRepository,
)
from group_portal.adapters.persistence.membership_store import SqlMembershipStore
from group_portal.adapters.persistence.session import build_engine, build_session_factory

from group_portal.core.use_cases.build_group_page import BuildGroupPage
from group_portal.core.use_cases.manage_membership import LeaveGroup, SubscribeToGroup
from group_portal.core.use_cases.page_layout import PageLayout
from group_portal.core.use_cases.subscription_widget import GroupPageSubscriptionWidget

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Collaborators are chosen here, once, and handed to the use cases
    through their constructors.
    """

    # 1. Configuration
    # Wrapped in a provider so tests can override it.
    config = providers.Object(settings)

    # 2. Gateways (Infrastructure Adapters)

    db_engine = providers.Singleton(
        build_engine,
        database_url=config.provided.DATABASE_URL,
        echo=config.provided.DEBUG,
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=db_engine,
    )

    group_repository = providers.Singleton(
        SqlGroupRepository,
        session_factory=session_factory,
        entity_type_id=config.provided.GROUP_ENTITY_TYPE,
    )

    account_repository = providers.Singleton(
        SqlAccountRepository,
        session_factory=session_factory,
    )

    membership_store = providers.Singleton(
        SqlMembershipStore,
        session_factory=session_factory,
    )

    access_oracle = providers.Singleton(
        RoleAccessOracle,
        permissions=config.provided.GROUP_PERMISSIONS,
    )

    page_layout = providers.Singleton(PageLayout)

    # 3. Use Cases (Application Logic)
    # Factory: new instance per request, Singleton collaborators injected.

    subscription_widget = providers.Factory(
        GroupPageSubscriptionWidget,
        access_oracle=access_oracle,
        membership_store=membership_store,
        accounts=account_repository,
    )

    build_group_page_use_case = providers.Factory(
        BuildGroupPage,
        groups=group_repository,
        widget=subscription_widget,
        layout=page_layout,
    )

    subscribe_use_case = providers.Factory(
        SubscribeToGroup,
        groups=group_repository,
        access_oracle=access_oracle,
        membership_store=membership_store,
        membership_types=config.provided.MEMBERSHIP_TYPES,
    )

    leave_group_use_case = providers.Factory(
        LeaveGroup,
        groups=group_repository,
        membership_store=membership_store,
    )

# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
