# tests\conftest.py
import pytest
from unittest.mock import MagicMock

from dependency_injector import providers

from group_portal.shared.config import AppEnv, Settings
from group_portal.shared.container import Container
from group_portal.core.domain.models import Group, Viewer
from group_portal.core.ports.access_oracle import IAccessOracle
from group_portal.core.ports.account_repository import IAccountRepository
from group_portal.core.ports.group_repository import IGroupRepository
from group_portal.core.ports.membership_store import IMembershipStore
from group_portal.adapters.persistence.session import init_schema

@pytest.fixture
def test_settings():
    """Settings pointing at a private in-memory SQLite database."""
    return Settings(
        APP_ENV=AppEnv.TESTING,
        DATABASE_URL="sqlite://",
        LOG_FORMAT="console",
    )

@pytest.fixture
def group():
    return Group(id=1, title="Test Group", owner_id=99, og_group=True)

@pytest.fixture
def plain_page():
    """Content without the group marker."""
    return Group(id=2, title="About Us", bundle="page", og_group=None)

@pytest.fixture
def alice():
    return Viewer(id=7, display_name="Alice", is_authenticated=True)

@pytest.fixture
def anonymous():
    return Viewer.anonymous()

@pytest.fixture(scope="function")
def mock_access_oracle():
    """Returns an access oracle that allows everything."""
    oracle = MagicMock(spec=IAccessOracle)
    oracle.user_access.return_value = True
    return oracle

@pytest.fixture(scope="function")
def mock_membership_store():
    """Returns a membership store with no memberships."""
    store = MagicMock(spec=IMembershipStore)
    store.get_membership.return_value = None
    store.save.side_effect = lambda membership: membership
    store.health_check.return_value = True
    return store

@pytest.fixture(scope="function")
def mock_group_repository(group, plain_page):
    repo = MagicMock(spec=IGroupRepository)
    repo.get.side_effect = {group.id: group, plain_page.id: plain_page}.get
    repo.health_check.return_value = True
    return repo

@pytest.fixture(scope="function")
def mock_account_repository():
    accounts = MagicMock(spec=IAccountRepository)
    accounts.get_viewer.return_value = None
    return accounts

@pytest.fixture(scope="function")
def container(
    test_settings,
    mock_access_oracle,
    mock_membership_store,
    mock_group_repository,
    mock_account_repository,
):
    """
    Sets up the Dependency Injection Container for testing.
    It overrides the infrastructure providers with the mocks defined above.
    """
    container = Container()
    container.config.override(providers.Object(test_settings))

    container.access_oracle.override(mock_access_oracle)
    container.membership_store.override(mock_membership_store)
    container.group_repository.override(mock_group_repository)
    container.account_repository.override(mock_account_repository)

    yield container

    container.unwire()
    container.reset_override()

@pytest.fixture(scope="function")
def sql_container(test_settings):
    """
    A container with the real SQL adapters on an in-memory database.
    The schema is created up front so adapters can be used without the app.
    """
    container = Container()
    container.config.override(providers.Object(test_settings))
    init_schema(container.db_engine())

    yield container

    container.unwire()
    container.db_engine().dispose()
    container.reset_override()
