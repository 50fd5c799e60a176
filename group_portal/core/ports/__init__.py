# group_portal\core\ports\__init__.py
"""
Core Ports (Interfaces).

Protocols the Infrastructure Adapters must implement. They let the core
ask permission questions and read or write memberships without knowing
whether a database, a remote service or a test double answers.
"""

from .access_oracle import IAccessOracle
from .account_repository import IAccountRepository
from .group_repository import IGroupRepository
from .membership_store import IMembershipStore

__all__ = [
    "IAccessOracle",
    "IAccountRepository",
    "IGroupRepository",
    "IMembershipStore",
]
