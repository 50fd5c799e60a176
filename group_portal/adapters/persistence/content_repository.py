# group_portal/adapters/persistence/content_repository.py

from __future__ import annotations

from typing import Iterable, Optional

from sqlalchemy import text
from sqlalchemy.orm import Session, sessionmaker

from group_portal.core.domain.models import Group, Viewer
from group_portal.core.ports.account_repository import IAccountRepository
from group_portal.core.ports.group_repository import IGroupRepository

from .models import AccountRecord, ContentRecord


class SqlGroupRepository(IGroupRepository):
    """
    Thin data-access layer around the content table.

    Only content stored under `entity_type_id` (the configured group entity
    type) is visible through `get`.
    """

    def __init__(self, session_factory: sessionmaker[Session], entity_type_id: str = "node") -> None:
        self._session_factory = session_factory
        self.entity_type_id = entity_type_id

    def get(self, group_id: int) -> Optional[Group]:
        with self._session_factory() as session:
            record = session.get(ContentRecord, group_id)
            if record is None or record.entity_type_id != self.entity_type_id:
                return None
            return Group(
                id=record.id,
                title=record.title,
                entity_type_id=record.entity_type_id,
                bundle=record.bundle,
                owner_id=record.owner_id,
                og_group=record.og_group,
            )

    def add(self, group: Group) -> Group:
        with self._session_factory() as session:
            session.add(
                ContentRecord(
                    id=group.id,
                    title=group.title,
                    entity_type_id=group.entity_type_id,
                    bundle=group.bundle,
                    owner_id=group.owner_id,
                    og_group=group.og_group,
                )
            )
            session.commit()
        return group

    def health_check(self) -> bool:
        with self._session_factory() as session:
            session.execute(text("SELECT 1"))
        return True


class SqlAccountRepository(IAccountRepository):
    """
    Loads user accounts as authenticated viewers.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get_viewer(self, viewer_id: int) -> Optional[Viewer]:
        with self._session_factory() as session:
            record = session.get(AccountRecord, viewer_id)
            if record is None:
                return None
            return Viewer(
                id=record.id,
                display_name=record.name,
                is_authenticated=True,
                roles=list(record.roles or []),
            )

    def add(self, viewer_id: int, name: str, roles: Iterable[str] = ()) -> Viewer:
        with self._session_factory() as session:
            session.add(AccountRecord(id=viewer_id, name=name, roles=list(roles)))
            session.commit()
        return Viewer(id=viewer_id, display_name=name, is_authenticated=True, roles=list(roles))
