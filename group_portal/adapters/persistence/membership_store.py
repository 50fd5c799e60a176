# group_portal/adapters/persistence/membership_store.py

from __future__ import annotations

from typing import Optional

import structlog
from sqlalchemy import select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from group_portal.core.domain.exceptions import MembershipConflictError
from group_portal.core.domain.models import Group, Membership, MembershipState, Viewer
from group_portal.core.ports.membership_store import IMembershipStore

from .models import MembershipRecord

logger = structlog.get_logger()


def _to_domain(record: MembershipRecord) -> Membership:
    return Membership(
        id=record.id,
        group_id=record.group_id,
        entity_type_id=record.entity_type_id,
        viewer_id=record.uid,
        membership_type=record.membership_type,
        state=record.state,
        created=record.created,
    )


class SqlMembershipStore(IMembershipStore):
    """
    MembershipStore backed by the `og_membership` table.

    Each call opens its own short-lived session, so reads always reflect
    the last committed write.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def get_membership(self, group: Group, viewer_id: int) -> Optional[Membership]:
        stmt = select(MembershipRecord).where(
            MembershipRecord.entity_type_id == group.entity_type_id,
            MembershipRecord.group_id == group.id,
            MembershipRecord.uid == viewer_id,
        )
        with self._session_factory() as session:
            record = session.execute(stmt).scalar_one_or_none()
            return _to_domain(record) if record else None

    def health_check(self) -> bool:
        with self._session_factory() as session:
            session.execute(text("SELECT 1"))
        return True

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create_membership(self, group: Group, viewer: Viewer, membership_type: str) -> Membership:
        return Membership(
            group_id=group.id,
            entity_type_id=group.entity_type_id,
            viewer_id=viewer.id,
            membership_type=membership_type,
            state=MembershipState.ACTIVE,
        )

    def save(self, membership: Membership) -> Membership:
        with self._session_factory() as session:
            record = session.get(MembershipRecord, membership.id) if membership.id else None
            if record is None:
                record = MembershipRecord(
                    entity_type_id=membership.entity_type_id,
                    group_id=membership.group_id,
                    uid=membership.viewer_id,
                )
                session.add(record)

            record.membership_type = membership.membership_type
            record.state = membership.state

            try:
                session.commit()
            except IntegrityError as e:
                session.rollback()
                logger.warning(
                    "membership_conflict",
                    group_id=membership.group_id,
                    viewer_id=membership.viewer_id,
                    error=str(e.orig),
                )
                raise MembershipConflictError(membership.group_id, membership.viewer_id) from e

            return _to_domain(record)

    def delete(self, membership: Membership) -> None:
        if membership.id is None:
            return
        with self._session_factory() as session:
            record = session.get(MembershipRecord, membership.id)
            if record is not None:
                session.delete(record)
                session.commit()
